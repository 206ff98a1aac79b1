"""
Configuration for the file move utility.

Command-line flags win; otherwise defaults come from the environment, which
may be populated from a .env file in the working directory.
"""

import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class Settings:
    source: str | None = None
    destination: str | None = None
    show_progress: bool = True


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in {"1", "true", "yes", "on"}


def load_settings() -> Settings:
    """Read FILEMOVE_* settings from the environment (and .env)."""
    load_dotenv()
    return Settings(
        source=os.environ.get("FILEMOVE_SOURCE") or None,
        destination=os.environ.get("FILEMOVE_DESTINATION") or None,
        show_progress=not _env_flag("FILEMOVE_NO_PROGRESS"),
    )
