from dataclasses import dataclass, field
from pathlib import Path

from .errors import ErrorKind


@dataclass(frozen=True)
class FileEntry:
    """A file directly inside `directory`; `name` has no path separators."""
    directory: Path
    name: str

    @property
    def path(self) -> Path:
        return self.directory / self.name


@dataclass
class MoveReport:
    source: Path
    destination: Path
    moved: list[str] = field(default_factory=list)  # only names actually relocated
    failed: list[tuple[str, ErrorKind]] = field(default_factory=list)
    cancelled: bool = False

    def to_dict(self) -> dict:
        return {
            "source": str(self.source),
            "destination": str(self.destination),
            "moved": list(self.moved),
            "failed": [{"name": n, "error": k.value} for n, k in self.failed],
            "cancelled": self.cancelled,
        }


@dataclass
class VisibilityReport:
    hidden: bool
    succeeded: set[str] = field(default_factory=set)
    unchanged: set[str] = field(default_factory=set)  # subset of succeeded
    failed: set[tuple[str, ErrorKind]] = field(default_factory=set)
    cancelled: bool = False

    def to_dict(self) -> dict:
        return {
            "hidden": self.hidden,
            "succeeded": sorted(self.succeeded),
            "unchanged": sorted(self.unchanged),
            "failed": [{"name": n, "error": k.value} for n, k in sorted(self.failed)],
            "cancelled": self.cancelled,
        }
