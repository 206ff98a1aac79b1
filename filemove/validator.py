"""
Directory validation for the file move utility.

Every operation re-validates its directories; a validated path is never
cached as trusted.
"""

import os
from pathlib import Path

from .errors import PathNotAccessibleError, PathNotDirectoryError, PathNotFoundError


def validate_directory(path: str | Path | None) -> Path:
    """
    Confirm that a user-supplied path is an accessible directory.

    Args:
        path: Path string or Path as typed or picked by the user. May be empty.

    Returns:
        The resolved directory path.

    Raises:
        PathNotFoundError: Empty input or nothing at that path.
        PathNotDirectoryError: The path exists but is not a directory.
        PathNotAccessibleError: The directory cannot be read and written.
    """
    if path is None or not str(path).strip():
        raise PathNotFoundError("No directory selected", path)

    candidate = Path(str(path).strip()).expanduser()
    try:
        resolved = candidate.resolve()
    except ValueError as e:
        raise PathNotFoundError(f"Invalid path {candidate!r}: {e}", candidate) from e
    except (OSError, RuntimeError) as e:
        raise PathNotAccessibleError(f"Cannot resolve {candidate}: {e}", candidate) from e

    if not resolved.exists():
        raise PathNotFoundError(f"Directory does not exist: {resolved}", resolved)

    if not resolved.is_dir():
        raise PathNotDirectoryError(f"Not a directory: {resolved}", resolved)

    # Listing needs read+search, moving in or out needs write
    if not os.access(resolved, os.R_OK | os.W_OK | os.X_OK):
        raise PathNotAccessibleError(f"Directory is not accessible: {resolved}", resolved)

    return resolved
