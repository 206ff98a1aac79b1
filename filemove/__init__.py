"""
File Move Utility
=================

Move the files of a source directory into a destination directory, then
hide or reveal exactly those files using the host's hidden-file convention.
"""

__version__ = "1.0.0"

from .errors import (
    ErrorKind,
    FileMoveError,
    InvalidPathError,
    PathNotFoundError,
    PathNotDirectoryError,
    PathNotAccessibleError,
    DirectoryUnreadableError,
    SameDirectoryError,
)
from .validator import validate_directory
from .scanner import list_files
from .executor import move_all
from .ledger import MoveLedger
from .models import FileEntry, MoveReport, VisibilityReport
from .visibility import (
    VisibilityStrategy,
    DotPrefixStrategy,
    AttributeStrategy,
    WindowsAttributeBackend,
    VisibilityState,
    VisibilityToggler,
    select_strategy,
)
from .session import Session

__all__ = [
    "ErrorKind",
    "FileMoveError",
    "InvalidPathError",
    "PathNotFoundError",
    "PathNotDirectoryError",
    "PathNotAccessibleError",
    "DirectoryUnreadableError",
    "SameDirectoryError",
    "validate_directory",
    "list_files",
    "move_all",
    "MoveLedger",
    "FileEntry",
    "MoveReport",
    "VisibilityReport",
    "VisibilityStrategy",
    "DotPrefixStrategy",
    "AttributeStrategy",
    "WindowsAttributeBackend",
    "VisibilityState",
    "VisibilityToggler",
    "select_strategy",
    "Session",
]
