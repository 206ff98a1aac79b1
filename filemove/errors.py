"""
Error taxonomy for the file move utility.

Directory-level problems are raised as exceptions and abort the whole
operation. File-level problems are reported per file with an ErrorKind
and never abort a batch.
"""

from enum import Enum
from pathlib import Path


class ErrorKind(str, Enum):
    NOT_FOUND = "not_found"
    NOT_A_DIRECTORY = "not_a_directory"
    NOT_ACCESSIBLE = "not_accessible"
    DIRECTORY_UNREADABLE = "directory_unreadable"
    SAME_DIRECTORY = "same_directory"
    NAME_COLLISION = "name_collision"
    SOURCE_VANISHED = "source_vanished"
    FILE_NOT_FOUND = "file_not_found"
    IO_ERROR = "io_error"


class FileMoveError(Exception):
    """Base error for the project."""

    kind: ErrorKind = ErrorKind.IO_ERROR

    def __init__(self, message: str, path: Path | str | None = None):
        super().__init__(message)
        self.path = path


class InvalidPathError(FileMoveError):
    pass


class PathNotFoundError(InvalidPathError):
    kind = ErrorKind.NOT_FOUND


class PathNotDirectoryError(InvalidPathError):
    kind = ErrorKind.NOT_A_DIRECTORY


class PathNotAccessibleError(InvalidPathError):
    kind = ErrorKind.NOT_ACCESSIBLE


class DirectoryUnreadableError(FileMoveError):
    kind = ErrorKind.DIRECTORY_UNREADABLE


class SameDirectoryError(FileMoveError):
    kind = ErrorKind.SAME_DIRECTORY
