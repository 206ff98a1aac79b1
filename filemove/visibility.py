"""
Hidden-file handling for moved files.

Two strategies are supported:
- DotPrefixStrategy: renames `name` <-> `.name` (Unix convention).
- AttributeStrategy: flips a hidden flag on the entry without renaming it
  (Windows FILE_ATTRIBUTE_HIDDEN).

The strategy is picked once per process by select_strategy(); nothing else
in the package looks at the platform.
"""

import errno
import os
import sys
import threading
from abc import ABC, abstractmethod
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable, Protocol

from .errors import ErrorKind
from .models import VisibilityReport
from .utils import print_warning
from .validator import validate_directory


# -----------------------------------------------------------------------------
# Strategies
# -----------------------------------------------------------------------------

class VisibilityStrategy(ABC):
    """Mark a directory entry hidden or visible.

    `name` is always the visible (as-moved) filename. hide/show return True
    when the entry changed and False when it was already in the requested
    state. Missing entries raise FileNotFoundError, taken names raise
    FileExistsError.
    """

    name = "abstract"

    @abstractmethod
    def is_hidden(self, path: Path) -> bool:
        ...

    @abstractmethod
    def hide(self, directory: Path, name: str) -> bool:
        ...

    @abstractmethod
    def show(self, directory: Path, name: str) -> bool:
        ...


class DotPrefixStrategy(VisibilityStrategy):
    name = "dot-prefix"

    @staticmethod
    def hidden_name(name: str) -> str:
        return name if name.startswith('.') else f".{name}"

    def is_hidden(self, path: Path) -> bool:
        return path.name.startswith('.')

    def hide(self, directory: Path, name: str) -> bool:
        return self._rename(directory / name, directory / self.hidden_name(name))

    def show(self, directory: Path, name: str) -> bool:
        return self._rename(directory / self.hidden_name(name), directory / name)

    @staticmethod
    def _rename(current: Path, target: Path) -> bool:
        current_exists = os.path.lexists(current)
        if current == target:
            # Dotfiles are hidden by their own name, nothing to flip
            if current_exists:
                return False
            raise FileNotFoundError(errno.ENOENT, "No such file", str(current))

        target_exists = os.path.lexists(target)
        if not current_exists:
            if target_exists:
                return False
            raise FileNotFoundError(errno.ENOENT, "No such file", str(current))
        if target_exists:
            raise FileExistsError(errno.EEXIST, "Name already taken", str(target))

        os.rename(current, target)
        return True


class AttributeBackend(Protocol):
    def is_hidden(self, path: Path) -> bool: ...

    def set_hidden(self, path: Path, hidden: bool) -> None: ...


class AttributeStrategy(VisibilityStrategy):
    name = "attribute"

    def __init__(self, backend: AttributeBackend):
        self.backend = backend

    def is_hidden(self, path: Path) -> bool:
        try:
            return self.backend.is_hidden(path)
        except OSError:
            return False

    def hide(self, directory: Path, name: str) -> bool:
        return self._apply(directory / name, True)

    def show(self, directory: Path, name: str) -> bool:
        return self._apply(directory / name, False)

    def _apply(self, path: Path, hidden: bool) -> bool:
        if not os.path.lexists(path):
            raise FileNotFoundError(errno.ENOENT, "No such file", str(path))
        if self.backend.is_hidden(path) == hidden:
            return False
        self.backend.set_hidden(path, hidden)
        return True


# Windows file attribute bits
FILE_ATTRIBUTE_HIDDEN = 0x2
FILE_ATTRIBUTE_SYSTEM = 0x4
INVALID_FILE_ATTRIBUTES = 0xFFFFFFFF

ERROR_FILE_NOT_FOUND = 2
ERROR_PATH_NOT_FOUND = 3
ERROR_ACCESS_DENIED = 5


class WindowsAttributeBackend:
    """Hidden flag via kernel32 Get/SetFileAttributesW.

    Hiding sets HIDDEN and SYSTEM together; showing clears both.
    """

    flags = FILE_ATTRIBUTE_HIDDEN | FILE_ATTRIBUTE_SYSTEM

    def __init__(self, kernel32=None, get_last_error: Callable[[], int] | None = None):
        if kernel32 is None:
            import ctypes
            from ctypes import wintypes

            kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
            kernel32.GetFileAttributesW.argtypes = [wintypes.LPCWSTR]
            kernel32.GetFileAttributesW.restype = wintypes.DWORD
            kernel32.SetFileAttributesW.argtypes = [wintypes.LPCWSTR, wintypes.DWORD]
            kernel32.SetFileAttributesW.restype = wintypes.BOOL
            get_last_error = ctypes.get_last_error
        self.kernel32 = kernel32
        self._get_last_error = get_last_error or (lambda: 0)

    def get_attributes(self, path: Path) -> int:
        attrs = self.kernel32.GetFileAttributesW(str(path))
        if attrs in (INVALID_FILE_ATTRIBUTES, -1):
            raise self._error(path)
        return attrs

    def is_hidden(self, path: Path) -> bool:
        return bool(self.get_attributes(path) & FILE_ATTRIBUTE_HIDDEN)

    def set_hidden(self, path: Path, hidden: bool) -> None:
        attrs = self.get_attributes(path)
        new_attrs = attrs | self.flags if hidden else attrs & ~self.flags
        if not self.kernel32.SetFileAttributesW(str(path), new_attrs):
            raise self._error(path)

    def _error(self, path: Path) -> OSError:
        code = self._get_last_error()
        if code in (ERROR_FILE_NOT_FOUND, ERROR_PATH_NOT_FOUND):
            return FileNotFoundError(errno.ENOENT, "No such file", str(path))
        if code == ERROR_ACCESS_DENIED:
            return PermissionError(errno.EACCES, "Access denied", str(path))
        return OSError(errno.EIO, f"File attribute call failed (Windows error {code})", str(path))


def select_strategy(platform: str | None = None) -> VisibilityStrategy:
    """Return the hidden-file strategy for the host platform."""
    platform = platform or sys.platform
    if platform.startswith("win"):
        return AttributeStrategy(WindowsAttributeBackend())
    return DotPrefixStrategy()


# -----------------------------------------------------------------------------
# Toggler
# -----------------------------------------------------------------------------

class VisibilityState(Enum):
    SHOWN = "shown"
    HIDDEN = "hidden"


def _is_plain_name(name: str) -> bool:
    return bool(name) and name not in ('.', '..') and '/' not in name and os.sep not in name


class VisibilityToggler:
    """Hide or reveal a named set of files and track the shared visibility state."""

    def __init__(self, strategy: VisibilityStrategy | None = None):
        self.strategy = strategy or select_strategy()
        self.state = VisibilityState.SHOWN

    def set_visibility(
        self,
        directory: str | Path,
        filenames: Iterable[str],
        hidden: bool,
        cancel: threading.Event | None = None,
    ) -> VisibilityReport:
        """
        Hide (hidden=True) or show each file in `filenames` inside `directory`.

        One file failing never stops the others. The shared state flips only
        after the whole batch was attempted (not cancelled) and at least one
        file succeeded.

        Raises:
            InvalidPathError: `directory` is not a usable directory.
        """
        directory = validate_directory(directory)
        action = self.strategy.hide if hidden else self.strategy.show
        report = VisibilityReport(hidden=hidden)

        # Ledger may hold duplicates
        for name in dict.fromkeys(filenames):
            if cancel is not None and cancel.is_set():
                report.cancelled = True
                break

            if not _is_plain_name(name):
                report.failed.add((name, ErrorKind.FILE_NOT_FOUND))
                print_warning(f"Not a plain filename: {name!r}")
                continue

            try:
                changed = action(directory, name)
            except FileNotFoundError:
                kind = ErrorKind.FILE_NOT_FOUND
            except FileExistsError:
                kind = ErrorKind.NAME_COLLISION
            except PermissionError:
                kind = ErrorKind.NOT_ACCESSIBLE
            except OSError as e:
                kind = ErrorKind.IO_ERROR
                print_warning(f"{name}: {e}")
            else:
                report.succeeded.add(name)
                if not changed:
                    report.unchanged.add(name)
                continue

            report.failed.add((name, kind))
            print_warning(f"Could not {'hide' if hidden else 'show'} {name}: {kind.value}")

        if report.succeeded and not report.cancelled:
            self.state = VisibilityState.HIDDEN if hidden else VisibilityState.SHOWN

        return report
