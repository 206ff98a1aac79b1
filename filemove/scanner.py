"""
Directory listing for the file move utility.

Only the immediate files of a directory are listed; nothing is recursed into.
"""

import os
from pathlib import Path
from typing import Iterator

from .errors import DirectoryUnreadableError
from .models import FileEntry
from .visibility import DotPrefixStrategy, VisibilityStrategy


def list_files(
    directory: Path,
    include_hidden: bool = False,
    strategy: VisibilityStrategy | None = None,
) -> Iterator[FileEntry]:
    """
    List the regular files directly inside a directory.

    The directory is read up front so an unreadable directory fails here,
    not on first iteration. The returned iterator is lazy about inspecting
    entries and can only be consumed once.

    Args:
        directory: A validated directory.
        include_hidden: Also yield entries the strategy considers hidden.
        strategy: Decides what counts as hidden (dot-prefix if not given).

    Returns:
        Iterator of FileEntry, ordered by name.

    Raises:
        DirectoryUnreadableError: The directory cannot be listed.
    """
    directory = Path(directory)
    strategy = strategy or DotPrefixStrategy()

    try:
        with os.scandir(directory) as it:
            names = sorted(entry.name for entry in it)
    except OSError as e:
        raise DirectoryUnreadableError(f"Failed to read directory {directory}: {e}", directory) from e

    return _iter_entries(directory, names, include_hidden, strategy)


def _iter_entries(
    directory: Path,
    names: list[str],
    include_hidden: bool,
    strategy: VisibilityStrategy,
) -> Iterator[FileEntry]:
    for name in names:
        path = directory / name

        # is_file() follows symlinks: links to files stay, links to dirs and
        # dangling links drop out. Entries removed since the listing too.
        try:
            if not path.is_file():
                continue
        except OSError:
            continue

        if not include_hidden and strategy.is_hidden(path):
            continue

        yield FileEntry(directory=directory, name=name)
