"""
File relocation for the file move utility.

Moves every file directly inside a source directory into a destination
directory, one file at a time, keeping the same filename.
"""

import os
import shutil
import threading
from pathlib import Path

from tqdm import tqdm

from .errors import ErrorKind, SameDirectoryError
from .models import FileEntry, MoveReport
from .scanner import list_files
from .validator import validate_directory
from .visibility import VisibilityStrategy


def _move_file(entry: FileEntry, destination: Path) -> dict:
    """Move a single file, never raising for file-level problems."""
    res = {"name": entry.name, "status": "skipped", "error": None, "detail": None}
    src = entry.path
    dst = destination / entry.name

    # lexists so a dangling symlink at the destination still counts as taken
    if os.path.lexists(dst):
        res["error"] = ErrorKind.NAME_COLLISION
        res["detail"] = "Destination exists"
        return res

    if not os.path.lexists(src):
        res["error"] = ErrorKind.SOURCE_VANISHED
        res["detail"] = "Source not found"
        return res

    try:
        shutil.move(str(src), str(dst))
    except FileNotFoundError as e:
        res["error"] = ErrorKind.SOURCE_VANISHED
        res["detail"] = str(e)
        return res
    except PermissionError as e:
        res["error"] = ErrorKind.NOT_ACCESSIBLE
        res["detail"] = str(e)
        return res
    except OSError as e:
        res["error"] = ErrorKind.IO_ERROR
        res["detail"] = str(e)
        return res

    res["status"] = "moved"
    return res


def move_all(
    source: str | Path,
    destination: str | Path,
    cancel: threading.Event | None = None,
    progress: bool = True,
    strategy: VisibilityStrategy | None = None,
) -> MoveReport:
    """
    Move all files directly inside `source` into `destination`.

    Files are moved sequentially. A failing file is recorded and the batch
    carries on; only directory-level problems raise.

    Args:
        source: Directory to move files out of.
        destination: Directory to move files into.
        cancel: Checked before each file; when set, the batch stops early.
        progress: Show a tqdm progress bar.
        strategy: Hidden-file strategy used to skip hidden source files.

    Returns:
        MoveReport listing exactly the filenames that were relocated.

    Raises:
        InvalidPathError: Either directory fails validation.
        SameDirectoryError: Both resolve to the same directory.
        DirectoryUnreadableError: The source cannot be listed.
    """
    source = validate_directory(source)
    destination = validate_directory(destination)

    if os.path.samefile(source, destination):
        raise SameDirectoryError(f"Source and destination are the same directory: {source}", source)

    # Each entry is re-checked right before its move
    entries = list(list_files(source, strategy=strategy))
    report = MoveReport(source=source, destination=destination)

    with tqdm(total=len(entries), unit="file", disable=not progress) as pbar:
        for entry in entries:
            if cancel is not None and cancel.is_set():
                report.cancelled = True
                tqdm.write("[ABORT] Move cancelled")
                break

            res = _move_file(entry, destination)
            if res["status"] == "moved":
                report.moved.append(res["name"])
            else:
                report.failed.append((res["name"], res["error"]))
                tqdm.write(f"[ERROR] {res['error'].value}: {res['name']} ({res['detail']})")
            pbar.update(1)

    return report
