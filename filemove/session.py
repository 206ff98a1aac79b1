"""
Session controller: the three operations the presentation layer calls.

- pick_directory: ask an OS chooser for a directory
- move_files: move everything from source to destination and remember it
- set_files_visibility: hide or show a named set of files

A session owns the move ledger and the shared visibility state.
"""

import threading
from pathlib import Path
from typing import Callable, Iterable

from .executor import move_all
from .ledger import MoveLedger
from .models import MoveReport, VisibilityReport
from .utils import log_status, print_warning
from .validator import validate_directory
from .visibility import VisibilityState, VisibilityStrategy, VisibilityToggler

DirectoryChooser = Callable[[], str | None]


class Session:
    def __init__(
        self,
        strategy: VisibilityStrategy | None = None,
        show_progress: bool = True,
    ):
        self.toggler = VisibilityToggler(strategy)
        self.ledger = MoveLedger()
        self.show_progress = show_progress
        self.source: Path | None = None
        self.destination: Path | None = None
        self.last_move: MoveReport | None = None
        self.last_visibility: VisibilityReport | None = None

    @property
    def strategy(self) -> VisibilityStrategy:
        return self.toggler.strategy

    @property
    def state(self) -> VisibilityState:
        return self.toggler.state

    # -------------------------------------------------------------------------
    # Directory selection
    # -------------------------------------------------------------------------

    def pick_directory(self, chooser: DirectoryChooser) -> Path | None:
        """Ask `chooser` for a directory; None if the user cancelled."""
        log_status("Opening folder selection dialog...")
        selected = chooser()
        if not selected:
            log_status("No directory selected")
            return None
        return validate_directory(selected)

    def select_source(self, path: str | Path) -> Path:
        source = validate_directory(path)
        if source != self.source:
            # What was moved from the old source must not leak into this one
            self.ledger.reset()
        self.source = source
        log_status("Source directory selected")
        return source

    def select_destination(self, path: str | Path) -> Path:
        destination = validate_directory(path)
        if destination != self.destination:
            # Ledger names only identify files inside the destination they went to
            if self.ledger and self.state is VisibilityState.HIDDEN:
                print_warning(f"{len(self.ledger)} moved file(s) stay hidden in {self.destination}")
            self.ledger.reset()
            self.toggler.state = VisibilityState.SHOWN
        self.destination = destination
        log_status("Destination directory selected")
        return self.destination

    # -------------------------------------------------------------------------
    # Operations
    # -------------------------------------------------------------------------

    def move_files(
        self,
        source: str | Path | None = None,
        destination: str | Path | None = None,
        cancel: threading.Event | None = None,
    ) -> list[str]:
        """
        Move files from source to destination and record them in the ledger.

        Falls back to the selected directories when none are passed. Passing
        a different source counts as selecting it.

        Returns:
            Filenames that were actually moved.
        """
        if source is not None:
            self.select_source(source)
        if destination is not None:
            self.select_destination(destination)

        log_status("Moving files from source to destination...")
        report = move_all(
            self.source or "",
            self.destination or "",
            cancel=cancel,
            progress=self.show_progress,
            strategy=self.strategy,
        )
        self.ledger.record(report.moved)
        self.last_move = report

        log_status(f"Successfully moved {len(report.moved)} file(s) to destination")
        if report.failed:
            print_warning(f"{len(report.failed)} file(s) could not be moved")
        return list(report.moved)

    def set_files_visibility(
        self,
        directory: str | Path,
        filenames: Iterable[str],
        hidden: bool,
        cancel: threading.Event | None = None,
    ) -> VisibilityReport:
        """Hide or show files; raises only when `directory` itself is invalid."""
        report = self.toggler.set_visibility(directory, filenames, hidden, cancel=cancel)
        self.last_visibility = report

        verb = "Hidden" if hidden else "Shown"
        log_status(f"{verb} {len(report.succeeded)} file(s) in {directory}")
        if report.failed:
            print_warning(f"{len(report.failed)} file(s) could not be {'hidden' if hidden else 'shown'}")
        return report

    def toggle_visibility(self, cancel: threading.Event | None = None) -> VisibilityReport | None:
        """Flip every ledger file in the destination; None when nothing was moved."""
        if not self.ledger:
            log_status("No files have been moved yet")
            return None

        hidden = self.state is VisibilityState.SHOWN
        return self.set_files_visibility(
            self.destination or "", self.ledger.snapshot(), hidden, cancel=cancel
        )
