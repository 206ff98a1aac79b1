#!/usr/bin/env python3
"""
File Move Utility - CLI Entry Point
===================================

Usage:
    python -m filemove list /path/to/dir --all
    python -m filemove move /path/to/source /path/to/destination
    python -m filemove hide /path/to/destination report.pdf notes.txt
    python -m filemove show /path/to/destination report.pdf notes.txt
    python -m filemove session --dialog
"""

import argparse
import sys
from pathlib import Path

from rich.markup import escape
from rich.prompt import Prompt

from .config import load_settings
from .errors import FileMoveError
from .executor import move_all
from .scanner import list_files
from .session import DirectoryChooser, Session
from .utils import console, print_error, print_header, print_move_table, print_success, print_warning, save_json
from .validator import validate_directory
from .visibility import VisibilityState, select_strategy


# =============================================================================
# Directory choosers
# =============================================================================

def prompt_chooser(label: str) -> DirectoryChooser:
    def choose() -> str | None:
        return Prompt.ask(f"[cyan]{label}[/cyan] (blank to cancel)", default="", show_default=False).strip() or None
    return choose


def dialog_chooser(label: str) -> DirectoryChooser:
    def choose() -> str | None:
        import tkinter as tk
        from tkinter import filedialog

        root = tk.Tk()
        root.withdraw()
        try:
            return filedialog.askdirectory(title=label, mustexist=True) or None
        finally:
            root.destroy()
    return choose


# =============================================================================
# Commands
# =============================================================================

def cmd_list(args) -> int:
    """List command - show files directly inside a directory."""
    directory = validate_directory(args.directory)
    strategy = select_strategy()
    count = 0
    for entry in list_files(directory, include_hidden=args.all, strategy=strategy):
        marker = " [dim](hidden)[/dim]" if strategy.is_hidden(entry.path) else ""
        console.print(f"{escape(entry.name)}{marker}")
        count += 1
    console.print(f"[INFO] {count} file(s) in {directory}", markup=False)
    return 0


def cmd_move(args) -> int:
    """Move command - move all files from source to destination."""
    settings = args.settings
    source = args.source or settings.source
    destination = args.destination or settings.destination

    print_header("MOVE FILES", f"Source: {source}\nDestination: {destination}")
    report = move_all(
        source or "",
        destination or "",
        progress=settings.show_progress,
        strategy=select_strategy(),
    )
    data = report.to_dict()
    print_move_table(data)

    if args.report_out:
        save_json(data, args.report_out)

    if report.moved:
        print_success(f"Moved {len(report.moved)} file(s)")
    else:
        print_warning("No files were moved")
    return 0


def _cmd_visibility(args, hidden: bool) -> int:
    session = Session(select_strategy(), show_progress=args.settings.show_progress)
    report = session.set_files_visibility(args.directory, args.names, hidden)
    for name, kind in sorted(report.failed):
        print_error(f"{name}: {kind.value}")
    return 0


def cmd_hide(args) -> int:
    """Hide command - hide named files in a directory."""
    return _cmd_visibility(args, True)


def cmd_show(args) -> int:
    """Show command - reveal named files in a directory."""
    return _cmd_visibility(args, False)


def cmd_session(args) -> int:
    """Session command - interactive select / move / toggle loop."""
    settings = args.settings
    session = Session(select_strategy(), show_progress=settings.show_progress)
    make_chooser = dialog_chooser if args.dialog else prompt_chooser

    print_header("File Move Utility", f"Hidden-file strategy: {session.strategy.name}")

    source = args.source or settings.source
    destination = args.destination or settings.destination
    try:
        if source:
            session.select_source(source)
        if destination:
            session.select_destination(destination)
    except FileMoveError as e:
        print_error(str(e))

    while True:
        toggle_label = "Hide moved files" if session.state is VisibilityState.SHOWN else "Show moved files"
        console.print(f"\nSource:      {session.source or 'No source directory selected'}", markup=False)
        console.print(f"Destination: {session.destination or 'No destination directory selected'}", markup=False)
        console.print(f"Moved files: {len(session.ledger)}", markup=False)
        console.print(f"[bold]s[/bold]) Select source  [bold]d[/bold]) Select destination  "
                      f"[bold]m[/bold]) Move files  [bold]t[/bold]) {toggle_label}  [bold]q[/bold]) Quit")
        choice = Prompt.ask("Choice", choices=["s", "d", "m", "t", "q"], default="q")

        try:
            if choice == "s":
                picked = session.pick_directory(make_chooser("Source directory"))
                if picked:
                    session.select_source(picked)
            elif choice == "d":
                picked = session.pick_directory(make_chooser("Destination directory"))
                if picked:
                    session.select_destination(picked)
            elif choice == "m":
                session.move_files()
                if session.last_move is not None:
                    print_move_table(session.last_move.to_dict())
            elif choice == "t":
                session.toggle_visibility()
            else:
                return 0
        except FileMoveError as e:
            print_error(str(e))


# =============================================================================
# Main
# =============================================================================

def main() -> int:
    parser = argparse.ArgumentParser(
        description="File Move Utility - move files between directories and hide/show them",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # --- LIST command ---
    list_parser = subparsers.add_parser("list", help="List files directly inside a directory")
    list_parser.add_argument("directory", type=str, help="Directory to list")
    list_parser.add_argument("--all", "-a", action="store_true",
                             help="Include hidden files")
    list_parser.set_defaults(func=cmd_list)

    # --- MOVE command ---
    move_parser = subparsers.add_parser("move", help="Move all files from source to destination")
    move_parser.add_argument("source", type=str, nargs="?", help="Source directory (default: $FILEMOVE_SOURCE)")
    move_parser.add_argument("destination", type=str, nargs="?",
                             help="Destination directory (default: $FILEMOVE_DESTINATION)")
    move_parser.add_argument("--report-out", type=Path, default=None,
                             help="Write a JSON move report to this file")
    move_parser.set_defaults(func=cmd_move)

    # --- HIDE / SHOW commands ---
    for name, func, help_text in (
        ("hide", cmd_hide, "Hide named files in a directory"),
        ("show", cmd_show, "Show named files in a directory"),
    ):
        vis_parser = subparsers.add_parser(name, help=help_text)
        vis_parser.add_argument("directory", type=str, help="Directory holding the files")
        vis_parser.add_argument("names", nargs="+", help="Visible filenames")
        vis_parser.set_defaults(func=func)

    # --- SESSION command ---
    session_parser = subparsers.add_parser("session", help="Interactive move / hide / show session")
    session_parser.add_argument("--source", type=str, help="Initial source directory")
    session_parser.add_argument("--destination", type=str, help="Initial destination directory")
    session_parser.add_argument("--dialog", action="store_true",
                                help="Pick directories with the OS folder dialog")
    session_parser.set_defaults(func=cmd_session)

    args = parser.parse_args()

    if args.command is None:
        parser.print_help()
        return 0

    args.settings = load_settings()

    try:
        return args.func(args)
    except FileMoveError as e:
        print_error(str(e))
        return 1
    except KeyboardInterrupt:
        print("\n[ABORT] Operation cancelled by user")
        return 130


if __name__ == "__main__":
    sys.exit(main())
