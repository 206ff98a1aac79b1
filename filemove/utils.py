"""
Utility functions for the file move utility.

Includes:
- Console helpers (rich)
- Timestamped status log
- JSON report saving
"""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.tree import Tree

# Global console instance
console = Console()

def print_header(title: str, subtitle: str = ""):
    """Print a styled header."""
    console.print(Panel(f"[bold blue]{title}[/bold blue]\n[italic]{subtitle}[/italic]", expand=False))

def print_error(msg: str):
    console.print(f"[bold red]ERROR:[/bold red] {msg}")

def print_warning(msg: str):
    console.print(f"[bold yellow]WARNING:[/bold yellow] {msg}")

def print_success(msg: str):
    console.print(f"[bold green]SUCCESS:[/bold green] {msg}")


def log_status(msg: str) -> str:
    """Print a status line prefixed with a UTC timestamp and return it."""
    timestamp = datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S")
    line = f"[{timestamp}] {msg}"
    # markup=False so the bracketed timestamp is not read as a style tag
    console.print(line, markup=False, highlight=False)
    return line


def print_move_table(report: dict):
    """Print a summary table of a move report (as produced by MoveReport.to_dict)."""
    moved = report.get("moved", [])
    failed = report.get("failed", [])

    table = Table(title="Move Summary")
    table.add_column("Metric", style="cyan")
    table.add_column("Count", style="magenta")

    table.add_row("Moved", str(len(moved)))
    table.add_row("Failed", str(len(failed)))
    if report.get("cancelled"):
        table.add_row("Cancelled", "yes")

    console.print(table)

    if failed:
        tree = Tree("[bold red]Failures[/bold red]")
        for item in failed[:10]:
            tree.add(f"[yellow]{item['name']}[/yellow] -> [red]{item['error']}[/red]")
        if len(failed) > 10:
            tree.add(f"[italic]... and {len(failed)-10} more[/italic]")
        console.print(tree)


def save_json(data: Any, path: Path) -> None:
    """
    Save data to a JSON file with pretty formatting.

    Args:
        data: The data to serialize.
        path: The output file path.
    """
    with open(path, 'w', encoding='utf-8') as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    console.print(f"[INFO] Saved: {path}", markup=False)
