"""
Session record of moved filenames.

The ledger decides which files the visibility toggle may touch. Entries are
kept in the order they were recorded and are never deduplicated.
"""

from typing import Iterable


class MoveLedger:
    def __init__(self):
        self._names: list[str] = []

    def record(self, filenames: Iterable[str]) -> None:
        """Append successfully moved filenames (an empty batch is fine)."""
        self._names.extend(filenames)

    def snapshot(self) -> list[str]:
        return list(self._names)

    def reset(self) -> None:
        self._names.clear()

    def __len__(self) -> int:
        return len(self._names)

    def __repr__(self) -> str:
        return f"MoveLedger({self._names!r})"
