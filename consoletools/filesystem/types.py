"""Domain datatypes for numbered directory listings."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path


class EntryKind(enum.Enum):
    DIRECTORY = "Dir"
    FILE = "File"

    @property
    def tag(self) -> str:
        """Label shown next to an entry's index, e.g. ``(Dir)``."""
        return f"({self.value})"


@dataclass(frozen=True)
class DirectoryEntry:
    """One listed child of a directory with its display index."""

    index: int
    kind: EntryKind
    name: str
    path: Path

    @property
    def is_dir(self) -> bool:
        return self.kind is EntryKind.DIRECTORY


@dataclass(frozen=True)
class Listing:
    """Entries of ``directory`` as rendered in one navigator iteration.

    Indices are only meaningful for the listing that produced them; a fresh
    listing is built after every command.
    """

    directory: Path
    entries: tuple[DirectoryEntry, ...] = ()
    error: OSError | None = None

    def __len__(self) -> int:
        return len(self.entries)

    def lookup(self, token: str) -> DirectoryEntry | None:
        """Return the entry whose index is spelled exactly as ``token``."""
        if not token.isdigit() or not token.isascii():
            return None
        position = int(token)
        if str(position) != token or not 1 <= position <= len(self.entries):
            return None
        return self.entries[position - 1]


__all__ = [
    "DirectoryEntry",
    "EntryKind",
    "Listing",
]
