"""Filesystem scanning into numbered listings."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from .types import DirectoryEntry, EntryKind, Listing

logger = logging.getLogger(__name__)


def _entry_kind(child: os.DirEntry[str]) -> EntryKind:
    try:
        # Follows symlinks, so a link to a directory is navigable.
        return EntryKind.DIRECTORY if child.is_dir() else EntryKind.FILE
    except OSError:
        return EntryKind.FILE


def list_directory(directory: Path, show_hidden: bool = True, sort_entries: bool = False) -> Listing:
    """Scan ``directory`` and number its immediate children from 1.

    Without ``sort_entries`` children keep ``os.scandir`` order, which is
    platform-defined. With it, directories come first and names compare
    case-insensitively. Scan failures are returned on ``Listing.error`` with no
    entries rather than raised.
    """
    scanned: list[tuple[EntryKind, str, Path]] = []
    try:
        with os.scandir(directory) as children:
            for child in children:
                if not show_hidden and child.name.startswith("."):
                    continue
                scanned.append((_entry_kind(child), child.name, directory / child.name))
    except OSError as exc:
        logger.warning("cannot list %s: %s", directory, exc)
        return Listing(directory=directory, error=exc)

    if sort_entries:
        scanned.sort(key=lambda item: (item[0] is not EntryKind.DIRECTORY, item[1].lower(), item[1]))

    entries = tuple(
        DirectoryEntry(index=index, kind=kind, name=name, path=path)
        for index, (kind, name, path) in enumerate(scanned, start=1)
    )
    return Listing(directory=directory, entries=entries)


__all__ = ["list_directory"]
