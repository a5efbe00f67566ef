"""Filesystem helpers and the interactive directory navigator.

This package contains:
- listing datatypes with per-render display indices
- directory scanning into numbered listings
- plain-text file read/append/create helpers
- the navigator session loop
"""

from __future__ import annotations

from .types import DirectoryEntry, EntryKind, Listing
from .listing import list_directory
from .files import (
    DEFAULT_FILENAME,
    TextFile,
    append_text,
    create_empty_file,
    create_file,
    read_file,
    validate_filename,
)
from .navigator import DirectoryNavigator, Step

__all__ = [
    "DirectoryEntry",
    "EntryKind",
    "Listing",
    "list_directory",
    "DEFAULT_FILENAME",
    "TextFile",
    "append_text",
    "create_empty_file",
    "create_file",
    "read_file",
    "validate_filename",
    "DirectoryNavigator",
    "Step",
]
