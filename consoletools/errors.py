"""Exception types raised by consoletools helpers."""

from __future__ import annotations


class ConsoleToolsError(Exception):
    """Base class for consoletools errors."""


class FileOperationError(ConsoleToolsError, OSError):
    """A file could not be read, written, or created."""


class MissingTimePointError(ConsoleToolsError, LookupError):
    """An elapsed-time read was requested before both points were recorded."""


__all__ = [
    "ConsoleToolsError",
    "FileOperationError",
    "MissingTimePointError",
]
