"""Terminal text output and token input.

``TextRenderer`` writes optionally styled lines to a text stream and
``TokenReader`` yields whitespace-delimited tokens from one. Both take their
stream at construction so sessions can be scripted with ``io.StringIO``.
"""

from __future__ import annotations

import logging
import re
import sys
from collections import deque
from dataclasses import dataclass
from typing import TextIO

from .ansi import CLEAR_SCREEN, RESET
from .ui_theme import DEFAULT_THEME, NavigatorTheme

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[+-]?[0-9]+")
INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class TextRenderer:
    def __init__(self, stream: TextIO | None = None, color: bool = True) -> None:
        self._stream = stream
        self.color = color

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def print_text(self, text: str, color: str = "", mod: str = "", sep: str = "\n") -> None:
        """Write ``text`` followed by ``sep``.

        Styles wrap only ``text``; the reset code is emitted before ``sep`` so a
        trailing newline never carries color into the next line.
        """
        if self.color and (color or mod):
            self.write(f"{mod}{color}{text}{RESET}{sep}")
        else:
            self.write(f"{text}{sep}")

    def clear(self) -> None:
        """Clear the screen and home the cursor (no-op without color)."""
        if self.color:
            self.write(CLEAR_SCREEN)


class TokenReader:
    """Whitespace-delimited token source over a line-oriented text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream
        self._pending: deque[str] = deque()

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdin

    def read_token(self) -> str | None:
        """Return the next token, or ``None`` once the stream is exhausted."""
        while not self._pending:
            line = self.stream.readline()
            if not line:
                return None
            self._pending.extend(line.split())
        return self._pending.popleft()

    def discard_line(self) -> None:
        """Drop tokens still buffered from the current input line."""
        self._pending.clear()


@dataclass(frozen=True)
class ParsedInt:
    """Outcome of parsing one token as a decimal integer."""

    value: int | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.value is not None


def parse_int(token: str) -> ParsedInt:
    """Parse an optionally signed run of ASCII digits into a 32-bit int."""
    candidate = token.strip()
    if not _INT_RE.fullmatch(candidate):
        return ParsedInt(error=f"not an integer: {token!r}")
    value = int(candidate)
    if not INT_MIN <= value <= INT_MAX:
        return ParsedInt(error=f"out of range: {token!r}")
    return ParsedInt(value=value)


def read_int(
    reader: TokenReader,
    renderer: TextRenderer,
    theme: NavigatorTheme = DEFAULT_THEME,
) -> int:
    """Read tokens until one parses as an integer and return it.

    Each rejected token prints an error and a retry prompt, and the rest of
    its input line is discarded. Raises ``EOFError`` if input runs out.
    """
    while True:
        token = reader.read_token()
        if token is None:
            raise EOFError("input ended before an integer was read")
        parsed = parse_int(token)
        if parsed.ok:
            return parsed.value
        logger.debug("rejected integer input: %s", parsed.error)
        renderer.print_text("\nERROR: Invalid input!\n", theme.error)
        renderer.print_text("Try again:", theme.prompt, sep=" ")
        reader.discard_line()


__all__ = [
    "INT_MAX",
    "INT_MIN",
    "ParsedInt",
    "TextRenderer",
    "TokenReader",
    "parse_int",
    "read_int",
]
