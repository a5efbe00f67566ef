"""ANSI escape codes and small helpers for styling terminal text.

Color and modifier tables match the classic SGR codes (30-37 / 40-47).
Styling helpers never emit codes for empty style arguments.
"""

from __future__ import annotations

import re

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")

RESET = "\x1b[0m"
CLEAR_SCREEN = "\x1b[2J\x1b[H"


class Colors:
    """Foreground and background color codes."""

    RED = "\x1b[31m"
    BLUE = "\x1b[34m"
    CYAN = "\x1b[36m"
    WHITE = "\x1b[37m"
    BLACK = "\x1b[30m"
    GREEN = "\x1b[32m"
    YELLOW = "\x1b[33m"
    PURPLE = "\x1b[35m"
    BACK_RED = "\x1b[41m"
    BACK_BLUE = "\x1b[44m"
    BACK_CYAN = "\x1b[46m"
    BACK_WHITE = "\x1b[47m"
    BACK_BLACK = "\x1b[40m"
    BACK_GREEN = "\x1b[42m"
    BACK_YELLOW = "\x1b[43m"
    BACK_PURPLE = "\x1b[45m"


class Mods:
    """Text attribute codes."""

    DIM = "\x1b[2m"
    BOLD = "\x1b[1m"
    BLINK = "\x1b[5m"
    HIDDEN = "\x1b[8m"
    REVERSE = "\x1b[7m"
    ITALICS = "\x1b[3m"
    UNDERLINE = "\x1b[4m"


def style_text(text: str, color: str = "", mod: str = "") -> str:
    """Wrap ``text`` in ``mod``/``color`` codes followed by a reset.

    Returns ``text`` unchanged when neither style is given.
    """
    if not color and not mod:
        return text
    return f"{mod}{color}{text}{RESET}"


def strip_ansi(text: str) -> str:
    """Remove every ANSI escape sequence from ``text``."""
    if "\x1b" not in text:
        return text
    return ANSI_ESCAPE_RE.sub("", text)


__all__ = [
    "ANSI_ESCAPE_RE",
    "CLEAR_SCREEN",
    "Colors",
    "Mods",
    "RESET",
    "strip_ansi",
    "style_text",
]
