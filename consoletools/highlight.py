"""Source loading, sanitization, and syntax highlighting for file previews.

Tries Pygments first, then a lightweight tokenizer fallback.
Also neutralizes terminal control bytes so printing a file has no side effects.
"""

from __future__ import annotations

import io
import keyword
import re
import tokenize
from pathlib import Path

from pygments import highlight as pygments_highlight_source
from pygments.formatters import TerminalFormatter
from pygments.lexers import TextLexer, get_lexer_for_filename
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from .ansi import RESET, Colors, Mods

DEFAULT_STYLE = "monokai"

_CONTROL_RE = re.compile(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x9f]")
_FORMATTERS: dict[str, TerminalFormatter] = {}


def read_text(path: Path) -> str:
    for encoding in ("utf-8", "utf-8-sig", "latin-1"):
        try:
            return path.read_text(encoding=encoding)
        except UnicodeDecodeError:
            continue
    return path.read_bytes().decode("utf-8", errors="replace")


def sanitize_terminal_text(source: str) -> str:
    """Escape terminal control bytes to avoid side effects (bell, cursor moves, etc.)."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        if ch in {"\n", "\r", "\t"}:
            out.append(ch)
            continue
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        out.append(ch)
    return "".join(out)


def _style_for_token(tok_type: int, value: str) -> str:
    if tok_type == tokenize.STRING:
        return Colors.GREEN
    if tok_type == tokenize.COMMENT:
        return Mods.DIM
    if tok_type == tokenize.NUMBER:
        return Colors.CYAN
    if tok_type == tokenize.OP:
        return Colors.YELLOW
    if tok_type == tokenize.NAME:
        if value in {"True", "False", "None"}:
            return Colors.PURPLE
        if keyword.iskeyword(value):
            return Mods.BOLD + Colors.BLUE
    return ""


def fallback_highlight(source: str) -> str:
    """Color Python-like tokens; returns ``source`` untouched if it does not tokenize."""
    out: list[str] = []
    try:
        for tok_type, value, _, _, _ in tokenize.generate_tokens(io.StringIO(source).readline):
            style = _style_for_token(tok_type, value)
            out.append(style + value + RESET if style else value)
    except (tokenize.TokenError, SyntaxError):
        return source
    return "".join(out)


def _formatter_for_style(style: str) -> TerminalFormatter:
    formatter = _FORMATTERS.get(style)
    if formatter is not None:
        return formatter
    try:
        get_style_by_name(style)
    except ClassNotFound:
        style = DEFAULT_STYLE
    formatter = _FORMATTERS.setdefault(style, TerminalFormatter(style=style))
    return formatter


def pygments_highlight(source: str, path: Path, style: str = DEFAULT_STYLE) -> str:
    formatter = _formatter_for_style(style)
    try:
        lexer = get_lexer_for_filename(path.name, source)
    except ClassNotFound:
        lexer = TextLexer()
    return pygments_highlight_source(source, lexer, formatter)


def colorize_source(source: str, path: Path, style: str = DEFAULT_STYLE) -> str:
    rendered = pygments_highlight(source, path, style)
    if "\x1b[" in rendered:
        return rendered

    if path.suffix == ".py":
        fallback = fallback_highlight(source)
        if "\x1b[" in fallback:
            return fallback

    return rendered


__all__ = [
    "DEFAULT_STYLE",
    "colorize_source",
    "fallback_highlight",
    "pygments_highlight",
    "read_text",
    "sanitize_terminal_text",
]
