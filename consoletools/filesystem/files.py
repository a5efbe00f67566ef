"""Plain-text file helpers: read, append, and create.

``create_empty_file`` backs the navigator's create command and only accepts a
bare filename inside the given directory.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from ..errors import FileOperationError

DEFAULT_FILENAME = "temporary_file.txt"


@dataclass(frozen=True)
class TextFile:
    """A path paired with text contents."""

    path: Path
    text: str = ""

    @classmethod
    def at(cls, path: Path, text: str = "") -> TextFile:
        """Target ``path``, or ``path / DEFAULT_FILENAME`` when it is a directory."""
        path = Path(path)
        if path.is_dir():
            path = path / DEFAULT_FILENAME
        return cls(path=path, text=text)

    @property
    def size(self) -> int:
        return len(self.text)

    @property
    def empty(self) -> bool:
        return not self.text

    @property
    def filename(self) -> str:
        return self.path.name

    @property
    def directory(self) -> Path:
        return self.path.parent

    def exists(self) -> bool:
        return self.path.is_file()


def read_file(path: Path) -> TextFile:
    path = Path(path)
    if not path.is_file():
        raise FileOperationError(f"Cannot open file: {path.name}")
    try:
        text = path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise FileOperationError(f"Cannot open file: {path.name}") from exc
    return TextFile(path=path, text=text)


def append_text(path: Path, text: str) -> bool:
    """Append ``text`` to an existing regular file.

    Returns ``False`` without touching the filesystem when ``path`` is missing
    or a directory.
    """
    path = Path(path)
    if not path.is_file():
        return False
    try:
        with path.open("a", encoding="utf-8") as handle:
            handle.write(text)
    except OSError as exc:
        raise FileOperationError(f"Cannot open file: {path.name}") from exc
    return True


def create_file(path: Path, text: str = "", *, overwrite: bool = True) -> TextFile:
    """Write ``text`` to ``path``, creating it.

    With ``overwrite=False`` an existing file is left alone and reported as an
    error.
    """
    target = TextFile.at(path, text)
    _write_new(target.path, text, overwrite)
    return target


def _write_new(path: Path, text: str, overwrite: bool) -> None:
    mode = "w" if overwrite else "x"
    try:
        with path.open(mode, encoding="utf-8") as handle:
            handle.write(text)
    except FileExistsError as exc:
        raise FileOperationError(f"Cannot create file: {path.name} already exists") from exc
    except OSError as exc:
        raise FileOperationError(f"Cannot create file: {path.name} ({exc.strerror or exc})") from exc


def validate_filename(name: str) -> str | None:
    """Return a reason ``name`` is not a bare filename, or ``None`` if it is."""
    if not name or not name.strip():
        return "empty filename"
    if name in {".", ".."}:
        return f"invalid filename {name!r}"
    separators = {os.sep, "/"}
    if os.altsep:
        separators.add(os.altsep)
    if any(sep in name for sep in separators) or "\x00" in name:
        return f"invalid filename {name!r}"
    return None


def create_empty_file(directory: Path, name: str) -> Path:
    """Create an empty file called ``name`` directly inside ``directory``.

    Never overwrites; invalid names and filesystem failures raise
    ``FileOperationError``.
    """
    problem = validate_filename(name)
    if problem is not None:
        raise FileOperationError(f"Cannot create file: {problem}")
    path = Path(directory) / name
    _write_new(path, "", overwrite=False)
    return path


__all__ = [
    "DEFAULT_FILENAME",
    "TextFile",
    "append_text",
    "create_empty_file",
    "create_file",
    "read_file",
    "validate_filename",
]
