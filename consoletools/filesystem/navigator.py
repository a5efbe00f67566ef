"""Interactive numbered directory browser.

Each iteration scans the current directory into a ``Listing``, draws it with
the command menu, reads one token, and dispatches it against that listing.
The listing is passed explicitly from render to dispatch, so an index can
never outlive the screen it was shown on.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ..console import TextRenderer, TokenReader
from ..errors import FileOperationError
from ..ui_theme import DEFAULT_THEME, NavigatorTheme
from .files import create_empty_file
from .listing import list_directory
from .types import Listing

logger = logging.getLogger(__name__)

EXIT_COMMAND = "0"
BACK_COMMAND = "b"
CREATE_COMMAND = "c"
SELECT_DIRECTORY_COMMAND = "d"

MISSING_FILE_NOTICE = "The file does not exist"


@dataclass(frozen=True)
class Step:
    """Outcome of one dispatched command.

    ``done`` ends the session with ``result`` (empty when cancelled);
    otherwise the loop continues at ``path`` and shows ``notice`` once.
    """

    path: Path
    done: bool = False
    result: str = ""
    notice: str | None = None


class DirectoryNavigator:
    def __init__(
        self,
        start: Path | None = None,
        *,
        reader: TokenReader | None = None,
        renderer: TextRenderer | None = None,
        theme: NavigatorTheme = DEFAULT_THEME,
        allow_directory_selection: bool = False,
        show_hidden: bool = True,
        sort_entries: bool = False,
    ) -> None:
        self.start = start
        self.reader = reader or TokenReader()
        self.renderer = renderer or TextRenderer()
        self.theme = theme
        self.allow_directory_selection = allow_directory_selection
        self.show_hidden = show_hidden
        self.sort_entries = sort_entries

    def run(self) -> str:
        """Browse until a selection or exit.

        Returns the selected file path (or directory, with
        ``allow_directory_selection``) as a string, or ``""`` when the
        operator exits or input runs out.
        """
        path = Path(self.start).absolute() if self.start is not None else Path.cwd()
        notice: str | None = None
        while True:
            listing = self.render(path, notice)
            notice = None
            if listing.error is not None and path.parent != path:
                notice = scan_error_notice(listing)
                path = path.parent
                continue

            step = self.dispatch(listing, self.reader.read_token())
            if step.done:
                logger.debug("session finished with %r", step.result)
                return step.result
            path = step.path
            notice = step.notice

    def render(self, path: Path, notice: str | None = None) -> Listing:
        """Scan ``path`` and draw its listing, the menu, and the prompt.

        A directory that cannot be scanned is drawn only when it has no parent
        to fall back to; the caller handles the retreat otherwise.
        """
        listing = list_directory(path, show_hidden=self.show_hidden, sort_entries=self.sort_entries)
        if listing.error is not None:
            if path.parent != path:
                return listing
            notice = scan_error_notice(listing)

        theme = self.theme
        out = self.renderer
        out.clear()
        out.print_text("DIRS / FILES:\n", theme.heading)
        for entry in listing.entries:
            out.print_text(f"{entry.index}.", theme.index, sep=" ")
            out.print_text(entry.kind.tag, theme.dir_tag if entry.is_dir else theme.file_tag, sep="\t")
            out.print_text(entry.name)

        if notice:
            out.print_text(f"\n{notice}", theme.notice)
        out.print_text("\nCURRENT_DIR:", theme.label, sep=" ")
        out.print_text(str(path), theme.path, sep="\n\n")
        for line in self.menu_lines():
            out.print_text(line, theme.menu)
        out.print_text("Select menu item:", theme.prompt, sep=" ")
        return listing

    def menu_lines(self) -> list[str]:
        lines = [f"{BACK_COMMAND}. BACK", f"{CREATE_COMMAND}. CREATE FILE"]
        if self.allow_directory_selection:
            lines.append(f"{SELECT_DIRECTORY_COMMAND}. SELECT CURRENT DIRECTORY")
        lines.append(f"{EXIT_COMMAND}. EXIT\n")
        return lines

    def dispatch(self, listing: Listing, token: str | None) -> Step:
        """Apply one command token against the listing it was typed for."""
        path = listing.directory
        if token is None:
            logger.debug("input exhausted; leaving without a selection")
            return Step(path, done=True)
        if token == EXIT_COMMAND:
            return Step(path, done=True)
        if token == BACK_COMMAND:
            return Step(path.parent)
        if token == CREATE_COMMAND:
            return self._create_file(path)
        if token == SELECT_DIRECTORY_COMMAND and self.allow_directory_selection:
            return Step(path, done=True, result=str(path))

        entry = listing.lookup(token)
        if entry is None:
            return Step(path)
        target = path / entry.name
        if entry.is_dir:
            return Step(target)
        if not target.exists():
            logger.info("selected file vanished: %s", target)
            return Step(path, notice=MISSING_FILE_NOTICE)
        return Step(path, done=True, result=str(target))

    def _create_file(self, path: Path) -> Step:
        self.renderer.print_text("\nEnter filename:", self.theme.heading, sep=" ")
        name = self.reader.read_token()
        if name is None:
            return Step(path, done=True)
        try:
            created = create_empty_file(path, name)
        except FileOperationError as exc:
            logger.warning("%s", exc)
            return Step(path, notice=str(exc))
        logger.debug("created %s", created)
        return Step(path)


def scan_error_notice(listing: Listing) -> str:
    error = listing.error
    reason = getattr(error, "strerror", None) or str(error)
    return f"Cannot open directory: {listing.directory} ({reason})"


__all__ = [
    "DirectoryNavigator",
    "MISSING_FILE_NOTICE",
    "Step",
    "scan_error_notice",
]
