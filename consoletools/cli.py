"""Command-line front door for consoletools.

Parses CLI options, merges them over the persisted config, and runs one
directory navigator session. The screen is drawn on stderr and the selected
path is printed alone on stdout, so the command composes with pipes.
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import NavigatorSettings, load_navigator_settings, save_navigator_settings
from .console import TextRenderer
from .filesystem import DirectoryNavigator
from .highlight import DEFAULT_STYLE, colorize_source, read_text, sanitize_terminal_text
from .ui_theme import available_theme_names, resolve_theme

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="consoletools",
        description="Browse directories in the terminal and print the selected path.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Starting directory. Defaults to current directory.")
    parser.add_argument("--dir", action="store_true", help="Allow selecting the current directory with 'd'.")
    parser.add_argument("--show", action="store_true", help="Print the selected file with syntax highlighting.")
    parser.add_argument("--style", default=DEFAULT_STYLE, help="Pygments style name used by --show.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument("--sort", action="store_true", help="List directories first, sorted by name.")
    parser.add_argument("--hide-hidden", action="store_true", help="Skip entries whose names start with '.'.")
    parser.add_argument("--save-settings", action="store_true", help="Persist theme and listing flags to config.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log navigation details to stderr.")
    return parser


def _effective_settings(args: argparse.Namespace, saved: NavigatorSettings) -> NavigatorSettings:
    """CLI flags win over persisted settings."""
    return NavigatorSettings(
        show_hidden=saved.show_hidden and not args.hide_hidden,
        sort_entries=saved.sort_entries or args.sort,
        theme=args.theme or saved.theme,
    )


def show_file(path: Path, style: str, color: bool) -> str:
    """Return printable contents of ``path``, highlighted when ``color`` is on."""
    source = sanitize_terminal_text(read_text(path))
    if not color:
        return source
    return colorize_source(source, path, style)


def main(default_path: Path | None = None) -> None:
    """Parse CLI arguments and run a navigator session.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Exits with status 1 when the session ends without a
    selection.
    """
    args = _build_parser().parse_args()
    _configure_logging(args.verbose)

    if default_path is None:
        default_path = Path.cwd()
    path = Path(args.path or default_path)
    if not path.is_dir():
        raise SystemExit(f"Path is not a directory: {path}")

    settings = _effective_settings(args, load_navigator_settings())
    if args.save_settings:
        save_navigator_settings(settings)

    # The screen goes to stderr so stdout carries only the selection.
    ui_color = not args.no_color and sys.stderr.isatty()
    navigator = DirectoryNavigator(
        path,
        renderer=TextRenderer(sys.stderr, color=ui_color),
        theme=resolve_theme(settings.theme, no_color=not ui_color),
        allow_directory_selection=args.dir,
        show_hidden=settings.show_hidden,
        sort_entries=settings.sort_entries,
    )
    result = navigator.run()
    if not result:
        raise SystemExit(1)

    sys.stdout.write(f"{result}\n")
    selected = Path(result)
    if args.show and selected.is_file():
        logger.debug("showing %s with style %s", selected, args.style)
        sys.stdout.write(show_file(selected, args.style, not args.no_color and sys.stdout.isatty()))


if __name__ == "__main__":
    main()
