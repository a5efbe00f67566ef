"""UI theme definitions and selection helpers.

Themes are semantic ANSI palettes for the navigator screen (listing, menu,
prompts and notices). Syntax highlighting style for previews is a separate
setting.
"""

from __future__ import annotations

from dataclasses import dataclass

from .ansi import Colors, Mods


@dataclass(frozen=True)
class NavigatorTheme:
    """Semantic ANSI palette used by the navigator and prompts."""

    name: str
    heading: str
    index: str
    dir_tag: str
    file_tag: str
    label: str
    path: str
    menu: str
    prompt: str
    error: str
    notice: str


DEFAULT_THEME = NavigatorTheme(
    name="default",
    heading=Mods.BOLD + Colors.BLUE,
    index=Colors.RED,
    dir_tag=Mods.BOLD + Colors.BLUE,
    file_tag=Mods.BOLD + Colors.GREEN,
    label=Mods.BOLD + Colors.RED,
    path=Mods.BOLD + Colors.BLUE,
    menu=Mods.BOLD + Colors.RED,
    prompt=Colors.GREEN,
    error=Mods.BOLD + Colors.RED,
    notice=Colors.RED,
)

OCEAN_THEME = NavigatorTheme(
    name="ocean",
    heading="\033[1;38;5;45m",
    index="\033[38;5;39m",
    dir_tag="\033[1;38;5;45m",
    file_tag="\033[1;38;5;84m",
    label="\033[1;38;5;39m",
    path="\033[1;38;5;153m",
    menu="\033[38;5;117m",
    prompt="\033[38;5;84m",
    error="\033[1;38;5;203m",
    notice="\033[38;5;215m",
)

PLAIN_THEME = NavigatorTheme(
    name="plain",
    heading="",
    index="",
    dir_tag="",
    file_tag="",
    label="",
    path="",
    menu="",
    prompt="",
    error="",
    notice="",
)

_THEMES: dict[str, NavigatorTheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> NavigatorTheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "NavigatorTheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
