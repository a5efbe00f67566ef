"""Persistent JSON config helpers.

Stores navigator listing preferences and the UI theme name.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .ui_theme import normalize_theme_name

logger = logging.getLogger(__name__)

APP_NAME = "consoletools"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class NavigatorSettings:
    """Listing preferences applied to every navigator session."""

    show_hidden: bool = True
    sort_entries: bool = False
    theme: str = "default"


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored so a read-only config
    directory never breaks a session.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("could not save config %s: %s", CONFIG_PATH, exc)


def _load_bool(data: dict[str, object], key: str, default: bool) -> bool:
    """Only explicit booleans are accepted; anything else yields ``default``."""
    value = data.get(key)
    return value if isinstance(value, bool) else default


def load_navigator_settings() -> NavigatorSettings:
    """Build navigator settings from config, validating each key on its own."""
    data = load_config()
    defaults = NavigatorSettings()
    raw_theme = data.get("theme")
    return NavigatorSettings(
        show_hidden=_load_bool(data, "show_hidden", defaults.show_hidden),
        sort_entries=_load_bool(data, "sort_entries", defaults.sort_entries),
        theme=normalize_theme_name(raw_theme if isinstance(raw_theme, str) else None),
    )


def save_navigator_settings(settings: NavigatorSettings) -> None:
    """Persist navigator settings, keeping unrelated config keys."""
    config = load_config()
    config["show_hidden"] = bool(settings.show_hidden)
    config["sort_entries"] = bool(settings.sort_entries)
    config["theme"] = normalize_theme_name(settings.theme)
    save_config(config)


__all__ = [
    "CONFIG_PATH",
    "NavigatorSettings",
    "load_config",
    "load_navigator_settings",
    "save_config",
    "save_navigator_settings",
]
