"""JSON config helpers.

Holds display preferences: icon rendering, theme name, and tree vs flat
layout. All access is defensive: malformed or missing config falls back to
defaults.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "changetree"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def _load_bool(key: str, default: bool) -> bool:
    """Only explicit booleans are accepted; other types fall back to ``default``."""
    value = load_config().get(key)
    return value if isinstance(value, bool) else default


def load_show_icons() -> bool:
    return _load_bool("show_icons", False)


def load_show_tree() -> bool:
    """Return whether files are grouped into directories (``False`` means flat list)."""
    return _load_bool("show_tree", True)


def load_theme_name() -> str | None:
    """Load configured UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "load_show_icons",
    "load_show_tree",
    "load_theme_name",
]
