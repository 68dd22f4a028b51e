"""Read-only JSON config with startup defaults.

Supplies the UI theme and default display settings. All access is defensive:
malformed or missing config falls back to built-in defaults. Nothing is ever
written back, so no state carries over between sessions.
"""

from __future__ import annotations

import json
from dataclasses import replace
from pathlib import Path

from platformdirs import user_config_dir

from ..settings import Settings, SortMode

APP_NAME = "lazyexplorer"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

_BOOLEAN_SETTING_KEYS: tuple[str, ...] = ("show_hidden", "long_format", "human_readable")


def load_config() -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def load_theme_name() -> str | None:
    """Load configured UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_default_settings() -> Settings:
    """Return startup settings seeded from config.

    Only explicit booleans are accepted for switches and only known names for
    ``sort``; anything else keeps the built-in default.
    """
    data = load_config()
    settings = Settings()
    overrides: dict[str, object] = {}
    for key in _BOOLEAN_SETTING_KEYS:
        value = data.get(key)
        if isinstance(value, bool):
            overrides[key] = value
    sort_mode = SortMode.parse(data.get("sort"))
    if sort_mode is not None:
        overrides["sort_mode"] = sort_mode
    return replace(settings, **overrides)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "load_config",
    "load_default_settings",
    "load_theme_name",
]
