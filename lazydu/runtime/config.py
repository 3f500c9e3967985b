"""Read-only JSON config with defaults for thresholds, sort and display.

Values are validated one by one: anything missing, malformed or of the wrong
type is treated as unset and the built-in default applies. Nothing is ever
written back.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from ..tree_model import SortKey

APP_NAME = "lazydu"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


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


def load_absolute_threshold(config: dict[str, object] | None = None) -> int | None:
    """Return configured absolute threshold; booleans and negatives are rejected."""
    value = (load_config() if config is None else config).get("absolute_threshold")
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        return None
    return value


def load_relative_threshold(config: dict[str, object] | None = None) -> float | None:
    """Return configured relative threshold as a non-negative float."""
    value = (load_config() if config is None else config).get("relative_threshold")
    if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
        return None
    return float(value)


def load_human_readable(config: dict[str, object] | None = None) -> bool:
    """Return whether sizes start human-readable; only explicit booleans count."""
    value = (load_config() if config is None else config).get("human_readable")
    return bool(value) if isinstance(value, bool) else False


def load_theme_name(config: dict[str, object] | None = None) -> str | None:
    """Load configured UI theme name, returning ``None`` when unset/invalid."""
    value = (load_config() if config is None else config).get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_sort_key(config: dict[str, object] | None = None) -> SortKey | None:
    """Return configured initial sort key (``"size"`` or ``"name"``)."""
    value = (load_config() if config is None else config).get("sort")
    if not isinstance(value, str):
        return None
    try:
        return SortKey(value.strip().lower())
    except ValueError:
        return None
