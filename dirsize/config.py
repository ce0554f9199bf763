"""Persistent JSON config helpers.

Stores default sort axis, reverse flag, UI theme, and worker count.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

from .ui_theme import normalize_theme_name

APP_NAME = "dirsize"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH

SORT_BY_SIZE = "size"
SORT_BY_NAME = "name"


@dataclass(frozen=True)
class Defaults:
    """Report defaults applied when CLI flags leave a setting unset."""

    sort: str = SORT_BY_SIZE
    reverse: bool = False
    theme: str | None = None
    jobs: int = 1


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> bool:
    """Persist config data as pretty-printed JSON.

    Returns ``False`` instead of raising when the file cannot be written.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError:
        return False
    return True


def _coerce_positive_int(value: object, fallback: int) -> int:
    """Booleans and non-integers are treated as invalid."""
    if isinstance(value, bool) or not isinstance(value, int) or value < 1:
        return fallback
    return value


def load_defaults() -> Defaults:
    """Return validated report defaults from config."""
    data = load_config()
    fallback = Defaults()

    sort = data.get("sort")
    if sort not in (SORT_BY_SIZE, SORT_BY_NAME):
        sort = fallback.sort

    reverse = data.get("reverse")
    if not isinstance(reverse, bool):
        reverse = fallback.reverse

    theme = data.get("theme")
    if isinstance(theme, str) and theme.strip():
        theme = normalize_theme_name(theme)
    else:
        theme = fallback.theme

    return Defaults(
        sort=sort,
        reverse=reverse,
        theme=theme,
        jobs=_coerce_positive_int(data.get("jobs"), fallback.jobs),
    )


def save_defaults(defaults: Defaults) -> bool:
    """Persist report defaults, keeping unrelated keys already in the file."""
    config = load_config()
    config["sort"] = defaults.sort if defaults.sort in (SORT_BY_SIZE, SORT_BY_NAME) else SORT_BY_SIZE
    config["reverse"] = bool(defaults.reverse)
    if defaults.theme:
        config["theme"] = normalize_theme_name(defaults.theme)
    else:
        config.pop("theme", None)
    config["jobs"] = _coerce_positive_int(defaults.jobs, 1)
    return save_config(config)


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "Defaults",
    "SORT_BY_NAME",
    "SORT_BY_SIZE",
    "load_config",
    "save_config",
    "load_defaults",
    "save_defaults",
]
