"""UI theme definitions and selection helpers.

Themes are ANSI palettes for report headers and entry rows.
"""

from __future__ import annotations

import os
import sys
from dataclasses import dataclass
from typing import TextIO


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the report renderer."""

    name: str
    reset: str
    header_path: str
    header_size: str
    entry_size: str
    entry_dir: str
    entry_file: str
    notice: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    header_path="\033[1m",
    header_size="\033[1;38;5;81m",
    entry_size="\033[38;5;109m",
    entry_dir="\033[1;34m",
    entry_file="\033[38;5;252m",
    notice="\033[38;5;214m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    header_path="\033[1;38;5;153m",
    header_size="\033[1;38;5;45m",
    entry_size="\033[38;5;73m",
    entry_dir="\033[1;38;5;45m",
    entry_file="\033[38;5;252m",
    notice="\033[38;5;215m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    header_path="",
    header_size="",
    entry_size="",
    entry_dir="",
    entry_file="",
    notice="",
)

_THEMES: dict[str, UITheme] = {
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


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES.get(normalize_theme_name(name), DEFAULT_THEME)


def color_enabled(stream: TextIO | None = None, no_color: bool = False) -> bool:
    """Return whether ANSI colors should be written to ``stream``.

    Colors are off with ``no_color``, when ``NO_COLOR`` is set to a non-empty
    value, or when the stream is not a TTY.
    """
    if no_color or os.environ.get("NO_COLOR"):
        return False
    target = sys.stdout if stream is None else stream
    try:
        return target.isatty()
    except (AttributeError, ValueError):
        return False


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
    "color_enabled",
]
