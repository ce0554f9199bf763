"""Render traversal results as console report lines.

A report is a header ``"<path>: <size>"`` followed by one
``"<size>\\t<name>"`` row per first-level entry. Directory names get the
theme's directory color and a trailing ``/``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable

from .bytesize import format_bytes
from .size_model import Entry
from .ui_theme import PLAIN_THEME, UITheme

_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f-\x9f\udc80-\udcff]")


def sanitize_terminal_text(source: str) -> str:
    """Escape control characters and undecodable bytes in one display name."""
    if _CONTROL_RE.search(source) is None:
        return source

    out: list[str] = []
    for ch in source:
        code = ord(ch)
        # C0 controls + DEL + C1 controls.
        if code < 32 or code == 127 or 0x80 <= code <= 0x9F:
            out.append(f"\\x{code:02x}")
            continue
        # surrogateescape stand-ins for raw bytes 0x80-0xff.
        if 0xDC80 <= code <= 0xDCFF:
            out.append(f"\\x{code - 0xDC00:02x}")
            continue
        out.append(ch)
    return "".join(out)


def render_header(path_label: str, total_size: int, theme: UITheme = PLAIN_THEME) -> str:
    """Render the ``"<path>: <size>"`` line for one measured argument."""
    label = sanitize_terminal_text(path_label)
    return (
        f"{theme.header_path}{label}{theme.reset}: "
        f"{theme.header_size}{format_bytes(total_size)}{theme.reset}"
    )


def render_entry(entry: Entry, theme: UITheme = PLAIN_THEME) -> str:
    """Render one ``"<size>\\t<name>"`` row."""
    name = sanitize_terminal_text(entry.name)
    if entry.is_dir:
        name_part = f"{theme.entry_dir}{name}/{theme.reset}"
    else:
        name_part = f"{theme.entry_file}{name}{theme.reset}"
    return f"{theme.entry_size}{format_bytes(entry.size)}{theme.reset}\t{name_part}"


def render_report(
    path_label: str,
    total_size: int,
    entries: Iterable[Entry],
    theme: UITheme = PLAIN_THEME,
) -> list[str]:
    """Render header plus one row per entry, preserving ``entries`` order."""
    lines = [render_header(path_label, total_size, theme)]
    lines.extend(render_entry(entry, theme) for entry in entries)
    return lines


def render_missing(path_label: str, theme: UITheme = PLAIN_THEME) -> str:
    """Render the notice printed for a path argument that does not exist."""
    label = sanitize_terminal_text(path_label)
    return f"{theme.header_path}{label}{theme.reset}: {theme.notice}NOT exists!{theme.reset}"


def render_unreadable(path_label: str, reason: object, theme: UITheme = PLAIN_THEME) -> str:
    """Render the notice printed for a path argument that cannot be listed."""
    label = sanitize_terminal_text(path_label)
    return f"{theme.header_path}{label}{theme.reset}: {theme.notice}cannot read ({reason}){theme.reset}"


__all__ = [
    "sanitize_terminal_text",
    "render_header",
    "render_entry",
    "render_report",
    "render_missing",
    "render_unreadable",
]
