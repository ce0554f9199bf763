"""Tests for console report rendering.

Checks header/row layout, directory marking, and terminal-safe names.
"""

from __future__ import annotations

import unittest

from dirsize.report import (
    render_entry,
    render_header,
    render_missing,
    render_report,
    render_unreadable,
    sanitize_terminal_text,
)
from dirsize.size_model import Entry
from dirsize.ui_theme import DEFAULT_THEME, PLAIN_THEME


class RenderReportTests(unittest.TestCase):
    def test_plain_report_layout(self) -> None:
        entries = [
            Entry(name="a", size=100, is_dir=False),
            Entry(name="b", size=50, is_dir=False),
            Entry(name="c", size=25, is_dir=True),
        ]

        lines = render_report("/d", 175, entries, PLAIN_THEME)

        self.assertEqual(
            lines,
            [
                "/d:  175.00  B",
                " 100.00  B\ta",
                "  50.00  B\tb",
                "  25.00  B\tc/",
            ],
        )

    def test_empty_directory_renders_header_only(self) -> None:
        self.assertEqual(render_report("/empty", 0, [], PLAIN_THEME), ["/empty:    0.00  B"])

    def test_colored_rows_distinguish_directories(self) -> None:
        dir_row = render_entry(Entry(name="pkg", size=2048, is_dir=True), DEFAULT_THEME)
        file_row = render_entry(Entry(name="main.py", size=2048, is_dir=False), DEFAULT_THEME)

        self.assertIn(f"{DEFAULT_THEME.entry_dir}pkg/{DEFAULT_THEME.reset}", dir_row)
        self.assertIn(f"{DEFAULT_THEME.entry_file}main.py{DEFAULT_THEME.reset}", file_row)
        self.assertIn("\t", dir_row)

    def test_plain_theme_emits_no_escape_sequences(self) -> None:
        lines = [
            render_header("/x", 10, PLAIN_THEME),
            render_entry(Entry(name="dir", size=1, is_dir=True), PLAIN_THEME),
            render_missing("/y", PLAIN_THEME),
            render_unreadable("/z", "Permission denied", PLAIN_THEME),
        ]
        for line in lines:
            self.assertNotIn("\033", line)

    def test_missing_and_unreadable_notices(self) -> None:
        self.assertEqual(render_missing("/nope"), "/nope: NOT exists!")
        self.assertEqual(render_unreadable("/root", "Permission denied"), "/root: cannot read (Permission denied)")


class SanitizeTerminalTextTests(unittest.TestCase):
    def test_plain_names_are_unchanged(self) -> None:
        self.assertEqual(sanitize_terminal_text("ordinary name.txt"), "ordinary name.txt")

    def test_control_characters_are_escaped(self) -> None:
        self.assertEqual(sanitize_terminal_text("bad\nname\t\x1b[31m"), "bad\\x0aname\\x09\\x1b[31m")

    def test_surrogate_escaped_bytes_are_shown_as_hex(self) -> None:
        self.assertEqual(sanitize_terminal_text("caf\udcc3"), "caf\\xc3")

    def test_row_names_are_sanitized(self) -> None:
        row = render_entry(Entry(name="two\nlines", size=0, is_dir=False), PLAIN_THEME)
        self.assertEqual(row, "   0.00  B\ttwo\\x0alines")


if __name__ == "__main__":
    unittest.main()
