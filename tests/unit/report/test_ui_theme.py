"""Tests for theme lookup and color detection."""

from __future__ import annotations

import io
import os
import unittest
from unittest import mock

from dirsize.ui_theme import (
    DEFAULT_THEME,
    OCEAN_THEME,
    PLAIN_THEME,
    available_theme_names,
    color_enabled,
    normalize_theme_name,
    resolve_theme,
)


class _TtyStream(io.StringIO):
    def isatty(self) -> bool:
        return True


class ThemeSelectionTests(unittest.TestCase):
    def test_available_theme_names_excludes_plain(self) -> None:
        self.assertEqual(available_theme_names(), ("default", "ocean"))

    def test_normalize_theme_name_falls_back_to_default(self) -> None:
        self.assertEqual(normalize_theme_name(None), "default")
        self.assertEqual(normalize_theme_name("  OCEAN "), "ocean")
        self.assertEqual(normalize_theme_name("plain"), "default")
        self.assertEqual(normalize_theme_name("unknown"), "default")

    def test_resolve_theme_honors_no_color(self) -> None:
        self.assertIs(resolve_theme("ocean"), OCEAN_THEME)
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)
        self.assertIs(resolve_theme(None), DEFAULT_THEME)


class ColorEnabledTests(unittest.TestCase):
    def test_non_tty_stream_disables_color(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop("NO_COLOR", None)
            self.assertFalse(color_enabled(io.StringIO()))

    def test_tty_stream_enables_color(self) -> None:
        with mock.patch.dict(os.environ, {}, clear=False):
            os.environ.pop("NO_COLOR", None)
            self.assertTrue(color_enabled(_TtyStream()))

    def test_no_color_flag_and_environment_disable_color(self) -> None:
        self.assertFalse(color_enabled(_TtyStream(), no_color=True))
        with mock.patch.dict(os.environ, {"NO_COLOR": "1"}):
            self.assertFalse(color_enabled(_TtyStream()))


if __name__ == "__main__":
    unittest.main()
