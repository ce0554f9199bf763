"""Tests for human-readable byte formatting."""

from __future__ import annotations

import unittest

from dirsize.bytesize import format_bytes


class FormatBytesTests(unittest.TestCase):
    def test_aligned_values_use_largest_unit(self) -> None:
        cases = {
            0: "   0.00  B",
            25: "  25.00  B",
            1023: "1023.00  B",
            1024: "   1.00 KB",
            1536: "   1.50 KB",
            5 * 1024**2: "   5.00 MB",
            3 * 1024**3 + 512 * 1024**2: "   3.50 GB",
            1024**4: "   1.00 TB",
        }
        for size, expected in cases.items():
            with self.subTest(size=size):
                self.assertEqual(format_bytes(size), expected)

    def test_values_beyond_largest_unit_stay_in_yottabytes(self) -> None:
        self.assertEqual(format_bytes(2048 * 1024**8), "2048.00 YB")

    def test_aligned_rows_share_width(self) -> None:
        widths = {len(format_bytes(size)) for size in (0, 999, 1024, 10 * 1024**2, 900 * 1024**3)}
        self.assertEqual(widths, {10})

    def test_negative_size_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            format_bytes(-1)


if __name__ == "__main__":
    unittest.main()
