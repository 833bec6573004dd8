from __future__ import annotations

import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from dash_core.diffview import (  # noqa: E402
    line_number_width,
    resolve_diff_mode,
    split_content_width,
    truncate_lines,
    unified_content_width,
)


class DiffModeTests(unittest.TestCase):
    def test_split_below_gate_downgrades_with_notice(self):
        resolution = resolve_diff_mode("split", 100)
        self.assertEqual(resolution.mode, "unified")
        self.assertIn("120", resolution.notice)

    def test_split_at_gate(self):
        resolution = resolve_diff_mode("split", 120)
        self.assertEqual(resolution.mode, "split")
        self.assertIsNone(resolution.notice)

    def test_auto(self):
        self.assertEqual(resolve_diff_mode("auto", 119).mode, "unified")
        self.assertEqual(resolve_diff_mode("auto", 120).mode, "split")
        self.assertIsNone(resolve_diff_mode("auto", 10).notice)

    def test_passthrough(self):
        self.assertEqual(resolve_diff_mode("inline", 300).mode, "inline")
        self.assertEqual(resolve_diff_mode("unified", 300).mode, "unified")

    def test_custom_gate_and_unknown_request(self):
        self.assertEqual(resolve_diff_mode("split", 90, split_min_width=80).mode, "split")
        self.assertEqual(resolve_diff_mode("weird", 200).mode, "split")


class LineNumberTests(unittest.TestCase):
    def test_minimum_digits(self):
        self.assertEqual(line_number_width(5, "narrow"), 3)
        self.assertEqual(line_number_width(5, "compact"), 4)
        self.assertEqual(line_number_width(5, "wide"), 3)

    def test_digits_grow_and_cap(self):
        self.assertEqual(line_number_width(12345, "normal"), 6)
        self.assertEqual(line_number_width(123456789, "normal"), 7)


class ContentWidthTests(unittest.TestCase):
    def test_unified(self):
        self.assertEqual(unified_content_width(100, 4, "normal"), 93)
        self.assertEqual(unified_content_width(30, 3, "narrow"), 24)
        self.assertEqual(unified_content_width(20, 3, "narrow"), 20)
        self.assertEqual(unified_content_width(20, 3, "compact"), 30)
        self.assertEqual(unified_content_width(20, 3, "wide"), 40)

    def test_split(self):
        self.assertEqual(split_content_width(160, "wide"), 74)
        self.assertEqual(split_content_width(60, "normal"), 40)

    def test_truncate_lines(self):
        self.assertEqual(truncate_lines(["short", "a much longer line"], 8), ["short", "a muc..."])


if __name__ == "__main__":
    unittest.main()
