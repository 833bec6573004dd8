from __future__ import annotations

import unittest
from pathlib import Path
import sys

from rich.style import Style

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from dash_core.colors import (  # noqa: E402
    RICH_STYLES,
    confidence_color,
    confidence_level,
    countdown_color,
    countdown_seconds,
    format_confidence,
    format_countdown,
)


class ConfidenceTests(unittest.TestCase):
    def test_bands(self):
        self.assertEqual(confidence_color(0.8), "green")
        self.assertEqual(confidence_color(0.79), "yellow")
        self.assertEqual(confidence_color(0.6), "yellow")
        self.assertEqual(confidence_color(0.59), "red")

    def test_out_of_range_is_not_clamped(self):
        self.assertEqual(confidence_level(1.2), "high")
        self.assertEqual(format_confidence(1.2), "120%")
        self.assertEqual(confidence_level(-0.5), "low")


class CountdownTests(unittest.TestCase):
    def test_boundaries(self):
        cases = [
            (5000, "yellow", "5s"),
            (5001, "green", "6s"),
            (2000, "red", "2s"),
            (2001, "yellow", "3s"),
            (1, "red", "1s"),
            (0, "red", "0s"),
        ]
        for remaining, color, label in cases:
            self.assertEqual(countdown_color(remaining), color, remaining)
            self.assertEqual(format_countdown(remaining), label, remaining)

    def test_negative_is_red(self):
        self.assertEqual(countdown_color(-1500), "red")
        self.assertEqual(countdown_seconds(-1500), 0)


class RichStyleTests(unittest.TestCase):
    def test_every_color_maps_to_a_bold_style(self):
        colors = {confidence_color(c) for c in (0.1, 0.7, 0.9)} | {countdown_color(ms) for ms in (0, 4000, 9000)}
        for color in colors:
            style = Style.parse(RICH_STYLES[color])
            self.assertTrue(style.bold, color)
            self.assertEqual(style.color.name, color)


if __name__ == "__main__":
    unittest.main()
