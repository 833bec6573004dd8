"""Threshold-based urgency and quality colors."""

from __future__ import annotations

import math

HIGH_CONFIDENCE = 0.8
MEDIUM_CONFIDENCE = 0.6

COUNTDOWN_GREEN_ABOVE = 5
COUNTDOWN_RED_AT_OR_BELOW = 2

RICH_STYLES = {
    "green": "bold green",
    "yellow": "bold yellow",
    "red": "bold red",
}

CONFIDENCE_COLORS = {
    "high": "green",
    "medium": "yellow",
    "low": "red",
}


def confidence_level(confidence: float) -> str:
    # Out-of-range values are classified as-is, never clamped.
    if confidence >= HIGH_CONFIDENCE:
        return "high"
    if confidence >= MEDIUM_CONFIDENCE:
        return "medium"
    return "low"


def confidence_color(confidence: float) -> str:
    return CONFIDENCE_COLORS[confidence_level(confidence)]


def format_confidence(confidence: float) -> str:
    return f"{round(confidence * 100)}%"


def countdown_seconds(remaining_ms: float) -> int:
    if not math.isfinite(remaining_ms):
        return 0
    return max(0, math.ceil(remaining_ms / 1000))


def countdown_color(remaining_ms: float) -> str:
    seconds = countdown_seconds(remaining_ms)
    if seconds > COUNTDOWN_GREEN_ABOVE:
        return "green"
    if seconds > COUNTDOWN_RED_AT_OR_BELOW:
        return "yellow"
    return "red"


def format_countdown(remaining_ms: float) -> str:
    return f"{countdown_seconds(remaining_ms)}s"
