"""Structural mode selection for diff views."""

from __future__ import annotations

import logging

from dash_core.formatting import truncate
from dash_core.models import DIFF_MODE_REQUESTS, DiffModeResolution

logger = logging.getLogger(__name__)

SPLIT_MIN_WIDTH = 120
MAX_LINE_DIGITS = 6
BORDER_PADDING = 2
DIFF_MARKER_WIDTH = 1
SPLIT_GUTTER = 4
SPLIT_LINE_NUMBER_WIDTH = 4

MIN_CONTENT_WIDTH = {
    "narrow": 20,
    "compact": 30,
}
DEFAULT_MIN_CONTENT_WIDTH = 40


def split_notice(split_min_width: int = SPLIT_MIN_WIDTH) -> str:
    return f"Split view requires at least {split_min_width} columns; showing unified diff"


def resolve_diff_mode(request: str, width: int, split_min_width: int = SPLIT_MIN_WIDTH) -> DiffModeResolution:
    if request in ("inline", "unified"):
        return DiffModeResolution(request)

    if request not in DIFF_MODE_REQUESTS:
        logger.debug("unknown diff mode request %r, resolving as auto", request)
        request = "auto"

    fits = isinstance(width, (int, float)) and width >= split_min_width
    if request == "auto":
        return DiffModeResolution("split" if fits else "unified")

    if fits:
        return DiffModeResolution("split")
    logger.info("split diff requested at width %s, falling back to unified", width)
    return DiffModeResolution("unified", split_notice(split_min_width))


def min_digits(breakpoint: str) -> int:
    return 3 if breakpoint == "compact" else 2


def line_number_width(max_line_number: int, breakpoint: str) -> int:
    digits = len(str(max(0, int(max_line_number))))
    digits = min(max(digits, min_digits(breakpoint)), MAX_LINE_DIGITS)
    return digits + 1


def min_content_width(breakpoint: str) -> int:
    return MIN_CONTENT_WIDTH.get(breakpoint, DEFAULT_MIN_CONTENT_WIDTH)


def unified_content_width(total_width: int, line_number_cols: int, breakpoint: str) -> int:
    available = total_width - line_number_cols - BORDER_PADDING - DIFF_MARKER_WIDTH
    return max(min_content_width(breakpoint), available)


def split_content_width(total_width: int, breakpoint: str) -> int:
    """Content width of one half of a side-by-side diff."""
    available = (total_width - SPLIT_GUTTER) // 2 - SPLIT_LINE_NUMBER_WIDTH
    return max(min_content_width(breakpoint), available)


def truncate_lines(lines: list[str], width: int) -> list[str]:
    return [truncate(line, width) for line in lines]
