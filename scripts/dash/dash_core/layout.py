"""Responsive breakpoint classification and width resolution."""

from __future__ import annotations

import math

from dash_core.models import DEFAULT_THRESHOLDS, BreakpointThresholds, LayoutConfig


def _usable(value) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value)


def classify_breakpoint(width, thresholds: BreakpointThresholds = DEFAULT_THRESHOLDS) -> str:
    if not _usable(width) or width < 0:
        return "narrow"
    if width < thresholds.narrow_max:
        return "narrow"
    if width < thresholds.compact_max:
        return "compact"
    if width < thresholds.normal_max:
        return "normal"
    return "wide"


def is_narrow(width, thresholds: BreakpointThresholds = DEFAULT_THRESHOLDS) -> bool:
    return classify_breakpoint(width, thresholds) == "narrow"


def is_compact(width, thresholds: BreakpointThresholds = DEFAULT_THRESHOLDS) -> bool:
    return classify_breakpoint(width, thresholds) == "compact"


def is_normal(width, thresholds: BreakpointThresholds = DEFAULT_THRESHOLDS) -> bool:
    return classify_breakpoint(width, thresholds) == "normal"


def is_wide(width, thresholds: BreakpointThresholds = DEFAULT_THRESHOLDS) -> bool:
    return classify_breakpoint(width, thresholds) == "wide"


def resolve_width(
    explicit_width: int | None,
    responsive: bool,
    probe_width,
    layout: LayoutConfig | None = None,
    *,
    min_width: int | None = None,
    default_width: int | None = None,
    safety_margin: int | None = None,
) -> int:
    """Return the column budget a component renders into.

    An explicit width wins outright, even below ``min_width``, so callers can
    force narrow layouts.
    """
    if explicit_width is not None:
        return explicit_width

    if layout is not None:
        min_width = layout.min_width if min_width is None else min_width
        default_width = layout.default_width if default_width is None else default_width
        safety_margin = layout.safety_margin if safety_margin is None else safety_margin
    if min_width is None or default_width is None:
        raise TypeError("resolve_width needs a LayoutConfig or min_width/default_width")
    safety_margin = safety_margin or 0

    if not responsive:
        return default_width
    if not _usable(probe_width):
        return min_width
    return max(min_width, int(probe_width) - safety_margin)
