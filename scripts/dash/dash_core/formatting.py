"""Shared text truncation, label abbreviation and value formatting helpers."""

from __future__ import annotations

import math
from datetime import datetime, timezone

from dash_core.models import Segment

ELLIPSIS = "..."
ABBREVIATION_WIDTH = 80

# Budgets keyed by breakpoint, plus "verbose" for the verbose display mode.
THOUGHT_BUDGETS = {
    "narrow": 500,
    "compact": 500,
    "normal": 500,
    "wide": 500,
    "verbose": 1000,
}

PREVIEW_INPUT_BUDGETS = {
    "narrow": 30,
    "compact": 57,
    "normal": 97,
    "wide": 147,
}


def _as_length(value) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return 0
    if not math.isfinite(value):
        return 0
    return max(0, int(value))


def truncate(text: str, max_length) -> str:
    limit = _as_length(max_length)
    if len(text) <= limit:
        return text
    return text[: max(0, limit - len(ELLIPSIS))] + ELLIPSIS


def truncation_budget(
    display_mode: str,
    breakpoint: str,
    budgets: dict[str, int],
    override: int | None = None,
) -> int:
    if override is not None:
        return override
    if display_mode == "verbose":
        return max(budgets.values())
    if display_mode == "compact":
        return budgets.get("narrow", min(budgets.values()))
    return budgets.get(breakpoint, budgets.get("normal", min(budgets.values())))


def preview_input_budget(
    breakpoint: str,
    display_mode: str = "normal",
    max_cap: int | None = None,
    override: int | None = None,
) -> int:
    if override is not None:
        return override
    budget = truncation_budget(display_mode, breakpoint, PREVIEW_INPUT_BUDGETS)
    if max_cap is not None:
        budget = min(budget, max_cap)
    return budget


def use_abbreviation(mode: str, width) -> bool:
    if mode == "abbreviated":
        return True
    if mode == "auto":
        return _as_length(width) < ABBREVIATION_WIDTH
    return False


def resolve_label(segment: Segment, use_abbrev: bool) -> str | None:
    if segment.label is None:
        return None
    if use_abbrev and segment.abbreviated_label is not None:
        # An empty abbreviation hides the label entirely.
        return segment.abbreviated_label or None
    return segment.label


def effective_label(segment: Segment, mode: str, width) -> str | None:
    return resolve_label(segment, use_abbreviation(mode, width))


def segment_min_width(segment: Segment, use_abbrev: bool) -> int:
    width = 0
    if segment.icon:
        width += len(segment.icon) + 1
    label = resolve_label(segment, use_abbrev)
    if label:
        width += len(label)
    return width + len(segment.value)


def format_tokens(count: int | float | None) -> str:
    if count is None:
        return "0"
    value = max(0, int(count))
    if value < 1000:
        return str(value)
    if value < 1_000_000:
        return f"{value / 1000:.1f}k"
    return f"{value / 1_000_000:.1f}M"


def format_cost(cost: float | None) -> str:
    if cost is None:
        return "$0.0000"
    return f"${cost:.4f}"


def format_elapsed(seconds: float | int | None) -> str:
    """Clock-style elapsed time: ``04:00`` or ``1:02:03``."""
    total = max(0, int(seconds or 0))
    hours, rem = divmod(total, 3600)
    minutes, secs = divmod(rem, 60)
    if hours:
        return f"{hours}:{minutes:02d}:{secs:02d}"
    return f"{minutes:02d}:{secs:02d}"


def format_duration(seconds: float | int | None) -> str:
    total = max(0, int(seconds or 0))
    if total < 60:
        return f"{total}s"
    if total < 3600:
        return f"{total // 60}m{total % 60}s"
    return f"{total // 3600}h{(total % 3600) // 60}m"


def parse_iso_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    text = value.strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
