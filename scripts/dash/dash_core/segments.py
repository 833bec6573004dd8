"""Status line composition: priority filtering and width trimming."""

from __future__ import annotations

from dash_core.formatting import resolve_label, segment_min_width, use_abbreviation
from dash_core.models import PRIORITIES, Segment

SEPARATOR = " | "

VISIBLE_PRIORITIES = {
    "narrow": ("critical", "high"),
    "compact": ("critical", "high", "medium"),
    "normal": ("critical", "high", "medium"),
    "wide": PRIORITIES,
}

DISPLAY_ABBREVIATION = {
    "compact": "abbreviated",
    "verbose": "full",
    "normal": "auto",
}


def visible_priorities(breakpoint: str) -> tuple[str, ...]:
    return VISIBLE_PRIORITIES.get(breakpoint, PRIORITIES)


def display_abbreviation_mode(display_mode: str) -> str:
    return DISPLAY_ABBREVIATION.get(display_mode, "auto")


def _rank(segment: Segment) -> int:
    try:
        return PRIORITIES.index(segment.priority)
    except ValueError:
        return len(PRIORITIES)


def select_segments(segments: list[Segment], display_mode: str, breakpoint: str) -> list[Segment]:
    if display_mode == "verbose":
        return list(segments)
    if display_mode == "compact":
        return [s for s in segments if s.priority in VISIBLE_PRIORITIES["narrow"]]
    allowed = visible_priorities(breakpoint)
    return [s for s in segments if s.priority in allowed]


def line_width(segments: list[Segment], use_abbrev: bool, separator: str = SEPARATOR) -> int:
    if not segments:
        return 0
    total = sum(segment_min_width(s, use_abbrev) for s in segments)
    return total + len(separator) * (len(segments) - 1)


def trim_to_fit(
    segments: list[Segment],
    width: int,
    use_abbrev: bool,
    separator: str = SEPARATOR,
) -> list[Segment]:
    """Drop the lowest-priority segments, last first, until the line fits.

    Critical segments are never dropped, so the result may still overflow.
    """
    kept = list(segments)
    while kept and line_width(kept, use_abbrev, separator) > width:
        droppable = [i for i, s in enumerate(kept) if s.priority != "critical"]
        if not droppable:
            break
        victim = max(droppable, key=lambda i: (_rank(kept[i]), i))
        del kept[victim]
    return kept


def compose(
    segments: list[Segment],
    display_mode: str,
    breakpoint: str,
    width: int,
    abbreviation: str | None = None,
) -> tuple[list[tuple[Segment, str | None]], bool]:
    """Pick the segments to show and their resolved labels."""
    mode = abbreviation or display_abbreviation_mode(display_mode)
    use_abbrev = use_abbreviation(mode, width)
    chosen = select_segments(segments, display_mode, breakpoint)
    if display_mode != "verbose":
        chosen = trim_to_fit(chosen, width, use_abbrev)
    return [(s, resolve_label(s, use_abbrev)) for s in chosen], use_abbrev
