"""Status bar renderer."""

from __future__ import annotations

from rich.text import Text

from dash_core.formatting import format_cost, format_duration, format_elapsed, format_tokens
from dash_core.layout import classify_breakpoint
from dash_core.models import STATUS_BAR_THRESHOLDS, Segment
from dash_core.segments import SEPARATOR, compose


def build_segments(status: dict, display_mode: str = "normal") -> list[Segment]:
    connected = bool(status.get("connected", False))
    segments = [
        Segment(value="●", priority="critical", style="green" if connected else "red"),
    ]
    if status.get("branch"):
        segments.append(Segment(value=str(status["branch"]), icon="⎇", priority="high"))
    if status.get("agent"):
        segments.append(Segment(value=str(status["agent"]), icon="⚡", priority="high"))
    if status.get("stage"):
        segments.append(Segment(value=str(status["stage"]), label="stage:", abbreviated_label="st:", priority="medium"))

    tokens = status.get("tokens") or {}
    if tokens:
        total = int(tokens.get("input", 0)) + int(tokens.get("output", 0))
        if display_mode == "verbose":
            breakdown = f"{format_tokens(tokens.get('input'))}→{format_tokens(tokens.get('output'))}"
            segments.append(Segment(value=breakdown, label="tokens:", abbreviated_label="tok:", priority="medium"))
            segments.append(Segment(value=format_tokens(total), label="total:", priority="low"))
        else:
            segments.append(Segment(value=format_tokens(total), label="tokens:", abbreviated_label="tok:", priority="medium"))

    if status.get("cost") is not None:
        segments.append(Segment(value=format_cost(status["cost"]), label="cost:", abbreviated_label="", priority="high"))
    session_cost = status.get("session_cost")
    if display_mode == "verbose" and session_cost is not None and session_cost != status.get("cost"):
        segments.append(Segment(value=format_cost(session_cost), label="session:", priority="low"))

    if status.get("model"):
        segments.append(Segment(value=str(status["model"]), label="model:", abbreviated_label="m:", priority="high"))
    if display_mode == "verbose" and status.get("active_seconds") is not None:
        segments.append(Segment(value=format_duration(status["active_seconds"]), label="active:", priority="low"))
    if status.get("api_url"):
        segments.append(Segment(value=str(status["api_url"]), label="api:", priority="low"))

    segments.append(Segment(value=format_elapsed(status.get("elapsed_seconds")), priority="critical"))
    return segments


def render(status: dict, width: int, display_mode: str = "normal", abbreviation: str | None = None) -> Text:
    breakpoint = classify_breakpoint(width, STATUS_BAR_THRESHOLDS)
    segments = build_segments(status, display_mode)
    chosen, _ = compose(segments, display_mode, breakpoint, width, abbreviation)

    line = Text(no_wrap=True, overflow="ellipsis")
    for index, (segment, label) in enumerate(chosen):
        if index:
            line.append(SEPARATOR, style="dim")
        if segment.icon:
            line.append(f"{segment.icon} ")
        if label:
            line.append(label, style="dim")
        line.append(segment.value, style=segment.style)
    return line
