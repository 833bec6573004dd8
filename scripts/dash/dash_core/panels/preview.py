"""Task preview panel renderer."""

from __future__ import annotations

from rich.table import Table
from rich.text import Text

from dash_core.colors import (
    RICH_STYLES,
    confidence_color,
    countdown_color,
    format_confidence,
    format_countdown,
)
from dash_core.formatting import preview_input_budget, truncate
from dash_core.panels import RenderContext, empty_panel, panel_from_renderable


def render(preview: dict | None, ctx: RenderContext, max_input_length: int | None = None):
    if not preview:
        return empty_panel("Preview", "No pending task", width=ctx.width)

    budget = preview_input_budget(ctx.breakpoint, ctx.display_mode, max_cap=max_input_length)

    table = Table(box=None, show_header=False, expand=True, pad_edge=False)
    table.add_column("key", style="bold", no_wrap=True)
    table.add_column("value", no_wrap=True, overflow="ellipsis")
    table.add_row("Input", truncate(str(preview.get("input", "")), budget))

    if preview.get("intent"):
        table.add_row("Intent", str(preview["intent"]))

    confidence = preview.get("confidence")
    if confidence is not None:
        color = RICH_STYLES[confidence_color(float(confidence))]
        table.add_row("Confidence", Text(format_confidence(float(confidence)), style=color))

    if ctx.display_mode == "verbose" and preview.get("agent"):
        table.add_row("Agent", str(preview["agent"]))

    remaining_ms = preview.get("remaining_ms")
    if remaining_ms is not None:
        color = RICH_STYLES[countdown_color(float(remaining_ms))]
        line = Text("Auto-execute in ")
        line.append(format_countdown(float(remaining_ms)), style=color)
        table.add_row("", line)

    return panel_from_renderable("Preview", "ok", table, width=ctx.width)
