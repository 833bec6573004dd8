"""Activity log panel renderer."""

from __future__ import annotations

from rich.table import Table

from dash_core.formatting import parse_iso_timestamp, truncate
from dash_core.panels import RenderContext, panel_from_renderable

TIME_COLUMN = 8
MAX_ROWS = {"narrow": 8, "compact": 12, "normal": 25, "wide": 25}


def _display_time(ts_value: str | None) -> str:
    parsed = parse_iso_timestamp(ts_value)
    if parsed is None:
        return "n/a"
    return parsed.strftime("%H:%M:%S")


def message_width(ctx: RenderContext, show_source: bool) -> int:
    used = 4 + TIME_COLUMN + 1
    if show_source:
        used += 16 + 1
    return max(10, ctx.width - used)


def render(entries: list[dict], ctx: RenderContext):
    show_source = ctx.breakpoint in ("normal", "wide") or ctx.display_mode == "verbose"

    table = Table(box=None, expand=True)
    table.add_column("Time", no_wrap=True, width=TIME_COLUMN)
    if show_source:
        table.add_column("Source", style="cyan", no_wrap=True, max_width=16)
    table.add_column("Message", no_wrap=True)

    if not entries:
        table.add_row(*(["-", "-", "No logs"] if show_source else ["-", "No logs"]))
    else:
        limit = MAX_ROWS.get(ctx.breakpoint, 25)
        if ctx.display_mode == "compact":
            limit = MAX_ROWS["narrow"]
        width = message_width(ctx, show_source)
        for item in entries[-limit:]:
            message = str(item.get("message", ""))
            if ctx.display_mode != "verbose":
                message = truncate(message, width)
            row = [_display_time(item.get("ts"))]
            if show_source:
                row.append(str(item.get("source", "-")))
            row.append(message)
            table.add_row(*row)

    status = "ok" if entries else "warn"
    return panel_from_renderable("Activity", status, table, width=ctx.width)
