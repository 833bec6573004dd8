"""Diff panel renderer (unified, split and inline layouts)."""

from __future__ import annotations

from rich.console import Group
from rich.table import Table
from rich.text import Text

from dash_core.diffview import (
    SPLIT_LINE_NUMBER_WIDTH,
    line_number_width,
    resolve_diff_mode,
    split_content_width,
    truncate_lines,
    unified_content_width,
)
from dash_core.panels import RenderContext, panel_from_renderable

MARKERS = {"add": "+", "remove": "-", "context": " "}
STYLES = {"add": "green", "remove": "red", "context": "default"}


def _max_line_number(lines: list[dict]) -> int:
    numbers = [int(n) for line in lines for n in (line.get("old"), line.get("new")) if n is not None]
    return max(numbers, default=0)


def _number(value, width: int) -> str:
    return ("" if value is None else str(value)).rjust(width - 1) + " "


def _unified(lines: list[dict], ctx: RenderContext) -> Table:
    lnw = line_number_width(_max_line_number(lines), ctx.breakpoint)
    content_width = unified_content_width(ctx.width, lnw, ctx.breakpoint)
    texts = truncate_lines([str(line.get("text", "")) for line in lines], content_width)

    table = Table.grid()
    table.add_column("no", width=lnw, no_wrap=True, style="dim")
    table.add_column("marker", width=1, no_wrap=True)
    table.add_column("text", no_wrap=True)
    for line, text in zip(lines, texts):
        kind = line.get("kind", "context")
        number = line.get("new") if kind != "remove" else line.get("old")
        style = STYLES.get(kind, "default")
        table.add_row(_number(number, lnw), Text(MARKERS.get(kind, " "), style=style), Text(text, style=style))
    return table


def _pair_rows(lines: list[dict]) -> list[tuple[dict | None, dict | None]]:
    rows: list[tuple[dict | None, dict | None]] = []
    removed: list[dict] = []
    added: list[dict] = []

    def flush():
        for i in range(max(len(removed), len(added))):
            rows.append((removed[i] if i < len(removed) else None, added[i] if i < len(added) else None))
        removed.clear()
        added.clear()

    for line in lines:
        kind = line.get("kind", "context")
        if kind == "remove":
            removed.append(line)
        elif kind == "add":
            added.append(line)
        else:
            flush()
            rows.append((line, line))
    flush()
    return rows


def _split(lines: list[dict], ctx: RenderContext) -> Table:
    half = split_content_width(ctx.width, ctx.breakpoint)
    table = Table.grid()
    for _ in range(2):
        table.add_column(width=SPLIT_LINE_NUMBER_WIDTH, no_wrap=True, style="dim")
        table.add_column(width=half, no_wrap=True)

    for left, right in _pair_rows(lines):
        cells = []
        for line, key in ((left, "old"), (right, "new")):
            if line is None:
                cells.extend(["", ""])
                continue
            kind = line.get("kind", "context")
            text = truncate_lines([str(line.get("text", ""))], half)[0]
            cells.append(_number(line.get(key), SPLIT_LINE_NUMBER_WIDTH))
            cells.append(Text(text, style=STYLES.get(kind, "default")))
        table.add_row(*cells)
    return table


def _inline(lines: list[dict], ctx: RenderContext) -> Text:
    out = Text(no_wrap=True)
    texts = truncate_lines([str(line.get("text", "")) for line in lines], max(1, ctx.width - 4))
    for line, text in zip(lines, texts):
        kind = line.get("kind", "context")
        out.append(f"{MARKERS.get(kind, ' ')}{text}\n", style=STYLES.get(kind, "default"))
    out.rstrip()
    return out


def render(diff: dict, ctx: RenderContext, request: str = "auto", split_min_width: int = 120):
    lines = list(diff.get("lines") or [])
    resolution = resolve_diff_mode(request, ctx.width, split_min_width)

    if resolution.mode == "split":
        body = _split(lines, ctx)
    elif resolution.mode == "inline":
        body = _inline(lines, ctx)
    else:
        body = _unified(lines, ctx)

    parts = []
    if resolution.notice:
        parts.append(Text(resolution.notice, style="yellow"))
    parts.append(body)

    title = f"Diff: {diff.get('path', '-')} [dim]({resolution.mode})[/dim]"
    status = "warn" if resolution.notice else "ok"
    return panel_from_renderable(title, status, Group(*parts), width=ctx.width, padding=(0, 0))
