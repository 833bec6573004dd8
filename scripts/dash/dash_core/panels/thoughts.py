"""Collapsible thinking block renderer."""

from __future__ import annotations

from rich.console import Group
from rich.text import Text

from dash_core.disclosure import Disclosure
from dash_core.formatting import THOUGHT_BUDGETS, truncate, truncation_budget
from dash_core.panels import RenderContext, panel_from_renderable


def header(section: Disclosure, title: str) -> Text:
    line = Text(f"{section.indicator()} {title}", style="bold")
    marker = section.state_marker()
    if marker:
        line.append(f" {marker}", style="dim")
    return line


def render(
    thoughts: list[str],
    section: Disclosure,
    ctx: RenderContext,
    max_length: int | None = None,
    title: str = "Thinking",
):
    # Compact mode shows an empty, non-interactive placeholder.
    if not section.is_interactive:
        return Text("")

    parts = [header(section, title)]
    if not section.collapsed:
        budget = truncation_budget(ctx.display_mode, ctx.breakpoint, THOUGHT_BUDGETS, max_length)
        for thought in thoughts:
            parts.append(Text(truncate(str(thought), budget), style="italic"))
        if not thoughts:
            parts.append(Text("No thoughts yet", style="dim"))
    return panel_from_renderable(title, "ok", Group(*parts), width=ctx.width)
