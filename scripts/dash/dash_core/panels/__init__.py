"""Panel rendering helpers."""

from __future__ import annotations

from dataclasses import dataclass

from rich.panel import Panel
from rich.text import Text

from dash_core.layout import classify_breakpoint
from dash_core.models import DEFAULT_THRESHOLDS, BreakpointThresholds

STATUS_BORDER = {
    "ok": "cyan",
    "warn": "yellow",
    "error": "red",
}


@dataclass(frozen=True)
class RenderContext:
    """Per-tick inputs every panel needs: resolved width and display mode."""

    width: int
    display_mode: str = "normal"
    thresholds: BreakpointThresholds = DEFAULT_THRESHOLDS

    @property
    def breakpoint(self) -> str:
        return classify_breakpoint(self.width, self.thresholds)


def border_for(status: str) -> str:
    return STATUS_BORDER.get(status, "cyan")


def empty_panel(title: str, message: str = "No data", width: int | None = None) -> Panel:
    return Panel(Text(message, style="dim"), title=f"[bold]{title}[/bold]", border_style="cyan", width=width)


def panel_from_renderable(title: str, status: str, renderable, width: int | None = None, padding=(0, 1)) -> Panel:
    return Panel(
        renderable,
        title=f"[bold]{title}[/bold]",
        border_style=border_for(status),
        width=width,
        padding=padding,
    )
