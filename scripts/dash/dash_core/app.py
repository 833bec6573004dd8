"""Responsive dashboard entrypoint."""

from __future__ import annotations

import argparse
import json
import logging
import os
import sys
import time
from pathlib import Path

from rich.console import Console, Group
from rich.live import Live
from rich.text import Text

from dash_core.dimensions import probe_dimensions
from dash_core.disclosure import Disclosure
from dash_core.layout import resolve_width
from dash_core.models import DISPLAY_MODES, LayoutConfig
from dash_core.panels import RenderContext
from dash_core.panels.diff import render as render_diff
from dash_core.panels.logs import render as render_logs
from dash_core.panels.preview import render as render_preview
from dash_core.panels.status_bar import render as render_status
from dash_core.panels.thoughts import render as render_thoughts
from dash_core.profiles import resolve_profile, thresholds_from

logger = logging.getLogger(__name__)

DASHBOARD_LAYOUT = LayoutConfig(min_width=40, default_width=80, safety_margin=2)


def read_snapshot(path: Path | None) -> dict:
    if path is None:
        return {}
    try:
        data = json.loads(path.read_text())
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("could not read snapshot %s: %s", path, exc)
        return {}
    return data if isinstance(data, dict) else {}


def render_dashboard(snapshot: dict, profile: dict, width: int, section: Disclosure):
    ctx = RenderContext(
        width=width,
        display_mode=profile["display_mode"],
        thresholds=thresholds_from(profile["thresholds"]),
    )
    parts = []
    for key in profile["panels"]:
        if key == "status":
            abbreviation = None if profile["abbreviation"] == "auto" else profile["abbreviation"]
            parts.append(render_status(snapshot.get("status") or {}, width, ctx.display_mode, abbreviation))
        elif key == "preview":
            parts.append(render_preview(snapshot.get("preview"), ctx))
        elif key == "thoughts":
            parts.append(render_thoughts(list(snapshot.get("thoughts") or []), section, ctx))
        elif key == "diff" and snapshot.get("diff"):
            parts.append(render_diff(snapshot["diff"], ctx, profile["diff_mode"], profile["split_min_width"]))
        elif key == "logs":
            parts.append(render_logs(list(snapshot.get("logs") or []), ctx))
    if not parts:
        parts.append(Text("No panels enabled", style="dim"))
    return Group(*parts)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Responsive terminal dashboard")
    parser.add_argument("snapshot", nargs="?", help="JSON dashboard snapshot to render")
    parser.add_argument("-l", "--live", action="store_true", help="Re-render on every refresh tick")
    parser.add_argument("--profile", default=os.environ.get("DASH_TUI_PROFILE", "default"), help="Profile name: default|compact")
    parser.add_argument("--config", help="Optional JSON config file for profile overrides")
    parser.add_argument("--width", type=int, help="Render at a fixed width instead of the terminal width")
    parser.add_argument("--display-mode", choices=DISPLAY_MODES, help="Display mode override")
    parser.add_argument("--refresh", type=int, help="Refresh interval seconds override")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        profile = resolve_profile(args.profile, args.config)
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    if args.display_mode:
        profile["display_mode"] = args.display_mode

    refresh_seconds = max(1, int(args.refresh or profile.get("refresh_seconds", 2)))
    snapshot_path = Path(args.snapshot) if args.snapshot else None
    console = Console()
    section = Disclosure.from_props(default_collapsed=False, display_mode=profile["display_mode"])

    def build_renderable():
        dims = probe_dimensions(console)
        width = resolve_width(args.width, True, dims.width, DASHBOARD_LAYOUT)
        return render_dashboard(read_snapshot(snapshot_path), profile, width, section)

    try:
        if args.live:
            with Live(build_renderable(), console=console, refresh_per_second=2, screen=True) as live:
                try:
                    while True:
                        time.sleep(refresh_seconds)
                        live.update(build_renderable())
                except KeyboardInterrupt:
                    return 0

        console.print(build_renderable())
        return 0
    finally:
        section.unmount()


if __name__ == "__main__":
    raise SystemExit(main())
