"""Profile resolution and user config merging for the dashboard."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from dash_core.models import (
    ABBREVIATION_MODES,
    DIFF_MODE_REQUESTS,
    DISPLAY_MODES,
    BreakpointThresholds,
)

logger = logging.getLogger(__name__)

CORE_PANELS = ["status", "preview", "thoughts", "diff", "logs"]

BUILTIN_PROFILES: dict[str, dict] = {
    "default": {
        "panels": CORE_PANELS,
        "display_mode": "normal",
        "abbreviation": "auto",
        "diff_mode": "auto",
        "split_min_width": 120,
        "refresh_seconds": 2,
        "thresholds": [60, 100, 160],
    },
    "compact": {
        "panels": ["status", "preview", "logs"],
        "display_mode": "compact",
        "abbreviation": "abbreviated",
        "diff_mode": "unified",
        "split_min_width": 120,
        "refresh_seconds": 2,
        "thresholds": [60, 100, 160],
    },
}

CHOICES = {
    "display_mode": DISPLAY_MODES,
    "abbreviation": ABBREVIATION_MODES,
    "diff_mode": DIFF_MODE_REQUESTS,
}


def load_user_config(path: str | None) -> dict:
    if not path:
        return {}

    config_path = Path(path)
    if not config_path.exists():
        raise ValueError(f"config path not found: {config_path}")

    try:
        data = json.loads(config_path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"invalid JSON config: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError("config must be a JSON object")
    return data


def thresholds_from(values) -> BreakpointThresholds:
    if not isinstance(values, (list, tuple)) or len(values) != 3:
        raise ValueError(f"thresholds must be a list of three integers: {values!r}")
    return BreakpointThresholds(*values)


def resolve_profile(profile: str, config_path: str | None = None) -> dict:
    if profile not in BUILTIN_PROFILES:
        raise ValueError(f"unknown profile: {profile}")

    resolved = dict(BUILTIN_PROFILES[profile])
    user_config = load_user_config(config_path)

    selected_profile = user_config.get("profile")
    if selected_profile:
        if selected_profile not in BUILTIN_PROFILES:
            raise ValueError(f"unknown profile in config: {selected_profile}")
        resolved = dict(BUILTIN_PROFILES[selected_profile])
        profile = selected_profile

    for key, allowed in CHOICES.items():
        if key in user_config:
            value = user_config[key]
            if value not in allowed:
                raise ValueError(f"invalid {key}: {value!r} (expected one of {', '.join(allowed)})")
            resolved[key] = value

    for key in ("refresh_seconds", "split_min_width"):
        if key in user_config:
            try:
                resolved[key] = max(1, int(user_config[key]))
            except (TypeError, ValueError, OverflowError):
                raise ValueError(f"invalid {key}: {user_config[key]!r} (expected an integer)") from None

    if "thresholds" in user_config:
        thresholds_from(user_config["thresholds"])
        resolved["thresholds"] = list(user_config["thresholds"])

    panel_config = user_config.get("panels")
    if isinstance(panel_config, dict):
        # disable map: {"diff": false}
        resolved["panels"] = [p for p in CORE_PANELS if panel_config.get(p, p in resolved["panels"])]
    elif isinstance(panel_config, list) and panel_config:
        # explicit order
        allowed = set(CORE_PANELS)
        filtered = [p for p in panel_config if p in allowed]
        if filtered:
            resolved["panels"] = filtered

    resolved["name"] = profile
    logger.debug("resolved profile %s: %s", profile, resolved)
    return resolved
