"""Shared model contracts for the responsive layout engine."""

from __future__ import annotations

from dataclasses import dataclass

BREAKPOINTS = ("narrow", "compact", "normal", "wide")
DISPLAY_MODES = ("normal", "compact", "verbose")
ABBREVIATION_MODES = ("full", "abbreviated", "auto")
DIFF_MODE_REQUESTS = ("auto", "unified", "split", "inline")
PRIORITIES = ("critical", "high", "medium", "low")


@dataclass(frozen=True)
class TerminalDimensions:
    width: int
    height: int
    is_available: bool = True


@dataclass(frozen=True)
class BreakpointThresholds:
    """Upper bounds (exclusive) of the narrow, compact and normal ranges."""

    narrow_max: int
    compact_max: int
    normal_max: int

    def __post_init__(self) -> None:
        values = (self.narrow_max, self.compact_max, self.normal_max)
        if any(not isinstance(v, int) or v <= 0 for v in values):
            raise ValueError(f"thresholds must be positive integers: {values}")
        if not self.narrow_max < self.compact_max < self.normal_max:
            raise ValueError(f"thresholds must be strictly increasing: {values}")


DEFAULT_THRESHOLDS = BreakpointThresholds(60, 100, 160)
STATUS_BAR_THRESHOLDS = BreakpointThresholds(80, 100, 120)


@dataclass(frozen=True)
class LayoutConfig:
    min_width: int
    default_width: int
    safety_margin: int = 0

    def __post_init__(self) -> None:
        if self.min_width > self.default_width:
            raise ValueError(
                f"min_width ({self.min_width}) exceeds default_width ({self.default_width})"
            )


@dataclass(frozen=True)
class Segment:
    """One labeled fragment of a composed status line.

    ``abbreviated_label=""`` hides the label when abbreviating, while ``None``
    falls back to the full label.
    """

    value: str
    icon: str | None = None
    label: str | None = None
    abbreviated_label: str | None = None
    priority: str = "medium"
    style: str = "default"


@dataclass(frozen=True)
class DiffModeResolution:
    mode: str
    notice: str | None = None
