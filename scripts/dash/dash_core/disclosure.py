"""Collapsed/expanded state for foldable dashboard sections.

A section is either *controlled* (the caller owns ``collapsed`` and is only
notified through ``on_toggle``) or *uncontrolled* (the section keeps its own
state, seeded from ``default_collapsed``). The variant is fixed when the
section is created.

Toggling animates the arrow indicator between ``▶`` and ``▼``. The animation
is a single scheduled tick chain owned by the section; a new toggle or an
unmount cancels the pending tick before anything else happens.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Callable, Protocol, Union

logger = logging.getLogger(__name__)

ARROW_COLLAPSED = "▶"
ARROW_EXPANDED = "▼"
DEFAULT_TOGGLE_KEY = "c"
ANIMATION_DURATION = 0.15
FRAME_INTERVAL = 0.016


@dataclass(frozen=True)
class Controlled:
    collapsed: bool


@dataclass(frozen=True)
class Uncontrolled:
    default_collapsed: bool = False


DisclosureMode = Union[Controlled, Uncontrolled]


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


Scheduler = Callable[[float, Callable[[], None]], TimerHandle]


def thread_scheduler(delay: float, callback: Callable[[], None]) -> threading.Timer:
    timer = threading.Timer(delay, callback)
    timer.daemon = True
    timer.start()
    return timer


def ease_out_cubic(t: float) -> float:
    t = min(1.0, max(0.0, t))
    return 1 - (1 - t) ** 3


def arrow_for(collapsed: bool) -> str:
    return ARROW_COLLAPSED if collapsed else ARROW_EXPANDED


class ArrowAnimation:
    """Eased transition of the disclosure arrow toward a target state."""

    def __init__(
        self,
        scheduler: Scheduler = thread_scheduler,
        clock: Callable[[], float] = time.monotonic,
        duration: float = ANIMATION_DURATION,
        frame_interval: float = FRAME_INTERVAL,
        on_frame: Callable[[float], None] | None = None,
    ):
        self._scheduler = scheduler
        self._clock = clock
        self.duration = duration
        self.frame_interval = frame_interval
        self.on_frame = on_frame
        self._lock = threading.Lock()
        self._handle: TimerHandle | None = None
        self._started_at = 0.0
        self.target_collapsed = False
        self.animating = False
        self.progress = 1.0
        self._generation = 0

    def start(self, target_collapsed: bool) -> None:
        with self._lock:
            self._cancel_locked()
            self.target_collapsed = target_collapsed
            self.animating = True
            self.progress = 0.0
            self._started_at = self._clock()
            self._schedule_locked()

    def _schedule_locked(self) -> None:
        generation = self._generation
        self._handle = self._scheduler(self.frame_interval, lambda: self._tick(generation))

    def _tick(self, generation: int) -> None:
        with self._lock:
            # A tick from a cancelled chain must not touch the current one.
            if generation != self._generation:
                return
            self._handle = None
            if not self.animating:
                return
            linear = 1.0
            if self.duration > 0:
                linear = min(1.0, (self._clock() - self._started_at) / self.duration)
            self.progress = ease_out_cubic(linear)
            if linear >= 1.0:
                self.animating = False
                self.progress = 1.0
            else:
                self._schedule_locked()
            progress = self.progress
        if self.on_frame is not None:
            self.on_frame(progress)

    def _cancel_locked(self) -> None:
        self._generation += 1
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None
        self.animating = False

    def cancel(self) -> None:
        with self._lock:
            self._cancel_locked()
            self.progress = 1.0

    @property
    def pending(self) -> bool:
        return self._handle is not None

    def arrow(self) -> str:
        if self.animating and self.progress < 0.5:
            return arrow_for(not self.target_collapsed)
        return arrow_for(self.target_collapsed)


_UNSET = object()


class Disclosure:
    def __init__(
        self,
        mode: DisclosureMode,
        on_toggle: Callable[[bool], None] | None = None,
        toggle_key: str | None = None,
        allow_keyboard_toggle: bool = True,
        display_mode: str = "normal",
        animation: ArrowAnimation | None = None,
    ):
        self.mode = mode
        self.on_toggle = on_toggle
        # A custom key replaces the default one rather than adding to it.
        self.toggle_key = toggle_key or DEFAULT_TOGGLE_KEY
        self.allow_keyboard_toggle = allow_keyboard_toggle
        self.display_mode = display_mode
        self.animation = animation if animation is not None else ArrowAnimation()
        self._collapsed = (
            mode.collapsed if isinstance(mode, Controlled) else mode.default_collapsed
        )
        self.animation.target_collapsed = self._collapsed

    @classmethod
    def from_props(cls, collapsed=_UNSET, default_collapsed: bool = False, **kwargs) -> "Disclosure":
        if collapsed is _UNSET or collapsed is None:
            return cls(Uncontrolled(bool(default_collapsed)), **kwargs)
        return cls(Controlled(bool(collapsed)), **kwargs)

    @property
    def controlled(self) -> bool:
        return isinstance(self.mode, Controlled)

    @property
    def collapsed(self) -> bool:
        return self._collapsed

    def set_collapsed(self, collapsed: bool) -> None:
        """Apply the caller-owned state for the next render (controlled only)."""
        if not self.controlled:
            raise ValueError("set_collapsed is only valid for controlled sections")
        self.mode = Controlled(bool(collapsed))
        self._collapsed = self.mode.collapsed

    @property
    def is_interactive(self) -> bool:
        return self.display_mode != "compact"

    @property
    def accepts_keyboard(self) -> bool:
        return self.is_interactive and self.allow_keyboard_toggle

    def toggle(self) -> bool:
        new_value = not self._collapsed
        if not self.controlled:
            self._collapsed = new_value
        self.animation.start(new_value)
        if self.on_toggle is not None:
            self.on_toggle(new_value)
        return new_value

    def activate(self) -> bool | None:
        if not self.is_interactive:
            return None
        return self.toggle()

    def handle_input(self, text, key=None) -> bool:
        """Toggle on Enter or the toggle key; returns whether a toggle happened."""
        if not self.accepts_keyboard:
            return False
        if text is not None and not isinstance(text, str):
            logger.debug("ignoring malformed key input %r", text)
            return False
        if key is not None and not isinstance(key, Mapping):
            logger.debug("ignoring malformed key descriptor %r", key)
            return False

        enter = bool(key and key.get("return")) or text in ("\r", "\n")
        if enter or (text and text == self.toggle_key):
            self.toggle()
            return True
        return False

    def indicator(self) -> str:
        if self.animation.animating:
            return self.animation.arrow()
        return arrow_for(self._collapsed)

    def state_marker(self) -> str | None:
        if self.display_mode != "verbose":
            return None
        return "[collapsed]" if self._collapsed else "[expanded]"

    def unmount(self) -> None:
        self.animation.cancel()
