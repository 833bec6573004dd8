from __future__ import annotations

import unittest
from pathlib import Path
import sys

sys.path.insert(0, str(Path(__file__).resolve().parents[2]))

from dash_core.disclosure import (  # noqa: E402
    ARROW_COLLAPSED,
    ARROW_EXPANDED,
    ArrowAnimation,
    Controlled,
    Disclosure,
    Uncontrolled,
    ease_out_cubic,
)


class FakeHandle:
    def __init__(self, callback):
        self.callback = callback
        self.cancelled = False

    def cancel(self):
        self.cancelled = True


class FakeScheduler:
    def __init__(self):
        self.handles: list[FakeHandle] = []

    def __call__(self, delay, callback):
        handle = FakeHandle(callback)
        self.handles.append(handle)
        return handle

    @property
    def live(self) -> list[FakeHandle]:
        return [h for h in self.handles if not h.cancelled]

    def fire_latest(self):
        self.handles[-1].callback()


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_section(**kwargs):
    scheduler = FakeScheduler()
    clock = FakeClock()
    events: list[bool] = []
    animation = ArrowAnimation(scheduler=scheduler, clock=clock)
    section = Disclosure.from_props(on_toggle=events.append, animation=animation, **kwargs)
    return section, events, scheduler, clock


class DisclosureStateTests(unittest.TestCase):
    def test_variant_resolved_at_construction(self):
        self.assertIsInstance(Disclosure.from_props(collapsed=True).mode, Controlled)
        self.assertIsInstance(Disclosure.from_props(default_collapsed=True).mode, Uncontrolled)

    def test_single_toggle(self):
        section, events, _, _ = make_section(default_collapsed=True)
        section.toggle()
        self.assertEqual(events, [False])
        self.assertFalse(section.collapsed)

    def test_rapid_toggles_alternate(self):
        section, events, _, _ = make_section(default_collapsed=True)
        for _ in range(10):
            section.toggle()
        self.assertEqual(events, [False, True] * 5)

    def test_controlled_only_notifies(self):
        section, events, _, _ = make_section(collapsed=True)
        section.toggle()
        section.toggle()
        self.assertEqual(events, [False, False])
        self.assertTrue(section.collapsed)
        section.set_collapsed(False)
        section.toggle()
        self.assertEqual(events[-1], True)

    def test_set_collapsed_rejected_when_uncontrolled(self):
        section, _, _, _ = make_section()
        with self.assertRaises(ValueError):
            section.set_collapsed(True)


class KeyboardTests(unittest.TestCase):
    def test_enter_and_default_key(self):
        section, events, _, _ = make_section()
        self.assertTrue(section.handle_input("", {"return": True}))
        self.assertTrue(section.handle_input("c"))
        self.assertEqual(events, [True, False])

    def test_custom_key_replaces_default(self):
        section, events, _, _ = make_section(toggle_key="t")
        self.assertFalse(section.handle_input("c"))
        self.assertTrue(section.handle_input("t"))
        self.assertEqual(events, [True])

    def test_keyboard_gate(self):
        section, events, _, _ = make_section(allow_keyboard_toggle=False)
        self.assertFalse(section.handle_input("c"))
        self.assertEqual(section.activate(), True)
        self.assertEqual(events, [True])

    def test_malformed_events_ignored(self):
        section, events, _, _ = make_section()
        for text, key in ((42, None), (None, "return"), (["c"], None), (None, None), ("x", {})):
            self.assertFalse(section.handle_input(text, key))
        self.assertEqual(events, [])

    def test_compact_is_placeholder(self):
        section, events, _, _ = make_section(display_mode="compact")
        self.assertFalse(section.is_interactive)
        self.assertFalse(section.handle_input("c"))
        self.assertIsNone(section.activate())
        self.assertEqual(events, [])

    def test_verbose_marker(self):
        section, _, _, _ = make_section(display_mode="verbose", default_collapsed=True)
        self.assertEqual(section.state_marker(), "[collapsed]")
        section.toggle()
        self.assertEqual(section.state_marker(), "[expanded]")
        self.assertIsNone(make_section()[0].state_marker())


class AnimationTests(unittest.TestCase):
    def test_animation_runs_to_completion(self):
        section, _, scheduler, clock = make_section(default_collapsed=True)
        self.assertEqual(section.indicator(), ARROW_COLLAPSED)
        section.toggle()
        self.assertTrue(section.animation.animating)
        self.assertEqual(section.indicator(), ARROW_COLLAPSED)

        clock.now = 0.1
        scheduler.fire_latest()
        self.assertTrue(section.animation.animating)
        self.assertEqual(section.indicator(), ARROW_EXPANDED)

        clock.now = 0.2
        scheduler.fire_latest()
        self.assertFalse(section.animation.animating)
        self.assertFalse(section.animation.pending)
        self.assertEqual(section.animation.progress, 1.0)
        self.assertEqual(section.indicator(), ARROW_EXPANDED)

    def test_new_toggle_cancels_running_timer(self):
        section, _, scheduler, _ = make_section()
        section.toggle()
        first = scheduler.handles[-1]
        section.toggle()
        self.assertTrue(first.cancelled)
        self.assertEqual(len(scheduler.live), 1)

    def test_superseded_tick_does_not_start_second_chain(self):
        section, _, scheduler, clock = make_section()
        section.toggle()
        stale = scheduler.handles[-1]
        section.toggle()
        fresh = scheduler.handles[-1]

        clock.now = 0.05
        stale.callback()
        self.assertEqual(len(scheduler.live), 1)
        self.assertIs(section.animation._handle, fresh)

        section.unmount()
        self.assertEqual(scheduler.live, [])

    def test_unmount_cancels_timer(self):
        section, _, scheduler, _ = make_section()
        section.toggle()
        section.unmount()
        self.assertEqual(scheduler.live, [])
        self.assertFalse(section.animation.animating)

    def test_easing(self):
        self.assertEqual(ease_out_cubic(0), 0)
        self.assertEqual(ease_out_cubic(1), 1)
        self.assertGreater(ease_out_cubic(0.5), 0.5)


if __name__ == "__main__":
    unittest.main()
