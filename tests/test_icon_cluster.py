"""Tests for IconClusterAnimator."""

import pytest

from skillring.radial import IconClusterAnimator
from skillring.tween import TweenManager
from skillring.ui import RectNode


def make_panel(top=3, bottom=2, **kwargs):
    tweens = TweenManager()
    panel = IconClusterAnimator(
        [RectNode(f"top{i}") for i in range(top)],
        [RectNode(f"bottom{i}") for i in range(bottom)],
        tweens,
        root=RectNode("panel"),
        **kwargs,
    )
    return panel, tweens


def ys(icons):
    return [icon.y for icon in icons]


def run(tweens, frames, dt=0.05):
    for _ in range(frames):
        tweens.update(dt)


class TestTotalTime:
    def test_formula(self):
        panel, _ = make_panel(top=3, bottom=2, move_duration=0.25, stagger_delay=0.04)
        assert panel.total_out_time == pytest.approx(2 * 0.04 + 0.25)
        assert panel.total_in_time == pytest.approx(panel.total_out_time)

    def test_uses_larger_group(self):
        panel, _ = make_panel(top=1, bottom=5, move_duration=0.2, stagger_delay=0.1)
        assert panel.total_out_time == pytest.approx(4 * 0.1 + 0.2)


class TestSnap:
    def test_snap_opened_and_closed(self):
        panel, _ = make_panel(top_offset=100.0, bottom_offset=-80.0)

        panel.snap_opened()
        assert ys(panel.top_icons) == [100.0] * 3
        assert ys(panel.bottom_icons) == [-80.0] * 2

        panel.snap_closed()
        assert ys(panel.top_icons) == [0.0] * 3
        assert ys(panel.bottom_icons) == [0.0] * 2

    def test_snap_closed_overrides_running_moves(self):
        panel, tweens = make_panel()
        panel.animate_out()
        run(tweens, 4)
        assert panel.top_icons[0].y > 0.0

        panel.snap_closed()
        assert ys(panel.top_icons) == [0.0] * 3

        run(tweens, 20)
        assert ys(panel.top_icons) == [0.0] * 3
        assert ys(panel.bottom_icons) == [0.0] * 2
        assert not panel.is_animating


class TestAnimate:
    def test_animate_out_reaches_offsets(self):
        panel, tweens = make_panel()
        panel.animate_out()
        assert panel.is_animating

        run(tweens, 40)

        assert ys(panel.top_icons) == [120.0] * 3
        assert ys(panel.bottom_icons) == [-120.0] * 2
        assert not panel.is_animating

    def test_rows_are_staggered(self):
        panel, tweens = make_panel(stagger_delay=0.04)
        panel.animate_out()

        # first frame only waits
        run(tweens, 1)
        assert ys(panel.top_icons) == [0.0, 0.0, 0.0]

        run(tweens, 1)
        top = ys(panel.top_icons)
        assert top[0] > 0.0
        assert top[1] == 0.0 and top[2] == 0.0
        assert panel.bottom_icons[0].y < 0.0

        run(tweens, 1)
        top = ys(panel.top_icons)
        assert top[1] > 0.0
        assert top[2] == 0.0

    def test_retrigger_keeps_moves_running(self):
        panel, tweens = make_panel()
        panel.animate_out()
        run(tweens, 3)
        before = panel.top_icons[0].y

        panel.animate_in()
        run(tweens, 1)

        # the outward move of row 0 is still running
        assert panel.top_icons[0].y > before

        run(tweens, 40)
        assert ys(panel.top_icons) == [0.0] * 3
        assert ys(panel.bottom_icons) == [0.0] * 2

    def test_missing_icons_are_skipped(self):
        tweens = TweenManager()
        icon = RectNode()
        panel = IconClusterAnimator([None, icon], [None], tweens)

        panel.snap_opened()
        assert icon.y == 120.0

        panel.animate_in()
        run(tweens, 20)
        assert icon.y == 0.0

    def test_set_active_drives_root(self):
        panel, _ = make_panel()
        panel.set_active(False)
        assert not panel.active
        assert not panel.root.active
        panel.set_active(True)
        assert panel.active
