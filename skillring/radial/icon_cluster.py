"""IconClusterAnimator - staggered slide of a detail panel's icons."""

from __future__ import annotations

from functools import partial
from typing import Sequence as SequenceType

from skillring import log
from skillring.tween import (
    Call,
    Curve,
    Ease,
    Sequence,
    TweenManager,
    ValueTween,
    WaitFrames,
    WaitSeconds,
)
from skillring.ui.nodes import TransformReceptor


def _set_y(icon: TransformReceptor | None, y: float) -> None:
    if icon is None:
        return
    pos = icon.anchored_position
    pos[1] = y
    icon.set_anchored_position(pos)


def _get_y(icon: TransformReceptor) -> float:
    return float(icon.anchored_position[1])


class IconClusterAnimator:
    """
    Two groups of icons that slide between y=0 (closed) and their open offset.

    Top icons open to ``top_offset``, bottom icons to ``bottom_offset``.
    animate_out()/animate_in() wait one frame, then launch one move per icon
    index, ``stagger_delay`` seconds apart. Each move is its own tween and
    keeps running when the group is re-triggered; only the staggered launch
    loop is replaced. snap_closed()/snap_opened() stop everything the group
    has scheduled, moves included, before writing the values.

    ``root`` is the panel's own transform, toggled by set_active().
    """

    def __init__(
        self,
        top_icons: SequenceType[TransformReceptor | None],
        bottom_icons: SequenceType[TransformReceptor | None],
        scheduler: TweenManager,
        move_duration: float = 0.25,
        stagger_delay: float = 0.04,
        top_offset: float = 120.0,
        bottom_offset: float = -120.0,
        curve: Curve = Ease.SMOOTH_STEP,
        root: TransformReceptor | None = None,
        name: str = "",
    ):
        self.top_icons = list(top_icons)
        self.bottom_icons = list(bottom_icons)
        self.scheduler = scheduler
        self.move_duration = move_duration
        self.stagger_delay = stagger_delay
        self.top_offset = top_offset
        self.bottom_offset = bottom_offset
        self.curve = curve
        self.root = root
        self.name = name

        self._dispatch: Sequence | None = None

    @property
    def total_out_time(self) -> float:
        """Seconds until the last launched icon reaches its open offset."""
        count = max(len(self.top_icons), len(self.bottom_icons))
        return (count - 1) * self.stagger_delay + self.move_duration

    @property
    def total_in_time(self) -> float:
        count = max(len(self.top_icons), len(self.bottom_icons))
        return (count - 1) * self.stagger_delay + self.move_duration

    @property
    def is_animating(self) -> bool:
        return self.scheduler.count_for(self) > 0

    @property
    def active(self) -> bool:
        return self.root.active if self.root is not None else False

    def set_active(self, active: bool) -> None:
        if self.root is not None:
            self.root.set_active(active)

    def snap_closed(self) -> None:
        self._stop_all()
        self._set_all_y(self.top_icons, 0.0)
        self._set_all_y(self.bottom_icons, 0.0)

    def snap_opened(self) -> None:
        self._stop_all()
        self._set_all_y(self.top_icons, self.top_offset)
        self._set_all_y(self.bottom_icons, self.bottom_offset)

    def animate_out(self) -> None:
        self._start_animation(True)

    def animate_in(self) -> None:
        self._start_animation(False)

    def _start_animation(self, outward: bool) -> None:
        self._stop_dispatch()
        count = max(len(self.top_icons), len(self.bottom_icons))
        steps = [WaitFrames(1)]
        for index in range(count):
            steps.append(Call(partial(self._launch_index, index, outward)))
            steps.append(WaitSeconds(self.stagger_delay))
        log.debug(f"[IconCluster {self.name}] {'out' if outward else 'in'}, {count} rows")
        self._dispatch = Sequence(steps, owner=self)
        self.scheduler.add(self._dispatch)

    def _launch_index(self, index: int, outward: bool) -> None:
        if index < len(self.top_icons):
            self._move_icon(self.top_icons[index], self.top_offset if outward else 0.0)
        if index < len(self.bottom_icons):
            self._move_icon(self.bottom_icons[index], self.bottom_offset if outward else 0.0)

    def _move_icon(self, icon: TransformReceptor | None, target_y: float) -> None:
        if icon is None:
            return
        self.scheduler.add(
            ValueTween(
                partial(_get_y, icon),
                partial(_set_y, icon),
                target_y,
                self.move_duration,
                ease=self.curve,
                owner=self,
            )
        )

    def _stop_dispatch(self) -> None:
        if self._dispatch is not None:
            self._dispatch.kill()
        self._dispatch = None

    def _stop_all(self) -> None:
        self._dispatch = None
        self.scheduler.kill_all(owner=self)

    @staticmethod
    def _set_all_y(icons, y: float) -> None:
        for icon in icons:
            _set_y(icon, y)
