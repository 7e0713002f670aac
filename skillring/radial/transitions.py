"""Transitions driven by RadialMenuController."""

from __future__ import annotations

from typing import Callable, Sequence as SequenceType

import numpy as np

from skillring.radial.layout import RingLayout
from skillring.radial.slot import SkillSlot
from skillring.tween import EPSILON, Ease, Tween, lerp
from skillring.tween.ease import clamp01
from skillring.ui.nodes import CanvasReceptor, TransformReceptor


class FadeScaleTween(Tween):
    """
    Window opacity and toggle button scale on one clock.

    Progress is measured against alpha_duration. The scale runs on the same
    clock rescaled by alpha_duration / scale_duration, and jumps straight to
    its target when alpha_duration is zero. The tween ends when the alpha
    does, at which point both values are written exactly.
    """

    def __init__(
        self,
        canvas: CanvasReceptor | None,
        button: TransformReceptor | None,
        target_alpha: float,
        target_scale: float,
        alpha_duration: float,
        scale_duration: float,
    ):
        super().__init__(alpha_duration, Ease.LINEAR)
        self.canvas = canvas
        self.button = button
        self.target_alpha = target_alpha
        self.target_scale = target_scale
        self.alpha_duration = alpha_duration
        self.scale_duration = scale_duration
        self._start_alpha = target_alpha
        self._start_scale = target_scale

    def _begin(self) -> None:
        if self.canvas is not None:
            self._start_alpha = self.canvas.alpha
        if self.button is not None:
            self._start_scale = self.button.local_scale

    def _scale_progress(self, t: float) -> float:
        if self.alpha_duration <= 0.0:
            return 1.0
        return clamp01(t * (self.alpha_duration / max(self.scale_duration, EPSILON)))

    def _apply(self, t: float) -> None:
        if self.canvas is not None:
            self.canvas.set_alpha(lerp(self._start_alpha, self.target_alpha, t))
        if self.button is not None:
            self.button.set_local_scale(
                lerp(self._start_scale, self.target_scale, self._scale_progress(t))
            )

    def _finish(self) -> None:
        if self.canvas is not None:
            self.canvas.set_alpha(self.target_alpha)
        if self.button is not None:
            self.button.set_local_scale(self.target_scale)


class RingTween(Tween):
    """
    Expand the slots onto the ring, or collapse them onto the anchor.

    Start positions and scales are read when the tween begins, so a ring
    interrupted half way continues from where it is. Every slot is active
    while moving. Targets follow the live selection:
    - expand: selected_scale for the selected slot, unselected_scale otherwise
    - collapse: selected_scale for the selected slot, zero otherwise
    After a collapse only the selected slot stays active.
    """

    def __init__(
        self,
        slots: SequenceType[SkillSlot],
        layout: RingLayout,
        expand: bool,
        duration: float,
        selected: Callable[[], int],
        selected_scale: float,
        unselected_scale: float,
    ):
        super().__init__(duration, Ease.SMOOTH_STEP)
        self.slots = slots
        self.layout = layout
        self.expand = expand
        self.selected = selected
        self.selected_scale = selected_scale
        self.unselected_scale = unselected_scale
        self._start_positions: list[np.ndarray | None] = []
        self._start_scales: list[float] = []

    def target_position(self, index: int) -> np.ndarray:
        if self.expand:
            return self.layout.position(index)
        return self.layout.collapsed_anchor

    def target_scale(self, index: int) -> float:
        is_selected = index == self.selected()
        if not self.expand and not is_selected:
            return 0.0
        return self.selected_scale if is_selected else self.unselected_scale

    def _begin(self) -> None:
        self._start_positions = []
        self._start_scales = []
        for slot in self.slots:
            button = slot.button
            if button is None:
                self._start_positions.append(None)
                self._start_scales.append(0.0)
                continue
            self._start_positions.append(button.anchored_position)
            self._start_scales.append(button.local_scale)
            button.set_active(True)

    def _apply(self, t: float) -> None:
        for index, slot in enumerate(self.slots):
            start = self._start_positions[index]
            if slot.button is None or start is None:
                continue
            slot.button.set_anchored_position(start + (self.target_position(index) - start) * t)
            slot.button.set_local_scale(lerp(self._start_scales[index], self.target_scale(index), t))

    def _finish(self) -> None:
        selected = self.selected()
        for index, slot in enumerate(self.slots):
            if slot.button is None:
                continue
            slot.button.set_anchored_position(self.target_position(index))
            slot.button.set_local_scale(self.target_scale(index))
            slot.button.set_active(self.expand or index == selected)


def shortest_delta(start: float, target: float) -> float:
    """Signed angle in [-180, 180) that turns start onto target."""
    return (target - start + 180.0) % 360.0 - 180.0


class RotateTween(Tween):
    """Turn the ring root to target_angle along the shortest arc."""

    def __init__(self, root: TransformReceptor | None, target_angle: float, duration: float):
        super().__init__(duration, Ease.SMOOTH_STEP)
        self.root = root
        self.target_angle = target_angle
        self._start_angle = 0.0
        self._delta = 0.0

    def _begin(self) -> None:
        if self.root is None:
            return
        self._start_angle = self.root.local_rotation
        self._delta = shortest_delta(self._start_angle, self.target_angle)

    def _apply(self, t: float) -> None:
        if self.root is not None:
            self.root.set_local_rotation(self._start_angle + self._delta * t)

    def _finish(self) -> None:
        if self.root is not None:
            self.root.set_local_rotation(self.target_angle)
