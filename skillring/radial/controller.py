"""RadialMenuController - window, ring, rotation and panel orchestration."""

from __future__ import annotations

from enum import Enum, auto
from functools import partial
from typing import Sequence as SequenceType

from skillring import log
from skillring.core.event import Event
from skillring.radial.config import RadialMenuConfig
from skillring.radial.icon_cluster import IconClusterAnimator
from skillring.radial.layout import RingLayout
from skillring.radial.slot import SkillSlot
from skillring.radial.transitions import FadeScaleTween, RingTween, RotateTween
from skillring.tween import Call, Sequence, TweenManager, TweenSlots, WaitFrames, WaitSeconds
from skillring.ui.nodes import CanvasReceptor, LabelReceptor, TransformReceptor

# Fraction of the previous panel's retract time waited before the next
# panel takes over.
PANEL_SWITCH_CUTOFF = 0.9


class TransitionKind(Enum):
    WINDOW = auto()
    RING = auto()
    ROTATION = auto()
    PANEL = auto()


class RadialMenuController:
    """
    Radial skill menu around a toggle button.

    Owns the open/closed state, the selection and the placement of every
    slot. Each kind of transition (window fade, ring layout, ring rotation,
    panel switch) has at most one live tween; launching a kind cancels its
    previous tween first and never touches the other kinds.

    Construction puts the window in its hidden state. Call start() once the
    receptors are in place; it closes every panel, selects the default slot
    silently and collapses the ring.

    Usage:
        menu = RadialMenuController(slots, tweens, window=canvas,
                                    toggle_button=button, menu_root=root,
                                    label=label, config=config)
        menu.on_skill_changed += lambda index: print(index)
        menu.start()

        toggle_button_clicked -> menu.toggle_window()
        slot_clicked(i)       -> menu.on_click(i)
        every frame           -> tweens.update(dt)
    """

    def __init__(
        self,
        slots: SequenceType[SkillSlot],
        scheduler: TweenManager,
        window: CanvasReceptor | None = None,
        toggle_button: TransformReceptor | None = None,
        menu_root: TransformReceptor | None = None,
        label: LabelReceptor | None = None,
        config: RadialMenuConfig | None = None,
    ):
        self.slots: list[SkillSlot] = list(slots)
        self.scheduler = scheduler
        self.window = window
        self.toggle_button = toggle_button
        self.menu_root = menu_root
        self.label = label
        self.config = config if config is not None else RadialMenuConfig()

        self.on_skill_changed: Event[int] = Event()

        self._transitions: TweenSlots[TransitionKind] = TweenSlots(scheduler)
        self._window_open = False
        self._initial_panel_shown = False
        self._saved_rotation = 0.0

        last_index = max(len(self.slots) - 1, 0)
        self._current_index = min(max(self.config.default_skill_index, 0), last_index)
        self.layout = RingLayout(len(self.slots), self.config.radius, self.config.angle_offset)

        handles = {"window": window, "toggle_button": toggle_button, "menu_root": menu_root, "label": label}
        missing = [name for name, handle in handles.items() if handle is None]
        if missing:
            log.debug(f"[RadialMenu] no {', '.join(missing)}, those updates are skipped")

        self._set_window_visible(False, immediate=True)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def current_index(self) -> int:
        return self._current_index

    @property
    def is_window_open(self) -> bool:
        return self._window_open

    @property
    def saved_rotation(self) -> float:
        """Ring angle restored on the next open."""
        return self._saved_rotation

    @property
    def initial_panel_shown(self) -> bool:
        return self._initial_panel_shown

    def is_running(self, kind: TransitionKind) -> bool:
        return self._transitions.is_running(kind)

    def panel(self, index: int) -> IconClusterAnimator | None:
        if 0 <= index < len(self.slots):
            return self.slots[index].panel
        return None

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        for slot in self.slots:
            if slot.panel is None:
                continue
            slot.panel.set_active(True)
            slot.panel.snap_closed()
            slot.panel.set_active(False)

        self.select_skill(self._current_index, silent=True)
        self.snap_collapsed()

        if self.config.start_open:
            self._toggle(True, immediate=True)
            self.show_panel(self._current_index, animate=False)
            self._initial_panel_shown = True

    def shutdown(self) -> None:
        """Cancel every transition and forget listeners."""
        self._transitions.cancel_all()
        for slot in self.slots:
            if slot.panel is not None:
                self.scheduler.kill_all(owner=slot.panel)
        self.on_skill_changed.clear()

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def toggle_window(self) -> None:
        self._toggle(not self._window_open, immediate=False)

    def open_window(self) -> None:
        self._toggle(True, immediate=False)

    def close_window(self) -> None:
        self._toggle(False, immediate=False)

    def on_click(self, index: int) -> None:
        """Slot button clicked: open the window if needed, then select."""
        if not self._window_open:
            self._toggle(True, immediate=False)
        self.select_skill(index, silent=False)

    def select_skill(self, index: int, silent: bool = False) -> None:
        """
        Make slot index the selected one.

        Updates the label, the slot sprites and scales. A silent selection
        only snaps the panels into place. A non-silent selection of a new
        slot rotates the ring, switches panels and fires on_skill_changed.
        """
        if index < 0 or index >= len(self.slots):
            log.debug(f"[RadialMenu] select_skill({index}) ignored, {len(self.slots)} slots")
            return

        previous_index = self._current_index
        self._current_index = index
        if self.label is not None:
            self.label.set_text(self.slots[index].name)
        self._update_skill_icons()

        if silent:
            self._activate_panel_snap(index)
            return

        if index == previous_index:
            return

        log.debug(f"[RadialMenu] selection {previous_index} -> {index}")
        self._start_rotate_to_skill(index)
        self._start_panel_switch(previous_index, index)
        self.on_skill_changed.emit(index)

    # ------------------------------------------------------------------
    # Window
    # ------------------------------------------------------------------

    def _toggle(self, opening: bool, immediate: bool) -> None:
        if self._window_open == opening and not immediate:
            return
        self._window_open = opening
        action = "open" if opening else "close"
        log.debug(f"[RadialMenu] {action}{' (immediate)' if immediate else ''}")

        if opening:
            self._set_window_visible(True, immediate=False)
            self._animate_ring(True, immediate)
            self._start_rotate_to(self._saved_rotation, immediate)
            if not self._initial_panel_shown:
                self._start_show_initial_panel(immediate)
                self._initial_panel_shown = True
        else:
            self._remember_rotation()
            self._start_rotate_to(0.0, immediate)
            self._animate_ring(False, immediate)

        cfg = self.config
        tween = FadeScaleTween(
            self.window,
            self.toggle_button,
            1.0 if opening else 0.0,
            cfg.open_window_scale if opening else cfg.closed_window_scale,
            0.0 if immediate else cfg.fade_duration,
            0.0 if immediate else cfg.scale_duration,
        )
        if not opening:
            tween.on_complete(partial(self._set_window_visible, False, True))

        if immediate:
            self._transitions.snap(TransitionKind.WINDOW, tween)
        else:
            self._transitions.launch(TransitionKind.WINDOW, tween)

    def _set_window_visible(self, visible: bool, immediate: bool) -> None:
        if self.window is None:
            return
        self.window.set_interactable(visible)
        self.window.set_blocks_input(visible)
        if immediate:
            self.window.set_alpha(1.0 if visible else 0.0)

    # ------------------------------------------------------------------
    # Ring layout
    # ------------------------------------------------------------------

    def _animate_ring(self, expand: bool, immediate: bool) -> None:
        cfg = self.config
        duration = cfg.expand_duration if expand else cfg.collapse_duration
        tween = RingTween(
            self.slots,
            self.layout,
            expand,
            0.0 if immediate else duration,
            lambda: self._current_index,
            cfg.selected_scale,
            cfg.unselected_scale,
        )
        if immediate:
            self._transitions.snap(TransitionKind.RING, tween)
        else:
            self._transitions.launch(TransitionKind.RING, tween)

    def snap_collapsed(self) -> None:
        """Put every slot on the collapsed anchor with no animation."""
        if self.menu_root is not None:
            self.menu_root.set_local_rotation(0.0)
        anchor = self.layout.collapsed_anchor
        for index, slot in enumerate(self.slots):
            if slot.button is None:
                continue
            is_selected = index == self._current_index
            slot.button.set_anchored_position(anchor)
            slot.button.set_local_scale(self.config.selected_scale if is_selected else 0.0)
            slot.button.set_active(is_selected)

    def _update_skill_icons(self) -> None:
        cfg = self.config
        for index, slot in enumerate(self.slots):
            is_selected = index == self._current_index
            if slot.icon is not None:
                slot.icon.set_sprite(slot.active_sprite if is_selected else slot.inactive_sprite)
            if slot.button is not None:
                slot.button.set_local_scale(cfg.selected_scale if is_selected else cfg.unselected_scale)

    # ------------------------------------------------------------------
    # Rotation
    # ------------------------------------------------------------------

    def _remember_rotation(self) -> None:
        running = self._transitions.active(TransitionKind.ROTATION)
        if isinstance(running, RotateTween):
            self._saved_rotation = running.target_angle
        elif self.menu_root is not None:
            self._saved_rotation = self.menu_root.local_rotation

    def _start_rotate_to(self, angle: float, immediate: bool, remember: bool = False) -> None:
        tween = RotateTween(self.menu_root, angle, 0.0 if immediate else self.config.rotation_duration)
        if remember:
            tween.on_complete(partial(self._save_rotation, angle))
        if immediate:
            self._transitions.snap(TransitionKind.ROTATION, tween)
        else:
            self._transitions.launch(TransitionKind.ROTATION, tween)

    def _save_rotation(self, angle: float) -> None:
        self._saved_rotation = angle

    def _start_rotate_to_skill(self, index: int) -> None:
        self._start_rotate_to(self.layout.angle_for_slot(index), immediate=False, remember=True)

    # ------------------------------------------------------------------
    # Panels
    # ------------------------------------------------------------------

    def _start_panel_switch(self, previous_index: int, next_index: int) -> None:
        if previous_index == next_index:
            self._activate_panel_snap(next_index)
            return

        previous_panel = self.panel(previous_index)
        next_panel = self.panel(next_index)

        steps = []
        if previous_panel is not None:
            steps += [
                Call(previous_panel.animate_in),
                WaitSeconds(previous_panel.total_in_time * PANEL_SWITCH_CUTOFF),
                Call(partial(previous_panel.set_active, False)),
            ]
        if next_panel is not None:
            steps += [
                Call(partial(self._hide_panels_except, next_index)),
                Call(partial(next_panel.set_active, True)),
                Call(next_panel.snap_closed),
                WaitFrames(1),
                Call(next_panel.animate_out),
            ]
        self._transitions.launch(TransitionKind.PANEL, Sequence(steps))

    def _hide_panels_except(self, index: int) -> None:
        for other, slot in enumerate(self.slots):
            if other != index and slot.panel is not None and slot.panel.active:
                slot.panel.set_active(False)

    def _activate_panel_snap(self, index: int) -> None:
        for other, slot in enumerate(self.slots):
            panel = slot.panel
            if panel is None:
                continue
            is_active = other == index
            panel.set_active(is_active)
            if is_active:
                panel.snap_closed()

    def show_panel(self, index: int, animate: bool) -> None:
        """Show the panel of slot index, sliding out or snapped open."""
        panel = self.panel(index)
        if panel is None:
            return
        panel.set_active(True)
        if animate:
            panel.snap_closed()
            panel.animate_out()
        else:
            panel.snap_opened()

    def _start_show_initial_panel(self, immediate: bool) -> None:
        # A running switch already brings the selected panel in.
        if self._transitions.is_running(TransitionKind.PANEL):
            return
        panel = self.panel(self._current_index)
        if panel is None:
            return
        steps = [
            Call(partial(self._hide_panels_except, self._current_index)),
            Call(partial(panel.set_active, True)),
            Call(panel.snap_closed),
        ]
        if not immediate:
            steps.append(WaitFrames(1))
        steps.append(Call(panel.animate_out))
        self._transitions.launch(TransitionKind.PANEL, Sequence(steps))
