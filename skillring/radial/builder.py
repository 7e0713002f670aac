"""Build a complete menu out of a RadialMenuConfig."""

from __future__ import annotations

from dataclasses import dataclass, field

from skillring.radial.config import PanelConfig, RadialMenuConfig
from skillring.radial.controller import RadialMenuController
from skillring.radial.icon_cluster import IconClusterAnimator
from skillring.radial.slot import SkillSlot
from skillring.tween import TweenManager
from skillring.ui.nodes import CanvasGroup, ImageNode, RectNode, TextLabel


@dataclass
class MenuScene:
    """Every receptor of a built menu, for hosts that draw it."""

    controller: RadialMenuController
    scheduler: TweenManager
    window: CanvasGroup
    toggle_button: RectNode
    menu_root: RectNode
    label: TextLabel
    icons: list[ImageNode] = field(default_factory=list)
    panels: list[IconClusterAnimator | None] = field(default_factory=list)

    @property
    def slots(self) -> list[SkillSlot]:
        return self.controller.slots

    def update(self, dt: float) -> None:
        self.scheduler.update(dt)


def build_panel(config: PanelConfig, scheduler: TweenManager, name: str = "") -> IconClusterAnimator:
    top = [RectNode(f"{name}/top{i}") for i in range(config.top_icons)]
    bottom = [RectNode(f"{name}/bottom{i}") for i in range(config.bottom_icons)]
    return IconClusterAnimator(
        top,
        bottom,
        scheduler,
        move_duration=config.move_duration,
        stagger_delay=config.stagger_delay,
        top_offset=config.top_offset,
        bottom_offset=config.bottom_offset,
        curve=config.curve,
        root=RectNode(f"{name}/panel", active=False),
        name=name,
    )


def build_menu(config: RadialMenuConfig, scheduler: TweenManager | None = None, start: bool = True) -> MenuScene:
    """
    Create receptors for every configured element and wire the controller.

    With start=True the controller's start() is called, so the returned
    scene is in its initial collapsed (or start_open) state.
    """
    if scheduler is None:
        scheduler = TweenManager()

    slots = []
    icons = []
    panels = []
    for index, skill in enumerate(config.skills):
        icon = ImageNode()
        panel = build_panel(skill.panel, scheduler, skill.name) if skill.panel is not None else None
        slots.append(
            SkillSlot(
                name=skill.name,
                button=RectNode(f"slot{index}"),
                icon=icon,
                active_sprite=skill.active_icon,
                inactive_sprite=skill.inactive_icon,
                panel=panel,
            )
        )
        icons.append(icon)
        panels.append(panel)

    window = CanvasGroup()
    toggle_button = RectNode("toggle", scale=config.closed_window_scale)
    menu_root = RectNode("root")
    label = TextLabel()

    controller = RadialMenuController(
        slots,
        scheduler,
        window=window,
        toggle_button=toggle_button,
        menu_root=menu_root,
        label=label,
        config=config,
    )
    scene = MenuScene(
        controller=controller,
        scheduler=scheduler,
        window=window,
        toggle_button=toggle_button,
        menu_root=menu_root,
        label=label,
        icons=icons,
        panels=panels,
    )
    if start:
        controller.start()
    return scene
