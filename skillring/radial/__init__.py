"""
Radial skill menu.

Usage:
    from skillring.radial import build_menu, load_config

    scene = build_menu(load_config("skills.json"))
    scene.controller.on_skill_changed += on_changed
    scene.controller.toggle_window()

    # every frame
    scene.update(dt)
"""

from skillring.radial.builder import MenuScene, build_menu, build_panel
from skillring.radial.config import (
    PanelConfig,
    RadialMenuConfig,
    SkillConfig,
    load_config,
    save_config,
)
from skillring.radial.controller import PANEL_SWITCH_CUTOFF, RadialMenuController, TransitionKind
from skillring.radial.icon_cluster import IconClusterAnimator
from skillring.radial.layout import RingLayout
from skillring.radial.slot import SkillSlot
from skillring.radial.transitions import FadeScaleTween, RingTween, RotateTween

__all__ = [
    "RadialMenuController",
    "TransitionKind",
    "PANEL_SWITCH_CUTOFF",
    "IconClusterAnimator",
    "RingLayout",
    "SkillSlot",
    "FadeScaleTween",
    "RingTween",
    "RotateTween",
    "PanelConfig",
    "SkillConfig",
    "RadialMenuConfig",
    "load_config",
    "save_config",
    "MenuScene",
    "build_menu",
    "build_panel",
]
