"""
Radial menu configuration.

Static values set once at startup: layout, timings, scales and the list of
skills. Configuration can be kept in a JSON file; runtime state (selection,
open/closed) is never written back.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from skillring.tween.ease import Ease, ease_from_name


@dataclass
class PanelConfig:
    """
    Detail panel made of two icon groups.

    - top_icons / bottom_icons: number of icons in each group
    - top_offset / bottom_offset: y offset of each group when open
    - move_duration: time of a single icon move
    - stagger_delay: delay between launching successive icon rows
    """

    top_icons: int = 3
    bottom_icons: int = 3
    move_duration: float = 0.25
    stagger_delay: float = 0.04
    top_offset: float = 120.0
    bottom_offset: float = -120.0
    curve: Ease = Ease.SMOOTH_STEP

    def to_dict(self) -> dict:
        return {
            "top_icons": self.top_icons,
            "bottom_icons": self.bottom_icons,
            "move_duration": self.move_duration,
            "stagger_delay": self.stagger_delay,
            "top_offset": self.top_offset,
            "bottom_offset": self.bottom_offset,
            "curve": self.curve.name,
        }

    @staticmethod
    def from_dict(data: dict) -> "PanelConfig":
        return PanelConfig(
            top_icons=int(data.get("top_icons", 3)),
            bottom_icons=int(data.get("bottom_icons", 3)),
            move_duration=float(data.get("move_duration", 0.25)),
            stagger_delay=float(data.get("stagger_delay", 0.04)),
            top_offset=float(data.get("top_offset", 120.0)),
            bottom_offset=float(data.get("bottom_offset", -120.0)),
            curve=ease_from_name(data.get("curve", "SMOOTH_STEP")),
        )


@dataclass
class SkillConfig:
    """One ring entry. Icons are sprite identifiers understood by the host."""

    name: str = "Skill"
    active_icon: str = ""
    inactive_icon: str = ""
    panel: Optional[PanelConfig] = None

    def to_dict(self) -> dict:
        result = {
            "name": self.name,
            "active_icon": self.active_icon,
            "inactive_icon": self.inactive_icon,
        }
        if self.panel is not None:
            result["panel"] = self.panel.to_dict()
        return result

    @staticmethod
    def from_dict(data: dict) -> "SkillConfig":
        panel_data = data.get("panel")
        return SkillConfig(
            name=data.get("name", "Skill"),
            active_icon=data.get("active_icon", ""),
            inactive_icon=data.get("inactive_icon", ""),
            panel=PanelConfig.from_dict(panel_data) if panel_data is not None else None,
        )


@dataclass
class RadialMenuConfig:
    skills: List[SkillConfig] = field(default_factory=list)

    # Layout
    radius: float = 150.0
    angle_offset: float = 0.0
    selected_scale: float = 1.2
    unselected_scale: float = 1.0

    # Animation timings, seconds
    fade_duration: float = 0.20
    scale_duration: float = 0.20
    expand_duration: float = 0.25
    collapse_duration: float = 0.20
    rotation_duration: float = 0.25

    # Toggle button scales
    open_window_scale: float = 1.2
    closed_window_scale: float = 0.8

    # Initial state
    default_skill_index: int = 0
    start_open: bool = False

    _SCALARS = (
        "radius",
        "angle_offset",
        "selected_scale",
        "unselected_scale",
        "fade_duration",
        "scale_duration",
        "expand_duration",
        "collapse_duration",
        "rotation_duration",
        "open_window_scale",
        "closed_window_scale",
    )

    def to_dict(self) -> dict:
        result = {"skills": [skill.to_dict() for skill in self.skills]}
        for key in self._SCALARS:
            result[key] = getattr(self, key)
        result["default_skill_index"] = self.default_skill_index
        result["start_open"] = self.start_open
        return result

    @staticmethod
    def from_dict(data: dict) -> "RadialMenuConfig":
        config = RadialMenuConfig(
            skills=[SkillConfig.from_dict(s) for s in data.get("skills", [])],
            default_skill_index=int(data.get("default_skill_index", 0)),
            start_open=bool(data.get("start_open", False)),
        )
        for key in RadialMenuConfig._SCALARS:
            if key in data:
                setattr(config, key, float(data[key]))
        return config


def load_config(path: Path | str) -> RadialMenuConfig:
    """Read configuration from a JSON file."""
    with open(path, "r", encoding="utf-8") as f:
        return RadialMenuConfig.from_dict(json.load(f))


def save_config(config: RadialMenuConfig, path: Path | str) -> None:
    with open(path, "w", encoding="utf-8") as f:
        json.dump(config.to_dict(), f, indent=4)
