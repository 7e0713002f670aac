"""SkillSlot - one selectable entry of the ring."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from skillring.radial.icon_cluster import IconClusterAnimator
from skillring.ui.nodes import ImageReceptor, TransformReceptor


@dataclass
class SkillSlot:
    """
    Static description of a slot plus the handles the menu writes to.

    - button: transform of the slot's button; its position, scale and active
      flag are the slot placement driven by the ring transitions
    - icon: image receptor that shows active_sprite while the slot is
      selected and inactive_sprite otherwise
    - panel: optional detail panel shown while the slot is selected
    """

    name: str = "Skill"
    button: TransformReceptor | None = None
    icon: ImageReceptor | None = None
    active_sprite: Any = None
    inactive_sprite: Any = None
    panel: IconClusterAnimator | None = None
