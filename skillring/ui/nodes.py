"""
Receptors for the values the menu produces.

The menu never draws anything. It writes positions, scales, rotations,
opacity and text into the objects below, and a host (the Qt widget in
skillring.qt, or a game engine binding) turns them into pixels.

The Protocol classes describe what the menu needs; the plain classes are
in-memory implementations that hosts can read from directly.
"""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

import numpy as np


@runtime_checkable
class TransformReceptor(Protocol):
    @property
    def anchored_position(self) -> np.ndarray: ...

    @property
    def local_scale(self) -> float: ...

    @property
    def local_rotation(self) -> float: ...

    @property
    def active(self) -> bool: ...

    def set_anchored_position(self, position) -> None: ...

    def set_local_scale(self, scale: float) -> None: ...

    def set_local_rotation(self, degrees: float) -> None: ...

    def set_active(self, active: bool) -> None: ...


@runtime_checkable
class CanvasReceptor(Protocol):
    @property
    def alpha(self) -> float: ...

    def set_alpha(self, alpha: float) -> None: ...

    def set_interactable(self, interactable: bool) -> None: ...

    def set_blocks_input(self, blocks: bool) -> None: ...


@runtime_checkable
class LabelReceptor(Protocol):
    def set_text(self, text: str) -> None: ...


@runtime_checkable
class ImageReceptor(Protocol):
    def set_sprite(self, sprite: Any) -> None: ...


class RectNode:
    """2D transform: anchored position, uniform scale, z rotation in degrees."""

    def __init__(
        self,
        name: str = "",
        position=(0.0, 0.0),
        scale: float = 1.0,
        rotation: float = 0.0,
        active: bool = True,
    ):
        self.name = name
        self._position = np.array(position, dtype=np.float64)
        self._scale = float(scale)
        self._rotation = float(rotation)
        self._active = active

    @property
    def anchored_position(self) -> np.ndarray:
        return self._position.copy()

    @property
    def local_scale(self) -> float:
        return self._scale

    @property
    def local_rotation(self) -> float:
        return self._rotation

    @property
    def active(self) -> bool:
        return self._active

    @property
    def y(self) -> float:
        return float(self._position[1])

    def set_anchored_position(self, position) -> None:
        self._position = np.array(position, dtype=np.float64)

    def set_y(self, y: float) -> None:
        self._position[1] = y

    def set_local_scale(self, scale: float) -> None:
        self._scale = float(scale)

    def set_local_rotation(self, degrees: float) -> None:
        self._rotation = float(degrees)

    def set_active(self, active: bool) -> None:
        self._active = bool(active)

    def __repr__(self) -> str:
        return (
            f"RectNode({self.name!r}, pos={self._position.tolist()}, "
            f"scale={self._scale:.3f}, rot={self._rotation:.1f}, active={self._active})"
        )


class CanvasGroup:
    """Opacity and input flags of a container."""

    def __init__(self, alpha: float = 1.0, interactable: bool = True, blocks_input: bool = True):
        self._alpha = float(alpha)
        self.interactable = interactable
        self.blocks_input = blocks_input

    @property
    def alpha(self) -> float:
        return self._alpha

    def set_alpha(self, alpha: float) -> None:
        self._alpha = float(alpha)

    def set_interactable(self, interactable: bool) -> None:
        self.interactable = bool(interactable)

    def set_blocks_input(self, blocks: bool) -> None:
        self.blocks_input = bool(blocks)


class TextLabel:
    def __init__(self, text: str = ""):
        self.text = text

    def set_text(self, text: str) -> None:
        self.text = text


class ImageNode:
    def __init__(self, sprite: Any = None):
        self.sprite = sprite

    def set_sprite(self, sprite: Any) -> None:
        self.sprite = sprite
