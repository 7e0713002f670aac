"""Circular placement of the skill slots."""

from __future__ import annotations

import numpy as np


class RingLayout:
    """
    Target positions of N slots spread evenly on a circle.

    Slot i sits at angle ``180 + angle_offset + i * 360 / N`` degrees, so
    slot 0 is always half a turn away from the offset direction. A ring
    with zero slots still yields one position so nothing divides by zero.
    When the ring is closed every slot rests on the shared collapsed anchor
    ``(0, radius)``.
    """

    def __init__(self, count: int, radius: float, angle_offset: float = 0.0):
        self.count = count
        self.radius = float(radius)
        self.angle_offset = float(angle_offset)

        total = max(1, count)
        self.step_angle = 360.0 / total
        angles = np.deg2rad(self.angle_offset + self.step_angle * np.arange(total) + 180.0)
        self._positions = np.column_stack((np.cos(angles), np.sin(angles))) * self.radius
        self._positions.setflags(write=False)
        self._anchor = np.array([0.0, self.radius])
        self._anchor.setflags(write=False)

    @property
    def positions(self) -> np.ndarray:
        """(max(1, N), 2) array of ring positions."""
        return self._positions

    @property
    def collapsed_anchor(self) -> np.ndarray:
        return self._anchor

    def position(self, index: int) -> np.ndarray:
        return self._positions[index]

    def angle_for_slot(self, index: int) -> float:
        """Ring rotation in degrees that brings slot index to the anchor."""
        return -(self.step_angle * index) + self.angle_offset

    def __len__(self) -> int:
        return len(self._positions)
