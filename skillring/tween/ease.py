"""Easing functions and interpolation helpers.

An easing function maps normalized time t in [0, 1] to an interpolation
factor, also in [0, 1] for every curve provided here.

Terminology:
- IN: slow start, accelerating towards the end
- OUT: fast start, decelerating towards the end
- IN_OUT: slow start and slow end, fast middle
- SMOOTH_STEP: 3t^2 - 2t^3, the classic Hermite ease with flat tangents on
  both ends. Used for ring layout and rotation, and as the default icon curve.
"""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Callable, Union

# Smallest duration any transition is allowed to have.
EPSILON = 1e-4


class Ease(Enum):
    """Named easing curves."""

    LINEAR = auto()

    IN_QUAD = auto()
    OUT_QUAD = auto()
    IN_OUT_QUAD = auto()

    IN_CUBIC = auto()
    OUT_CUBIC = auto()
    IN_OUT_CUBIC = auto()

    IN_SINE = auto()
    OUT_SINE = auto()
    IN_OUT_SINE = auto()

    SMOOTH_STEP = auto()


Curve = Union[Ease, Callable[[float], float]]


def clamp01(t: float) -> float:
    if t < 0.0:
        return 0.0
    if t > 1.0:
        return 1.0
    return t


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def safe_duration(duration: float) -> float:
    """Clamp a configured duration so it can be used as a denominator."""
    return max(duration, EPSILON)


def linear(t: float) -> float:
    return t


def in_quad(t: float) -> float:
    return t * t


def out_quad(t: float) -> float:
    return 1 - (1 - t) * (1 - t)


def in_out_quad(t: float) -> float:
    return 2 * t * t if t < 0.5 else 1 - (-2 * t + 2) ** 2 / 2


def in_cubic(t: float) -> float:
    return t * t * t


def out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


def in_out_cubic(t: float) -> float:
    return 4 * t * t * t if t < 0.5 else 1 - (-2 * t + 2) ** 3 / 2


def in_sine(t: float) -> float:
    return 1 - math.cos(t * math.pi / 2)


def out_sine(t: float) -> float:
    return math.sin(t * math.pi / 2)


def in_out_sine(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


def smooth_step(t: float) -> float:
    """Hermite smooth step; t is clamped to [0, 1] first."""
    t = clamp01(t)
    return t * t * (3 - 2 * t)


_EASE_FUNCTIONS: dict[Ease, Callable[[float], float]] = {
    Ease.LINEAR: linear,
    Ease.IN_QUAD: in_quad,
    Ease.OUT_QUAD: out_quad,
    Ease.IN_OUT_QUAD: in_out_quad,
    Ease.IN_CUBIC: in_cubic,
    Ease.OUT_CUBIC: out_cubic,
    Ease.IN_OUT_CUBIC: in_out_cubic,
    Ease.IN_SINE: in_sine,
    Ease.OUT_SINE: out_sine,
    Ease.IN_OUT_SINE: in_out_sine,
    Ease.SMOOTH_STEP: smooth_step,
}


def evaluate(curve: Curve, t: float) -> float:
    """
    Evaluate curve at normalized time t.

    curve may be an Ease member or any callable taking and returning float.
    """
    if isinstance(curve, Ease):
        return _EASE_FUNCTIONS[curve](t)
    return curve(t)


def ease_from_name(name: str) -> Ease:
    """Look up an Ease member by its name, case-insensitively."""
    try:
        return Ease[name.strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown easing curve: {name!r}") from None
