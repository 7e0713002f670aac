"""Tests for easing helpers."""

import pytest

from skillring.tween.ease import (
    EPSILON,
    Ease,
    ease_from_name,
    evaluate,
    lerp,
    safe_duration,
    smooth_step,
)


class TestSmoothStep:
    def test_end_points(self):
        assert smooth_step(0.0) == 0.0
        assert smooth_step(1.0) == 1.0
        assert smooth_step(0.5) == pytest.approx(0.5)

    def test_clamps_input(self):
        assert smooth_step(-0.5) == 0.0
        assert smooth_step(3.0) == 1.0

    def test_flat_ends(self):
        # Slower than linear near both ends
        assert smooth_step(0.1) < 0.1
        assert smooth_step(0.9) > 0.9


@pytest.mark.parametrize("ease", list(Ease))
def test_every_curve_maps_unit_interval(ease):
    assert evaluate(ease, 0.0) == pytest.approx(0.0, abs=1e-9)
    assert evaluate(ease, 1.0) == pytest.approx(1.0, abs=1e-9)


def test_evaluate_accepts_callable():
    assert evaluate(lambda t: t * t, 0.5) == pytest.approx(0.25)


def test_lerp():
    assert lerp(10.0, 20.0, 0.25) == pytest.approx(12.5)


def test_safe_duration_clamps_non_positive():
    assert safe_duration(0.0) == EPSILON
    assert safe_duration(-3.0) == EPSILON
    assert safe_duration(0.25) == 0.25


def test_ease_from_name():
    assert ease_from_name("smooth_step") is Ease.SMOOTH_STEP
    assert ease_from_name("OUT_QUAD") is Ease.OUT_QUAD
    with pytest.raises(ValueError):
        ease_from_name("wobble")
