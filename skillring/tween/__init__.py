"""
Tween module - frame driven transitions.

Usage:
    from skillring.tween import TweenManager, ValueTween, Ease

    tweens = TweenManager()
    tweens.add(ValueTween(lambda: node.alpha, node.set_alpha, 1.0, 0.2))

    # With callbacks
    tweens.add(ValueTween(get, set, 0.0, 0.5)).on_complete(lambda: print("Done!"))

    # Stepwise scripts
    tweens.add(Sequence([Call(panel.animate_in), WaitSeconds(0.3), Call(hide)]))

    # Frame loop
    tweens.update(dt)
"""

from skillring.tween.ease import EPSILON, Curve, Ease, evaluate, lerp, safe_duration, smooth_step
from skillring.tween.tween import (
    Call,
    Sequence,
    Tween,
    TweenState,
    ValueTween,
    WaitFrames,
    WaitSeconds,
)
from skillring.tween.manager import TweenManager, TweenSlots

__all__ = [
    # Easing
    "EPSILON",
    "Curve",
    "Ease",
    "evaluate",
    "lerp",
    "safe_duration",
    "smooth_step",
    # Tweens
    "Tween",
    "TweenState",
    "ValueTween",
    "Sequence",
    "Call",
    "WaitFrames",
    "WaitSeconds",
    # Scheduling
    "TweenManager",
    "TweenSlots",
]
