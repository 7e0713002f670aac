"""Base Tween class, value tweens and step sequences."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Sequence as SequenceType, Union

from skillring.tween.ease import Curve, Ease, evaluate as ease_evaluate, lerp, safe_duration


class TweenState(Enum):
    """Tween lifecycle state."""

    RUNNING = auto()
    COMPLETED = auto()
    KILLED = auto()


class Tween(ABC):
    """
    Base class for all time based transitions.

    A tween is an explicit state object: it holds its own elapsed time and is
    advanced by TweenManager.update(dt) once per frame. Killing a tween only
    stops future updates; values already written stay where they are.

    Subclasses implement:
    - _apply(t): write the interpolated value for eased progress t
    - _begin(): optional, capture start values on the first tick
    - _finish(): optional, write exact target values (defaults to _apply(1.0))
    """

    def __init__(
        self,
        duration: float,
        ease: Curve = Ease.LINEAR,
        delay: float = 0.0,
        owner: Any = None,
    ):
        self.duration = safe_duration(duration)
        self.ease = ease
        self.delay = delay
        # Arbitrary tag used by TweenManager.kill_all(owner=...)
        self.owner = owner

        self._elapsed: float = 0.0
        self._begun: bool = False
        self._state: TweenState = TweenState.RUNNING
        self._on_complete: Callable[[], None] | None = None

    @property
    def state(self) -> TweenState:
        return self._state

    @property
    def is_alive(self) -> bool:
        """True until the tween completes or is killed."""
        return self._state == TweenState.RUNNING

    @property
    def is_complete(self) -> bool:
        return self._state == TweenState.COMPLETED

    def kill(self) -> "Tween":
        """Stop the tween without applying its final values."""
        if self.is_alive:
            self._state = TweenState.KILLED
        return self

    def on_complete(self, callback: Callable[[], None]) -> "Tween":
        """Set callback invoked after the final values are written."""
        self._on_complete = callback
        return self

    def start(self) -> None:
        """Called by the manager when the tween is scheduled."""

    def snap(self) -> None:
        """Jump straight to the final state, as if the duration had elapsed."""
        if not self.is_alive:
            return
        if not self._begun:
            self._begun = True
            self._begin()
        self._complete()

    def update(self, dt: float) -> bool:
        """
        Advance tween by dt seconds.

        Returns:
            True if tween is still alive, False if completed or killed.
        """
        if self._state != TweenState.RUNNING:
            return False

        self._elapsed += dt
        if self._elapsed < self.delay:
            return True

        if not self._begun:
            self._begun = True
            self._begin()

        raw_t = min(1.0, (self._elapsed - self.delay) / self.duration)
        if raw_t >= 1.0:
            self._complete()
            return False

        self._apply(ease_evaluate(self.ease, raw_t))
        return True

    def _complete(self) -> None:
        self._finish()
        self._state = TweenState.COMPLETED
        if self._on_complete is not None:
            self._on_complete()

    def _begin(self) -> None:
        pass

    def _finish(self) -> None:
        self._apply(1.0)

    @abstractmethod
    def _apply(self, t: float) -> None:
        """Apply interpolated value at eased progress t."""


class ValueTween(Tween):
    """
    Tween of a single float reached through a getter/setter pair.

    The start value is read from the getter on the first tick, so a value
    left half way by a killed tween is continued from where it stands.
    A tween scheduled from inside TweenManager.update() takes its first
    tick, and so reads its start, one frame after it was created.
    """

    def __init__(
        self,
        getter: Callable[[], float],
        setter: Callable[[float], None],
        target: float,
        duration: float,
        ease: Curve = Ease.LINEAR,
        delay: float = 0.0,
        owner: Any = None,
    ):
        super().__init__(duration, ease, delay, owner)
        self.getter = getter
        self.setter = setter
        self.target = float(target)
        self._start: float = 0.0

    def _begin(self) -> None:
        self._start = float(self.getter())

    def _apply(self, t: float) -> None:
        self.setter(lerp(self._start, self.target, t))

    def _finish(self) -> None:
        self.setter(self.target)


@dataclass
class Call:
    """Sequence step: invoke fn and continue in the same frame."""

    fn: Callable[[], None]


@dataclass
class WaitFrames:
    """Sequence step: resume after the given number of frames."""

    frames: int = 1


@dataclass
class WaitSeconds:
    """Sequence step: resume on the first frame at least `seconds` later."""

    seconds: float


Step = Union[Call, WaitFrames, WaitSeconds]


class Sequence(Tween):
    """
    Ordered list of calls and waits, advanced one frame at a time.

    Steps before the first wait run as soon as the sequence is scheduled.
    A wait consumes at most one frame per update, so two consecutive waits
    never finish inside the same frame.
    """

    def __init__(self, steps: SequenceType[Step], owner: Any = None):
        super().__init__(0.0, owner=owner)
        self._steps: list[Step] = list(steps)
        self._index = 0
        self._waiting = False
        self._frames_left = 0
        self._waited = 0.0

    @property
    def step_index(self) -> int:
        return self._index

    def start(self) -> None:
        if self._state == TweenState.RUNNING:
            self._run(None)

    def snap(self) -> None:
        """Run every remaining step at once, skipping the waits."""
        while self.is_alive and self._index < len(self._steps):
            step = self._steps[self._index]
            self._index += 1
            self._waiting = False
            if isinstance(step, Call):
                step.fn()
        if self.is_alive:
            self._complete()

    def update(self, dt: float) -> bool:
        if self._state != TweenState.RUNNING:
            return False
        self._run(dt)
        return self.is_alive

    def _run(self, dt: float | None) -> None:
        budget = dt
        while self._index < len(self._steps):
            step = self._steps[self._index]

            if isinstance(step, Call):
                self._index += 1
                step.fn()
                if self._state != TweenState.RUNNING:
                    return
                continue

            if not self._waiting:
                self._waiting = True
                self._frames_left = step.frames if isinstance(step, WaitFrames) else 0
                self._waited = 0.0

            if budget is None:
                return

            if isinstance(step, WaitFrames):
                self._frames_left -= 1
                done = self._frames_left <= 0
            else:
                self._waited += budget
                done = self._waited >= step.seconds
            budget = None

            if not done:
                return
            self._waiting = False
            self._index += 1

        self._complete()

    def _finish(self) -> None:
        pass

    def _apply(self, t: float) -> None:
        pass
