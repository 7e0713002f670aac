"""TweenManager - per-frame scheduler, and TweenSlots - one handle per kind."""

from __future__ import annotations

from typing import Any, Generic, Hashable, Iterator, TypeVar

from skillring.tween.tween import Tween

K = TypeVar("K", bound=Hashable)


class TweenManager:
    """
    Task list ticked once per frame.

    Usage:
        tweens = TweenManager()
        tweens.add(ValueTween(get_alpha, set_alpha, 1.0, 0.2))

        # In the frame loop, with an unscaled delta time
        tweens.update(dt)

    Tweens scheduled while an update is in progress are first advanced on
    the next update.
    """

    def __init__(self):
        self._tweens: list[Tween] = []
        self._ticking: list[Tween] = []

    def update(self, dt: float) -> None:
        """Advance all active tweens. Removes completed/killed tweens."""
        self._ticking = self._tweens
        self._tweens = []
        alive = []
        for tween in self._ticking:
            if tween.update(dt):
                alive.append(tween)
        self._ticking = []
        self._tweens = [t for t in alive if t.is_alive] + self._tweens

    def add(self, tween: Tween) -> Tween:
        """Schedule a tween and let it run its start hook."""
        self._tweens.append(tween)
        tween.start()
        return tween

    def _all(self) -> Iterator[Tween]:
        yield from self._ticking
        yield from self._tweens

    def kill_all(self, owner: Any = None) -> int:
        """
        Kill all tweens, optionally only those tagged with owner.

        Returns:
            Number of killed tweens.
        """
        killed = 0
        for tween in list(self._all()):
            if not tween.is_alive:
                continue
            if owner is None or tween.owner is owner:
                tween.kill()
                killed += 1
        return killed

    def count_for(self, owner: Any) -> int:
        """Number of live tweens tagged with owner."""
        return sum(1 for t in self._all() if t.is_alive and t.owner is owner)

    @property
    def count(self) -> int:
        """Number of live tweens."""
        return sum(1 for t in self._all() if t.is_alive)

    def clear(self) -> None:
        """Remove all tweens without calling callbacks."""
        for tween in self._all():
            tween.kill()
        self._tweens.clear()


class TweenSlots(Generic[K]):
    """
    At most one live tween per kind.

    launch() kills whatever the kind was running before scheduling the new
    tween. Different kinds never interfere with each other.
    """

    def __init__(self, manager: TweenManager):
        self._manager = manager
        self._active: dict[K, Tween] = {}

    @property
    def manager(self) -> TweenManager:
        return self._manager

    def launch(self, kind: K, tween: Tween) -> Tween:
        self.cancel(kind)
        self._active[kind] = tween
        return self._manager.add(tween)

    def snap(self, kind: K, tween: Tween) -> Tween:
        """Cancel the kind and apply tween's final state without scheduling it."""
        self.cancel(kind)
        tween.snap()
        return tween

    def cancel(self, kind: K) -> bool:
        tween = self._active.pop(kind, None)
        if tween is not None and tween.is_alive:
            tween.kill()
            return True
        return False

    def cancel_all(self) -> None:
        for kind in list(self._active):
            self.cancel(kind)

    def active(self, kind: K) -> Tween | None:
        tween = self._active.get(kind)
        if tween is not None and tween.is_alive:
            return tween
        return None

    def is_running(self, kind: K) -> bool:
        return self.active(kind) is not None
