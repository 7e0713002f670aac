"""Observer list used for menu notifications."""

from __future__ import annotations

from typing import Callable, Generic, TypeVar

T = TypeVar("T")

Handler = Callable[[T], None]


class Event(Generic[T]):
    """
    Handlers notified with a single value, in subscription order.

    Usage:
        on_skill_changed: Event[int] = Event()
        on_skill_changed += lambda index: print(f"Selected: {index}")
        on_skill_changed.emit(2)

    A handler is kept once however often it subscribes. Changes made while
    an emit is in progress take effect on the next emit.
    """

    def __init__(self):
        self._handlers: list[Handler] = []

    def __iadd__(self, handler: Handler) -> "Event[T]":
        if handler not in self._handlers:
            self._handlers.append(handler)
        return self

    def __isub__(self, handler: Handler) -> "Event[T]":
        self._handlers = [h for h in self._handlers if h != handler]
        return self

    def emit(self, value: T) -> None:
        for handler in tuple(self._handlers):
            handler(value)

    def clear(self) -> None:
        self._handlers = []

    def __len__(self) -> int:
        return len(self._handlers)
