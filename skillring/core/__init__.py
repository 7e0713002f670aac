"""Core helpers shared by the menu and the host adapters."""

from skillring.core.event import Event

__all__ = ["Event"]
