"""skillring - radial skill selection menu with interruptible transitions."""

__version__ = "0.1.0"
