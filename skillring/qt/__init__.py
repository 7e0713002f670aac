"""PyQt6 host for the radial menu."""

from skillring.qt.menu_widget import RadialMenuWidget
from skillring.qt.run_demo import demo_config, run_demo

__all__ = ["RadialMenuWidget", "demo_config", "run_demo"]
