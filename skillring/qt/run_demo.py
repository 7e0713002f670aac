"""Demo window showing a radial menu."""

from __future__ import annotations

import sys
from pathlib import Path

from PyQt6.QtWidgets import QApplication

from skillring import log
from skillring.qt.menu_widget import RadialMenuWidget
from skillring.radial import PanelConfig, RadialMenuConfig, SkillConfig, build_menu, load_config


def demo_config() -> RadialMenuConfig:
    """Four skills, each with a small detail panel."""
    names = ["Fire", "Frost", "Storm", "Earth"]
    return RadialMenuConfig(
        skills=[
            SkillConfig(
                name=name,
                active_icon=name.upper(),
                inactive_icon=name.lower(),
                panel=PanelConfig(top_icons=3, bottom_icons=2 + index % 2),
            )
            for index, name in enumerate(names)
        ]
    )


def run_demo(config_path: Path | str | None = None) -> int:
    app = QApplication.instance() or QApplication(sys.argv)

    config = load_config(config_path) if config_path else demo_config()
    scene = build_menu(config)
    scene.controller.on_skill_changed += lambda index: log.info(
        f"Skill changed: {index} ({scene.slots[index].name})"
    )

    widget = RadialMenuWidget(scene)
    widget.setWindowTitle("skillring")
    widget.resize(560, 560)
    widget.show()
    widget.start()
    return app.exec()
