"""Tests for menu configuration and build_menu."""

import json

import pytest

from skillring.radial import (
    PanelConfig,
    RadialMenuConfig,
    SkillConfig,
    build_menu,
    load_config,
    save_config,
)
from skillring.tween import Ease


def sample_config():
    return RadialMenuConfig(
        skills=[
            SkillConfig("Fire", "fire_on", "fire_off", PanelConfig(top_icons=2, bottom_icons=4)),
            SkillConfig("Frost", "frost_on", "frost_off"),
        ],
        radius=90.0,
        angle_offset=45.0,
        default_skill_index=1,
        start_open=True,
    )


def test_defaults_from_empty_dict():
    config = RadialMenuConfig.from_dict({})
    assert config.skills == []
    assert config.radius == 150.0
    assert config.fade_duration == pytest.approx(0.2)
    assert config.expand_duration == pytest.approx(0.25)
    assert config.open_window_scale == pytest.approx(1.2)
    assert config.closed_window_scale == pytest.approx(0.8)
    assert config.start_open is False


def test_panel_defaults():
    panel = PanelConfig.from_dict({"top_icons": 4})
    assert panel.top_icons == 4
    assert panel.bottom_icons == 3
    assert panel.move_duration == pytest.approx(0.25)
    assert panel.stagger_delay == pytest.approx(0.04)
    assert panel.curve is Ease.SMOOTH_STEP


def test_dict_round_trip():
    config = sample_config()
    assert RadialMenuConfig.from_dict(config.to_dict()) == config


def test_unknown_curve_raises():
    with pytest.raises(ValueError):
        PanelConfig.from_dict({"curve": "zigzag"})


def test_save_and_load(tmp_path):
    path = tmp_path / "menu.json"
    save_config(sample_config(), path)

    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["skills"][0]["panel"]["curve"] == "SMOOTH_STEP"
    assert "panel" not in data["skills"][1]

    assert load_config(path) == sample_config()


def test_build_menu_from_config():
    scene = build_menu(sample_config())

    assert len(scene.slots) == 2
    assert scene.slots[0].panel is scene.panels[0]
    assert scene.panels[1] is None
    assert len(scene.panels[0].top_icons) == 2
    assert len(scene.panels[0].bottom_icons) == 4
    assert scene.controller.current_index == 1
    assert scene.controller.is_window_open
    assert scene.label.text == "Frost"
    assert scene.icons[1].sprite == "frost_on"


def test_build_menu_without_start():
    scene = build_menu(sample_config(), start=False)
    assert scene.label.text == ""
    assert not scene.controller.is_window_open
