"""Tests for the PyQt6 host widget."""

import os

import pytest

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")
QtWidgets = pytest.importorskip("PyQt6.QtWidgets")

from skillring.qt import RadialMenuWidget, demo_config  # noqa: E402
from skillring.radial import build_menu  # noqa: E402


@pytest.fixture(scope="module")
def app():
    return QtWidgets.QApplication.instance() or QtWidgets.QApplication([])


@pytest.fixture
def widget(app):
    w = RadialMenuWidget(build_menu(demo_config()))
    w.resize(500, 500)
    yield w
    w.stop()
    w.deleteLater()


def test_toggle_click_opens_menu(widget):
    assert widget.toggle_hit(250, 250)

    widget.click(250, 250)
    widget.tick(1.0)

    menu = widget.scene.controller
    assert menu.is_window_open
    assert widget.scene.window.alpha == 1.0


def test_slot_click_selects(widget):
    widget.click(250, 250)
    widget.tick(1.0)

    center = widget.slot_center(1)
    assert widget.slot_at(center.x(), center.y()) == 1

    widget.click(center.x(), center.y())

    assert widget.scene.controller.current_index == 1


def test_collapsed_hides_unselected_slots(widget):
    for index in range(1, len(widget.scene.slots)):
        center = widget.slot_center(index)
        assert widget.slot_at(center.x(), center.y()) != index


def test_paint_does_not_fail(widget):
    widget.click(250, 250)
    widget.tick(0.1)
    image = widget.grab()
    assert not image.isNull()
