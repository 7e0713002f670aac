"""Qt host for a built menu: draws the receptors and feeds clicks and frames."""

from __future__ import annotations

import math

import numpy as np
from PyQt6 import QtCore, QtGui, QtWidgets
from PyQt6.QtCore import QElapsedTimer, QTimer

from skillring.radial.builder import MenuScene

SLOT_RADIUS = 24.0
TOGGLE_RADIUS = 28.0
PANEL_ICON_SIZE = 18.0
PANEL_ICON_SPACING = 36.0


def rotate(point: np.ndarray, degrees: float) -> np.ndarray:
    rad = math.radians(degrees)
    c, s = math.cos(rad), math.sin(rad)
    return np.array([c * point[0] - s * point[1], s * point[0] + c * point[1]])


class RadialMenuWidget(QtWidgets.QWidget):
    """
    Paints a MenuScene and drives its scheduler.

    Menu coordinates are y-up with the origin at the toggle button; the
    widget centre is the origin. A ~60 FPS QTimer measures real elapsed time
    with QElapsedTimer and calls tick(dt).
    """

    def __init__(self, scene: MenuScene, parent: QtWidgets.QWidget | None = None):
        super().__init__(parent)
        self.scene = scene
        self.setMinimumSize(480, 480)

        self._frame_timer = QTimer(self)
        self._frame_timer.timeout.connect(self._on_frame)
        self._elapsed = QElapsedTimer()

    # --- frame loop ---

    def start(self, interval_ms: int = 16) -> None:
        self._elapsed.start()
        self._frame_timer.start(interval_ms)

    def stop(self) -> None:
        self._frame_timer.stop()

    def _on_frame(self) -> None:
        dt = self._elapsed.restart() / 1000.0
        self.tick(dt)

    def tick(self, dt: float) -> None:
        self.scene.update(dt)
        self.update()

    # --- geometry ---

    def _origin(self) -> QtCore.QPointF:
        return QtCore.QPointF(self.width() / 2.0, self.height() / 2.0)

    def to_widget(self, point) -> QtCore.QPointF:
        origin = self._origin()
        return QtCore.QPointF(origin.x() + float(point[0]), origin.y() - float(point[1]))

    def slot_center(self, index: int) -> QtCore.QPointF | None:
        button = self.scene.slots[index].button
        if button is None:
            return None
        world = rotate(button.anchored_position, self.scene.menu_root.local_rotation)
        return self.to_widget(world)

    def slot_at(self, x: float, y: float) -> int | None:
        """Index of the active slot under widget point (x, y)."""
        for index, slot in enumerate(self.scene.slots):
            button = slot.button
            if button is None or not button.active or button.local_scale <= 0.0:
                continue
            center = self.slot_center(index)
            if math.hypot(x - center.x(), y - center.y()) <= SLOT_RADIUS * button.local_scale:
                return index
        return None

    def toggle_hit(self, x: float, y: float) -> bool:
        origin = self._origin()
        radius = TOGGLE_RADIUS * self.scene.toggle_button.local_scale
        return math.hypot(x - origin.x(), y - origin.y()) <= radius

    # --- input ---

    def mousePressEvent(self, event: QtGui.QMouseEvent) -> None:
        pos = event.position()
        self.click(pos.x(), pos.y())

    def click(self, x: float, y: float) -> None:
        controller = self.scene.controller
        if self.toggle_hit(x, y):
            controller.toggle_window()
            return
        index = self.slot_at(x, y)
        if index is not None:
            controller.on_click(index)

    # --- painting ---

    def paintEvent(self, event: QtGui.QPaintEvent) -> None:
        painter = QtGui.QPainter(self)
        painter.setRenderHint(QtGui.QPainter.RenderHint.Antialiasing)
        painter.fillRect(self.rect(), QtGui.QColor(30, 30, 34))

        self._paint_window(painter)
        self._paint_slots(painter)
        self._paint_toggle(painter)
        painter.end()

    def _paint_window(self, painter: QtGui.QPainter) -> None:
        scene = self.scene
        alpha = scene.window.alpha
        if alpha <= 0.0:
            return
        painter.save()
        painter.setOpacity(alpha)

        radius = scene.controller.layout.radius + SLOT_RADIUS * 1.5
        origin = self._origin()
        painter.setPen(QtCore.Qt.PenStyle.NoPen)
        painter.setBrush(QtGui.QColor(55, 60, 75))
        painter.drawEllipse(origin, radius, radius)

        painter.setPen(QtGui.QColor(230, 230, 230))
        label_rect = QtCore.QRectF(origin.x() - 100, origin.y() + TOGGLE_RADIUS * 1.6, 200, 20)
        painter.drawText(label_rect, QtCore.Qt.AlignmentFlag.AlignCenter, scene.label.text)

        for panel in scene.panels:
            if panel is None or not panel.active:
                continue
            self._paint_panel_group(painter, panel.top_icons, QtGui.QColor(120, 200, 255))
            self._paint_panel_group(painter, panel.bottom_icons, QtGui.QColor(255, 180, 100))
        painter.restore()

    def _paint_panel_group(self, painter: QtGui.QPainter, icons, color: QtGui.QColor) -> None:
        painter.setPen(QtCore.Qt.PenStyle.NoPen)
        painter.setBrush(color)
        half = (len(icons) - 1) / 2.0
        for i, icon in enumerate(icons):
            if icon is None:
                continue
            pos = icon.anchored_position
            center = self.to_widget((pos[0] + (i - half) * PANEL_ICON_SPACING, pos[1]))
            size = PANEL_ICON_SIZE * icon.local_scale
            painter.drawRect(QtCore.QRectF(center.x() - size / 2, center.y() - size / 2, size, size))

    def _paint_slots(self, painter: QtGui.QPainter) -> None:
        scene = self.scene
        for index, slot in enumerate(scene.slots):
            button = slot.button
            if button is None or not button.active or button.local_scale <= 0.0:
                continue
            center = self.slot_center(index)
            radius = SLOT_RADIUS * button.local_scale
            is_selected = index == scene.controller.current_index

            painter.setPen(QtGui.QPen(QtGui.QColor(20, 20, 20), 2))
            painter.setBrush(QtGui.QColor(240, 200, 80) if is_selected else QtGui.QColor(150, 150, 160))
            painter.drawEllipse(center, radius, radius)

            sprite = slot.icon.sprite if slot.icon is not None else None
            if sprite:
                painter.setPen(QtGui.QColor(20, 20, 20))
                rect = QtCore.QRectF(center.x() - radius, center.y() - radius, radius * 2, radius * 2)
                painter.drawText(rect, QtCore.Qt.AlignmentFlag.AlignCenter, str(sprite)[:3])

    def _paint_toggle(self, painter: QtGui.QPainter) -> None:
        origin = self._origin()
        radius = TOGGLE_RADIUS * self.scene.toggle_button.local_scale
        painter.setPen(QtGui.QPen(QtGui.QColor(20, 20, 20), 2))
        painter.setBrush(QtGui.QColor(90, 160, 110))
        painter.drawEllipse(origin, radius, radius)
