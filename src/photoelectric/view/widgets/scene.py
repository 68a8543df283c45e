"""Animated scene: light source, cathode, anode and emitted electrons."""
from __future__ import annotations

from typing import Sequence, TYPE_CHECKING

from PySide6.QtCore import Qt, QRectF, QPointF
from PySide6.QtGui import QPainter, QColor, QBrush, QPen, QFont
from PySide6.QtWidgets import QWidget, QSizePolicy

from photoelectric.config import SCENE_WIDTH, SCENE_HEIGHT, CATHODE_X

if TYPE_CHECKING:
    from photoelectric.model.materials import Material
    from photoelectric.model.particles import Particle
    from photoelectric.model.physics import PhysicsResult


ELECTRON_COLOR = QColor("#60A5FA")
ELECTRON_GLOW = QColor("#3B82F6")


class SceneWidget(QWidget):
    """
    Paints the experiment in a fixed 800x400 logical frame scaled to the widget.
    The widget only reads snapshots; it never mutates the simulation.
    """

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.setMinimumSize(SCENE_WIDTH // 2, SCENE_HEIGHT // 2)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)

        self._physics: PhysicsResult | None = None
        self._material: Material | None = None
        self._particles: Sequence[Particle] = ()
        self._running: bool = False

    # --- Public API ---
    def set_physics(self, physics: PhysicsResult, material: Material) -> None:
        self._physics = physics
        self._material = material
        self.update()

    def set_particles(self, particles: Sequence[Particle]) -> None:
        self._particles = particles
        self.update()

    def set_running(self, running: bool) -> None:
        self._running = running
        self.update()

    # --- Painting ---
    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.Antialiasing)
        painter.fillRect(self.rect(), Qt.black)

        sx = self.width() / SCENE_WIDTH
        sy = self.height() / SCENE_HEIGHT
        painter.scale(sx, sy)

        mid_y = SCENE_HEIGHT / 2
        self._paint_light_source(painter, mid_y)
        if self._physics is not None:
            if self._running:
                self._paint_beam(painter, mid_y)
            self._paint_cathode(painter, mid_y)
            self._paint_electrons(painter)
            self._paint_anode(painter, mid_y)
            self._paint_voltmeter(painter)
            self._paint_indicator(painter)
        painter.end()

    def _paint_light_source(self, painter: QPainter, mid_y: float) -> None:
        painter.setPen(Qt.NoPen)
        painter.setBrush(QColor("#FACC15"))
        painter.drawRoundedRect(QRectF(16, mid_y - 24, 32, 48), 6, 6)
        painter.setBrush(QColor("white"))
        painter.drawEllipse(QPointF(32, mid_y), 4, 4)

    def _paint_beam(self, painter: QPainter, mid_y: float) -> None:
        color = QColor(self._physics.color)
        glow = QColor(color)
        glow.setAlpha(60)
        painter.setPen(Qt.NoPen)
        painter.setBrush(glow)
        painter.drawRect(QRectF(48, mid_y - 10, 220, 20))
        color.setAlpha(150)
        painter.setBrush(color)
        painter.drawRect(QRectF(48, mid_y - 4, 220, 8))

    def _paint_cathode(self, painter: QPainter, mid_y: float) -> None:
        painter.setPen(Qt.NoPen)
        painter.setBrush(QColor(self._material.color))
        painter.drawRoundedRect(QRectF(CATHODE_X, mid_y - 64, 16, 128), 4, 4)

        painter.setPen(QColor("white"))
        painter.setFont(QFont("Sans", 9))
        painter.drawText(QPointF(CATHODE_X + 20, 40), self._material.name)
        painter.drawText(QPointF(CATHODE_X + 20, 56), f"φ = {self._material.work_function:g} eV")

    def _paint_electrons(self, painter: QPainter) -> None:
        painter.setPen(QPen(ELECTRON_GLOW, 1))
        for p in self._particles:
            color = QColor(ELECTRON_COLOR)
            color.setAlphaF(p.opacity)
            painter.setBrush(QBrush(color))
            painter.drawEllipse(QRectF(p.x, p.y, 8, 8))

    def _paint_anode(self, painter: QPainter, mid_y: float) -> None:
        painter.setPen(Qt.NoPen)
        painter.setBrush(QColor("#4B5563"))
        painter.drawRoundedRect(QRectF(SCENE_WIDTH - 32, mid_y - 64, 16, 128), 4, 4)

    def _paint_voltmeter(self, painter: QPainter) -> None:
        rect = QRectF(16, SCENE_HEIGHT - 64, 140, 48)
        painter.setPen(Qt.NoPen)
        painter.setBrush(QColor("#1F2937"))
        painter.drawRoundedRect(rect, 4, 4)
        painter.setPen(QColor("white"))
        painter.setFont(QFont("Sans", 10))
        painter.drawText(QPointF(rect.left() + 10, rect.top() + 20), f"V = {self._physics.stopping_voltage:.3f} V")
        painter.drawText(QPointF(rect.left() + 10, rect.top() + 38), f"Ec = {self._physics.max_kinetic_energy:.3f} eV")

    def _paint_indicator(self, painter: QPainter) -> None:
        emitting = self._physics.emission_possible
        painter.setPen(Qt.NoPen)
        painter.setBrush(QColor("#22C55E") if emitting else QColor("#EF4444"))
        painter.drawEllipse(QRectF(SCENE_WIDTH - 90, 16, 16, 16))
        painter.setPen(QColor("white"))
        painter.setFont(QFont("Sans", 9))
        painter.drawText(QPointF(SCENE_WIDTH - 90, 48), "Emitiendo" if emitting else "Sin emisión")
