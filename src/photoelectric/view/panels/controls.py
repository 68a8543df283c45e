"""
Control Panel
"""
from __future__ import annotations

from PySide6.QtCore import Qt, Signal
from PySide6.QtGui import QColor
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QFormLayout, QLabel, QSlider, QComboBox,
    QPushButton, QStyle, QFrame
)

from photoelectric.config import (
    FREQUENCY_MIN, FREQUENCY_MAX, FREQUENCY_STEP, INTENSITY_MIN, INTENSITY_MAX, INTENSITY_STEP
)
from photoelectric.model.materials import MATERIALS
from photoelectric.model.physics import PhysicsResult
from photoelectric.model.state import SimulationInput

# Frequency slider works in tenths of 10^14 Hz
FREQUENCY_TICKS = round(1 / FREQUENCY_STEP)


class ControlPanel(QWidget):
    frequency_changed = Signal(float)
    intensity_changed = Signal(int)
    material_changed = Signal(str)
    toggle_requested = Signal()
    reset_requested = Signal()

    def __init__(self, initial: SimulationInput) -> None:
        super().__init__()
        layout = QVBoxLayout(self)

        # --- Light & cathode ---
        grp_inputs = QGroupBox("Panel de Control")
        form = QFormLayout(grp_inputs)

        self.lbl_frequency = QLabel()
        self.slider_frequency = QSlider(Qt.Horizontal)
        self.slider_frequency.setRange(round(FREQUENCY_MIN * FREQUENCY_TICKS), round(FREQUENCY_MAX * FREQUENCY_TICKS))
        self.slider_frequency.setValue(round(initial.frequency * FREQUENCY_TICKS))
        self.slider_frequency.valueChanged.connect(self._on_frequency_slider)
        form.addRow(self.lbl_frequency)
        form.addRow(self.slider_frequency)

        hbox_range = QHBoxLayout()
        for text in ("IR", "Visible", "UV"):
            lbl = QLabel(text)
            lbl.setStyleSheet("QLabel { color: gray; font-size: 10px; }")
            hbox_range.addWidget(lbl)
            if text != "UV":
                hbox_range.addStretch()
        form.addRow(hbox_range)

        self.lbl_intensity = QLabel()
        self.slider_intensity = QSlider(Qt.Horizontal)
        self.slider_intensity.setRange(INTENSITY_MIN // INTENSITY_STEP, INTENSITY_MAX // INTENSITY_STEP)
        self.slider_intensity.setValue(initial.intensity // INTENSITY_STEP)
        self.slider_intensity.valueChanged.connect(self._on_intensity_slider)
        form.addRow(self.lbl_intensity)
        form.addRow(self.slider_intensity)

        self.combo_material = QComboBox()
        for symbol, material in MATERIALS.items():
            self.combo_material.addItem(material.label, symbol)
        self.combo_material.setCurrentIndex(self.combo_material.findData(initial.material))
        self.combo_material.currentIndexChanged.connect(self._on_material_selected)
        form.addRow("Material del Cátodo:", self.combo_material)

        layout.addWidget(grp_inputs)

        # --- Run controls ---
        hbox_run = QHBoxLayout()
        self.btn_toggle = QPushButton()
        self.btn_toggle.setMinimumHeight(36)
        self.btn_toggle.clicked.connect(self.toggle_requested.emit)
        hbox_run.addWidget(self.btn_toggle)

        self.btn_reset = QPushButton("Reset")
        self.btn_reset.setIcon(self.style().standardIcon(QStyle.SP_BrowserReload))
        self.btn_reset.setMinimumHeight(36)
        self.btn_reset.clicked.connect(self.reset_requested.emit)
        hbox_run.addWidget(self.btn_reset)
        layout.addLayout(hbox_run)

        # --- Light properties ---
        grp_light = QGroupBox("Propiedades de la Luz")
        form_light = QFormLayout(grp_light)
        self.lbl_wavelength = QLabel()
        self.lbl_photon = QLabel()
        self.swatch = QFrame()
        self.swatch.setFixedSize(24, 16)
        form_light.addRow("Longitud de onda:", self.lbl_wavelength)
        form_light.addRow("Energía del fotón:", self.lbl_photon)
        form_light.addRow("Color:", self.swatch)
        layout.addWidget(grp_light)

        layout.addStretch()

        self._update_labels()
        self.set_running(initial.running)

    # --- Sync from model ---
    def set_running(self, running: bool) -> None:
        if running:
            self.btn_toggle.setText("Pausar")
            self.btn_toggle.setIcon(self.style().standardIcon(QStyle.SP_MediaPause))
            self.btn_toggle.setStyleSheet("QPushButton { background-color: #EF4444; color: white; }")
        else:
            self.btn_toggle.setText("Iniciar")
            self.btn_toggle.setIcon(self.style().standardIcon(QStyle.SP_MediaPlay))
            self.btn_toggle.setStyleSheet("QPushButton { background-color: #22C55E; color: white; }")

    def set_physics(self, physics: PhysicsResult) -> None:
        self.lbl_wavelength.setText(f"{physics.wavelength:.1f} nm")
        self.lbl_photon.setText(f"{physics.photon_energy:.3f} eV")
        self.swatch.setStyleSheet(
            f"QFrame {{ background-color: {QColor(physics.color).name()}; border: 1px solid gray; border-radius: 2px; }}"
        )

    # --- Slots ---
    def _on_frequency_slider(self, value: int) -> None:
        self._update_labels()
        self.frequency_changed.emit(value / FREQUENCY_TICKS)

    def _on_intensity_slider(self, value: int) -> None:
        self._update_labels()
        self.intensity_changed.emit(value * INTENSITY_STEP)

    def _on_material_selected(self, index: int) -> None:
        self.material_changed.emit(self.combo_material.itemData(index))

    def _update_labels(self) -> None:
        frequency = self.slider_frequency.value() / FREQUENCY_TICKS
        intensity = self.slider_intensity.value() * INTENSITY_STEP
        self.lbl_frequency.setText(f"Frecuencia: {frequency:.1f} × 10¹⁴ Hz")
        self.lbl_intensity.setText(f"Intensidad: {intensity}%")
