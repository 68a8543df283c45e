"""
Main Application Window
=======================
The primary GUI container that holds the menu bar, the control panel, the
animated scene and the measurement panels.

Why is this file needed?
------------------------
1. Layout: It organizes the high-level visual structure of the application.
2. Routing: It connects the panels' signals to the AnimationController and
   the controller's signals back to the views.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import Qt
from PySide6.QtGui import QAction
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QSplitter, QPushButton, QFileDialog, QMessageBox,
    QGroupBox, QScrollArea
)

from photoelectric.config import EXPORT_FILENAME, EXPORT_MIME_TYPE
from photoelectric.controller.animation import AnimationController
from photoelectric.model.physics import PhysicsResult
from photoelectric.model.state import SimulationState
from photoelectric.view.panels.controls import ControlPanel
from photoelectric.view.panels.measurements import MeasurementsPanel
from photoelectric.view.panels.theory import TheoryPanel
from photoelectric.view.widgets.scene import SceneWidget

logger = logging.getLogger(__name__)

VISIBLE_APP_NAME = "Simulador del Efecto Fotoeléctrico"


class MainWindow(QMainWindow):
    def __init__(self, state: SimulationState) -> None:
        super().__init__()
        self.state = state
        self.controller = AnimationController(state, parent=self)

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(1400, 950)

        # --- MAIN CONTAINER ---
        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        self.setCentralWidget(scroll)

        main_widget = QWidget()
        scroll.setWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)

        # --- 1. TOP ROW: Controls | Simulation ---
        splitter = QSplitter(Qt.Horizontal)

        self.control_panel = ControlPanel(state.input)
        splitter.addWidget(self.control_panel)

        grp_sim = QGroupBox("Simulación")
        l_sim = QVBoxLayout(grp_sim)
        self.scene = SceneWidget()
        self.scene.setMinimumHeight(400)
        l_sim.addWidget(self.scene)

        self.btn_record = QPushButton("Registrar Medición")
        self.btn_record.setMinimumHeight(36)
        self.btn_record.setStyleSheet("QPushButton { background-color: #3B82F6; color: white; }")
        l_sim.addWidget(self.btn_record)
        splitter.addWidget(grp_sim)

        splitter.setSizes([450, 950])
        main_layout.addWidget(splitter)

        # --- 2. MEASUREMENTS (full width) ---
        self.measurements_panel = MeasurementsPanel()
        self.measurements_panel.setMinimumHeight(420)
        main_layout.addWidget(self.measurements_panel)

        # --- 3. THEORY ---
        main_layout.addWidget(TheoryPanel())

        # --- SIGNAL CONNECTIONS ---
        # Controls -> Controller
        self.control_panel.frequency_changed.connect(self.controller.set_frequency)
        self.control_panel.intensity_changed.connect(self.controller.set_intensity)
        self.control_panel.material_changed.connect(self.controller.set_material)
        self.control_panel.toggle_requested.connect(self.controller.toggle_running)
        self.control_panel.reset_requested.connect(self.controller.reset)
        self.btn_record.clicked.connect(self.controller.record_measurement)
        self.measurements_panel.clear_requested.connect(self.controller.clear_measurements)
        self.measurements_panel.export_requested.connect(self.on_export)

        # Controller -> Views
        self.controller.physics_changed.connect(self.on_physics_changed)
        self.controller.particles_changed.connect(self.scene.set_particles)
        self.controller.measurements_changed.connect(self.measurements_panel.set_measurements)
        self.controller.running_changed.connect(self.on_running_changed)

        # --- ACTIONS & MENUS ---
        self._create_actions()
        self._create_menus()

        # Initial Render
        self.on_physics_changed(state.physics)
        self.measurements_panel.set_measurements(state.measurements)

    def _create_actions(self) -> None:
        self.act_export = QAction("Exportar mediciones...", self)
        self.act_export.setShortcut("Ctrl+E")
        self.act_export.triggered.connect(self.on_export)

        self.act_exit = QAction("Salir", self)
        self.act_exit.triggered.connect(self.close)

        self.act_toggle = QAction("Iniciar / Pausar", self)
        self.act_toggle.setShortcut("Space")
        self.act_toggle.triggered.connect(self.controller.toggle_running)

        self.act_reset = QAction("Reset", self)
        self.act_reset.setShortcut("Ctrl+R")
        self.act_reset.triggered.connect(self.controller.reset)

        self.act_record = QAction("Registrar medición", self)
        self.act_record.setShortcut("Ctrl+M")
        self.act_record.triggered.connect(self.controller.record_measurement)

    def _create_menus(self) -> None:
        menu_bar = self.menuBar()

        file_menu = menu_bar.addMenu("&Archivo")
        file_menu.addAction(self.act_export)
        file_menu.addSeparator()
        file_menu.addAction(self.act_exit)

        sim_menu = menu_bar.addMenu("&Simulación")
        sim_menu.addAction(self.act_toggle)
        sim_menu.addAction(self.act_reset)
        sim_menu.addSeparator()
        sim_menu.addAction(self.act_record)

    # --- SLOTS ---
    def on_physics_changed(self, physics: PhysicsResult) -> None:
        self.control_panel.set_physics(physics)
        self.scene.set_physics(physics, self.state.material)
        self.measurements_panel.set_work_function(physics.work_function)

    def on_running_changed(self, running: bool) -> None:
        self.control_panel.set_running(running)
        self.scene.set_running(running)

    def on_export(self) -> None:
        dialog = QFileDialog(self, "Exportar mediciones")
        dialog.setAcceptMode(QFileDialog.AcceptSave)
        dialog.setMimeTypeFilters([EXPORT_MIME_TYPE])
        dialog.setDefaultSuffix("csv")
        dialog.selectFile(EXPORT_FILENAME)
        if not dialog.exec():
            return
        file_path = dialog.selectedFiles()[0]

        try:
            self.controller.export_measurements(file_path)
            self.statusBar().showMessage(f"Datos exportados: {file_path}", 5000)
        except OSError as e:
            logger.exception("Failed to export measurements")
            QMessageBox.critical(self, "Error de exportación", f"No se pudieron exportar los datos:\n{str(e)}")

    def closeEvent(self, event) -> None:
        self.controller.timer.stop()
        super().closeEvent(event)
