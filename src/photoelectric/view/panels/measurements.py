"""
Measurements Panel
"""
from __future__ import annotations

import logging
from typing import Sequence, TYPE_CHECKING

from PySide6.QtCore import Signal
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QGroupBox, QPushButton, QStackedWidget, QStyle
)

from photoelectric.view.widgets.kinetic_plot import KineticEnergyPlot
from photoelectric.view.widgets.measurement_table import MeasurementTable

if TYPE_CHECKING:
    from photoelectric.model.measurements import Measurement

logger = logging.getLogger(__name__)


class MeasurementsPanel(QWidget):
    clear_requested = Signal()
    export_requested = Signal()

    def __init__(self) -> None:
        super().__init__()
        self._showing_graph = False
        self._entries: Sequence[Measurement] = ()
        self._work_function: float = 0.0

        layout = QVBoxLayout(self)
        group = QGroupBox("Mediciones")
        l_group = QVBoxLayout(group)

        hbox = QHBoxLayout()
        hbox.addStretch()

        self.btn_view = QPushButton("Gráfica")
        self.btn_view.clicked.connect(self.toggle_view)
        hbox.addWidget(self.btn_view)

        self.btn_export = QPushButton()
        self.btn_export.setIcon(self.style().standardIcon(QStyle.SP_DialogSaveButton))
        self.btn_export.setToolTip("Exportar datos (CSV)")
        self.btn_export.setEnabled(False)  # Disabled until a measurement exists
        self.btn_export.clicked.connect(self.export_requested.emit)
        hbox.addWidget(self.btn_export)

        self.btn_image = QPushButton("Imagen...")
        self.btn_image.setToolTip("Exportar gráfica como imagen")
        self.btn_image.setVisible(False)
        hbox.addWidget(self.btn_image)

        self.btn_clear = QPushButton("Limpiar")
        self.btn_clear.clicked.connect(self.clear_requested.emit)
        hbox.addWidget(self.btn_clear)

        l_group.addLayout(hbox)

        self.stack = QStackedWidget()
        self.table = MeasurementTable()
        self.plot = KineticEnergyPlot()
        self.btn_image.clicked.connect(self.plot.export_image)
        self.stack.addWidget(self.table)  # Index 0
        self.stack.addWidget(self.plot)  # Index 1
        l_group.addWidget(self.stack)

        layout.addWidget(group)

    def toggle_view(self) -> None:
        self._showing_graph = not self._showing_graph
        self.stack.setCurrentIndex(1 if self._showing_graph else 0)
        self.btn_view.setText("Tabla" if self._showing_graph else "Gráfica")
        self.btn_image.setVisible(self._showing_graph)
        if self._showing_graph:
            self.plot.update_plot(self._entries, self._work_function)

    def set_measurements(self, entries: Sequence[Measurement]) -> None:
        self._entries = entries
        self.btn_export.setEnabled(len(entries) > 0)
        self.table.set_measurements(entries)
        if self._showing_graph:
            self.plot.update_plot(entries, self._work_function)

    def set_work_function(self, work_function: float) -> None:
        if work_function == self._work_function:
            return
        self._work_function = work_function
        if self._showing_graph:
            self.plot.update_plot(self._entries, work_function)
