"""Plot of the recorded kinetic energies against frequency."""
from __future__ import annotations

import logging
from typing import Sequence, TYPE_CHECKING

import pyqtgraph as pg
from pyqtgraph.exporters import ImageExporter
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel, QFileDialog, QMessageBox

from photoelectric.config import FREQUENCY_MIN, FREQUENCY_MAX
from photoelectric.model.chart import PlotFrame, scatter_points, trend_points, equation_text

if TYPE_CHECKING:
    from photoelectric.model.measurements import Measurement

logger = logging.getLogger(__name__)


class KineticEnergyPlot(QWidget):
    """Scatter of Ec vs. f with the trend line and the work-function level."""

    def __init__(self, frame: PlotFrame = PlotFrame(), parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.frame = frame
        self._work_function: float = 0.0

        layout = QVBoxLayout(self)

        self.plot_widget = pg.PlotWidget()
        self.plot_widget.setBackground('w')
        self.plot_widget.showGrid(x=True, y=True, alpha=0.3)
        self.plot_widget.setLabel('bottom', 'Frecuencia [×10¹⁴ Hz]', color='black')
        self.plot_widget.setLabel('left', 'Ec [eV]', color='black')
        self.plot_widget.getAxis('bottom').setPen('k')
        self.plot_widget.getAxis('left').setPen('k')
        self.plot_widget.getAxis('bottom').setTextPen('k')
        self.plot_widget.getAxis('left').setTextPen('k')
        self.plot_widget.setXRange(FREQUENCY_MIN, FREQUENCY_MAX, padding=0)
        self.plot_widget.setYRange(*frame.energy_range, padding=0)
        layout.addWidget(self.plot_widget)

        self.lbl_equation = QLabel()
        self.lbl_equation.setAlignment(Qt.AlignCenter)
        self.lbl_equation.setStyleSheet("QLabel { font-family: monospace; padding: 4px; background-color: rgba(0,0,0,10); }")
        layout.addWidget(self.lbl_equation)

    def update_plot(self, entries: Sequence[Measurement], work_function: float) -> None:
        self._work_function = work_function
        self.plot_widget.clear()

        # Work function reference
        phi_line = pg.InfiniteLine(
            pos=work_function,
            angle=0,
            pen=pg.mkPen(color='#EF4444', width=2, style=Qt.DashLine),
            label=f'φ = {work_function:.2f} eV',
            labelOpts={'position': 0.95, 'color': '#EF4444', 'fill': (255, 255, 255, 150)}
        )
        self.plot_widget.addItem(phi_line)

        f_trend, ec_trend = trend_points(entries)
        if len(f_trend) > 0:
            self.plot_widget.plot(f_trend, ec_trend, pen=pg.mkPen(color='#8B5CF6', width=2))

        f, ec = scatter_points(entries)
        if len(f) > 0:
            self.plot_widget.plot(
                f, ec,
                pen=None,
                symbol='o',
                symbolSize=8,
                symbolBrush='#06B6D4',
                symbolPen=pg.mkPen('#8B5CF6'),
            )

        self.lbl_equation.setText(equation_text(work_function))

    def export_image(self) -> None:
        """Export the current plot as an image file."""
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            "Guardar gráfica como imagen",
            "efecto_fotoelectrico_grafica.png",
            "Imagen PNG (*.png);;Imagen JPEG (*.jpg)"
        )
        if not file_path:
            return

        try:
            exporter = ImageExporter(self.plot_widget.plotItem)
            exporter.parameters()['width'] = 1200
            exporter.export(file_path)
            logger.info(f"Plot exported to {file_path}")
        except Exception as e:
            logger.exception("Failed to export plot")
            QMessageBox.critical(self, "Error de exportación", f"No se pudo exportar la gráfica:\n{str(e)}")
