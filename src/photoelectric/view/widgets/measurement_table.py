"""Table view of the recorded measurements."""
from __future__ import annotations

from typing import Sequence, TYPE_CHECKING

from PySide6.QtWidgets import QTableWidget, QTableWidgetItem, QHeaderView, QAbstractItemView, QWidget

if TYPE_CHECKING:
    from photoelectric.model.measurements import Measurement


COLUMNS = ["f (×10¹⁴Hz)", "λ (nm)", "Ef (eV)", "Ec (eV)", "V (V)"]


class MeasurementTable(QTableWidget):
    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(0, len(COLUMNS), parent)
        self.setHorizontalHeaderLabels(COLUMNS)
        self.horizontalHeader().setSectionResizeMode(QHeaderView.Stretch)
        self.setEditTriggers(QAbstractItemView.NoEditTriggers)
        self.setAlternatingRowColors(True)

    def set_measurements(self, entries: Sequence[Measurement]) -> None:
        self.setRowCount(len(entries))
        for row, m in enumerate(entries):
            values = [
                f"{m.frequency:g}",
                f"{m.wavelength:.1f}",
                f"{m.photon_energy:.3f}",
                f"{m.kinetic_energy:.3f}",
                f"{m.stopping_voltage:.3f}",
            ]
            for col, text in enumerate(values):
                self.setItem(row, col, QTableWidgetItem(text))
        if entries:
            self.scrollToBottom()
