"""
Theoretical Information Panel
"""
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QGroupBox, QLabel

KEY_OBSERVATIONS = [
    "La emisión depende de la frecuencia, no de la intensidad",
    "Existe una frecuencia umbral mínima para cada metal",
    "La intensidad afecta el número de electrones emitidos",
    "La energía cinética máxima es independiente de la intensidad",
]


class TheoryPanel(QWidget):
    def __init__(self) -> None:
        super().__init__()
        layout = QVBoxLayout(self)
        group = QGroupBox("Información Teórica")
        hbox = QHBoxLayout(group)

        lbl_equation = QLabel(
            "<h4>Ecuación de Einstein</h4>"
            "<p style='font-family: monospace;'>E<sub>cinética</sub> = hf - φ</p>"
            "<p>Donde h es la constante de Planck, f la frecuencia de la luz, "
            "y φ la función trabajo del metal.</p>"
        )
        lbl_equation.setTextFormat(Qt.RichText)
        lbl_equation.setWordWrap(True)
        hbox.addWidget(lbl_equation)

        items = "".join(f"<li>{text}</li>" for text in KEY_OBSERVATIONS)
        lbl_notes = QLabel(f"<h4>Observaciones Clave</h4><ul>{items}</ul>")
        lbl_notes.setTextFormat(Qt.RichText)
        lbl_notes.setWordWrap(True)
        hbox.addWidget(lbl_notes)

        layout.addWidget(group)
