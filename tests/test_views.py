import pytest

pytest.importorskip("PySide6.QtWidgets")
pytest.importorskip("pyqtgraph")

from photoelectric.model.state import SimulationState
from photoelectric.view.main_window import MainWindow


@pytest.fixture
def window(qapp, fake_random):
    win = MainWindow(SimulationState(rng=fake_random(default_random=0.0)))
    yield win
    win.close()


def test_controls_drive_the_state(window):
    panel = window.control_panel
    panel.slider_frequency.setValue(100)  # 10.0 x 10^14 Hz
    panel.combo_material.setCurrentIndex(panel.combo_material.findData("Cs"))
    panel.slider_intensity.setValue(16)  # 80 %

    assert window.state.input.frequency == 10.0
    assert window.state.input.material == "Cs"
    assert window.state.input.intensity == 80
    assert panel.lbl_photon.text() == "4.136 eV"


def test_toggle_and_reset_buttons(window):
    window.control_panel.slider_frequency.setValue(100)
    window.control_panel.btn_toggle.click()
    assert window.controller.is_active
    assert window.control_panel.btn_toggle.text() == "Pausar"

    window.control_panel.btn_reset.click()
    assert not window.controller.is_active
    assert window.control_panel.btn_toggle.text() == "Iniciar"


def test_record_fills_table_and_graph(window):
    panel = window.measurements_panel
    assert not panel.btn_export.isEnabled()

    window.btn_record.click()
    window.btn_record.click()
    assert panel.table.rowCount() == 2
    assert panel.table.item(0, 0).text() == "6"
    assert panel.btn_export.isEnabled()

    panel.toggle_view()
    assert panel.stack.currentIndex() == 1
    assert panel.plot.lbl_equation.text() == "Ec = h·f - φ = 4.136e-15·f - 2.75 eV"

    panel.btn_clear.click()
    assert panel.table.rowCount() == 0
    assert not panel.btn_export.isEnabled()
