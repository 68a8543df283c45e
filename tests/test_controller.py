import pytest

pytest.importorskip("PySide6")

from photoelectric.controller.animation import AnimationController
from photoelectric.model.state import SimulationState


@pytest.fixture
def controller(qapp, fake_random):
    ctrl = AnimationController(SimulationState(rng=fake_random(default_random=0.0)))
    ctrl.set_material("Cs")
    ctrl.set_frequency(10.0)
    yield ctrl
    ctrl.timer.stop()


def test_starting_schedules_the_tick(controller):
    assert not controller.is_active
    controller.toggle_running()
    assert controller.is_active


def test_pausing_cancels_the_tick(controller):
    controller.toggle_running()
    controller.toggle_running()
    assert not controller.is_active


def test_losing_emission_cancels_the_tick(controller):
    controller.toggle_running()
    controller.set_frequency(3.0)
    assert not controller.is_active
    assert controller.state.particles == ()

    # Emission restored while still running: ticking resumes
    controller.set_frequency(10.0)
    assert controller.is_active


def test_reset_cancels_the_tick(controller):
    running = []
    controller.running_changed.connect(running.append)
    controller.toggle_running()
    controller.reset()
    assert not controller.is_active
    assert running == [True, False]


def test_frame_emits_particle_snapshot(controller):
    frames = []
    controller.particles_changed.connect(frames.append)
    controller.toggle_running()
    controller.advance_frame()
    controller.advance_frame()
    assert [len(f) for f in frames] == [1, 2]


def test_input_changes_emit_physics(controller):
    results = []
    controller.physics_changed.connect(results.append)
    controller.set_material("Na")
    assert results[-1].material == "Na"
    assert results[-1].emission_possible is True


def test_measurement_signals(controller, tmp_path):
    logs = []
    controller.measurements_changed.connect(logs.append)
    controller.record_measurement()
    controller.clear_measurements()
    assert [len(entries) for entries in logs] == [1, 0]

    path = tmp_path / "datos.csv"
    controller.export_measurements(path)
    assert path.read_text(encoding="utf-8").count("\n") == 1
