import pytest

from photoelectric.model.materials import UnknownMaterialError
from photoelectric.model.state import SimulationInput, SimulationState, clamp_frequency, clamp_intensity


@pytest.fixture
def emitting_state(fake_random):
    """Running, Cs at 10 x 10^14 Hz, spawning on every frame."""
    state = SimulationState(rng=fake_random(default_random=0.0))
    state.set_material("Cs")
    state.set_frequency(10.0)
    state.set_running(True)
    return state


def test_defaults():
    state = SimulationState()
    assert state.input == SimulationInput(frequency=6.0, intensity=50, material="Na", running=False)
    assert state.physics.emission_possible is False
    assert state.material.name == "Sodio"
    assert state.particles == ()
    assert state.measurements == ()


@pytest.mark.parametrize("value, expected", [(20.0, 12.0), (1.0, 3.0), (6.04, 6.0), (6.06, 6.1), (12.0, 12.0)])
def test_clamp_frequency(value, expected):
    assert clamp_frequency(value) == expected


@pytest.mark.parametrize("value, expected", [(0, 10), (47, 45), (48, 50), (150, 100), (55, 55)])
def test_clamp_intensity(value, expected):
    assert clamp_intensity(value) == expected


def test_physics_is_recomputed_on_input_change():
    state = SimulationState()
    before = state.physics
    assert state.physics is before  # cached, no recomputation on read

    state.set_material("Cs")
    state.set_frequency(10.0)
    assert state.physics is not before
    assert state.physics.max_kinetic_energy == pytest.approx(2.036)
    assert state.physics.emission_possible is True


def test_unknown_material_is_rejected():
    state = SimulationState()
    with pytest.raises(UnknownMaterialError):
        state.set_material("Xx")
    assert state.input.material == "Na"


def test_tick_spawns_only_when_animating(emitting_state):
    assert emitting_state.is_animating
    for _ in range(5):
        emitting_state.tick()
    assert len(emitting_state.particles) == 5


def test_stopping_clears_particles(emitting_state):
    for _ in range(5):
        emitting_state.tick()
    emitting_state.set_running(False)
    assert emitting_state.particles == ()
    assert emitting_state.tick() == ()


def test_losing_emission_clears_particles(emitting_state):
    for _ in range(5):
        emitting_state.tick()
    emitting_state.set_frequency(3.0)
    assert emitting_state.is_running
    assert not emitting_state.is_animating
    assert emitting_state.particles == ()
    for _ in range(10):
        assert emitting_state.tick() == ()


def test_intensity_change_keeps_particles(emitting_state):
    for _ in range(3):
        emitting_state.tick()
    emitting_state.set_intensity(80)
    assert len(emitting_state.particles) == 3


def test_toggle_running(emitting_state):
    assert emitting_state.toggle_running() is False
    assert emitting_state.toggle_running() is True


def test_reset_stops_and_keeps_measurements(emitting_state):
    emitting_state.record_measurement()
    emitting_state.tick()
    emitting_state.reset()
    assert emitting_state.is_running is False
    assert emitting_state.particles == ()
    assert len(emitting_state.measurements) == 1


def test_record_clear_export(rng):
    state = SimulationState(rng=rng)
    state.set_material("Cs")
    state.set_frequency(10.0)
    first = state.record_measurement()
    second = state.record_measurement()

    assert state.measurements == (first, second)
    for m in (first, second):
        assert m.frequency == 10.0
        assert m.material == "Cs"
        assert abs(m.kinetic_energy - 2.036) <= 0.02 * 2.036 + 5e-4

    assert len(state.export_measurements().splitlines()) == 3
    state.clear_measurements()
    assert state.measurements == ()
    assert len(state.export_measurements().splitlines()) == 1
