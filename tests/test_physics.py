import numpy as np
import pytest

from photoelectric.config import PLANCK_EV
from photoelectric.model.materials import MATERIALS, Material, UnknownMaterialError, get_material
from photoelectric.model.physics import (
    SpectralBand, evaluate, photon_energy, spectral_band, threshold_frequency, wavelength, wavelength_to_color
)

FREQUENCIES = np.round(np.arange(3.0, 12.0 + 1e-9, 0.1), 1)


def test_catalog_has_seven_materials_in_selector_order():
    assert list(MATERIALS) == ["Cs", "K", "Na", "Ca", "Zn", "Cu", "Al"]
    assert get_material("Na").work_function == 2.75
    assert get_material("Cs").label == "Cesio (Cs) - 2.1 eV"


def test_unknown_material_raises():
    with pytest.raises(UnknownMaterialError):
        get_material("Xx")
    with pytest.raises(KeyError):
        evaluate(6.0, "Xx")


def test_sodium_below_threshold_does_not_emit(sodium_green):
    assert sodium_green.photon_energy == pytest.approx(2.4816)
    assert sodium_green.emission_possible is False
    assert sodium_green.max_kinetic_energy == 0.0
    assert sodium_green.stopping_voltage == 0.0


def test_cesium_in_ultraviolet_emits(cesium_uv):
    assert cesium_uv.photon_energy == pytest.approx(4.136)
    assert cesium_uv.work_function == 2.1
    assert cesium_uv.max_kinetic_energy == pytest.approx(2.036)
    assert cesium_uv.stopping_voltage == cesium_uv.max_kinetic_energy
    assert cesium_uv.emission_possible is True


@pytest.mark.parametrize("symbol", list(MATERIALS))
def test_kinetic_energy_formula_and_threshold(symbol):
    phi = MATERIALS[symbol].work_function
    for f in FREQUENCIES:
        result = evaluate(float(f), symbol)
        expected = PLANCK_EV * f * 1e14 - phi
        assert result.max_kinetic_energy == pytest.approx(max(0.0, expected))
        assert result.max_kinetic_energy >= 0.0
        assert result.emission_possible == (PLANCK_EV * f * 1e14 > phi)


@pytest.mark.parametrize("symbol", list(MATERIALS))
def test_energies_are_monotonic_in_frequency(symbol):
    results = [evaluate(float(f), symbol) for f in FREQUENCIES]
    photon = [r.photon_energy for r in results]
    kinetic = [r.max_kinetic_energy for r in results]
    assert photon == sorted(photon)
    assert kinetic == sorted(kinetic)


def test_equal_energies_do_not_emit():
    phi = photon_energy(8.0)
    result = evaluate(8.0, Material(symbol="Xx", name="Test", work_function=phi, color="#000000"))
    assert result.emission_possible is False
    assert result.max_kinetic_energy == 0.0


def test_wavelength_is_inverse_of_frequency():
    assert wavelength(6.0) == pytest.approx(500.0)
    assert wavelength(10.0) == pytest.approx(300.0)
    for f in (3.0, 4.5, 6.0):
        assert wavelength(2 * f) == pytest.approx(wavelength(f) / 2)


@pytest.mark.parametrize("wl, band, color", [
    (300.0, SpectralBand.ULTRAVIOLET, "#8B00FF"),
    (379.9, SpectralBand.ULTRAVIOLET, "#8B00FF"),
    (380.0, SpectralBand.VIOLET, "#4B0082"),
    (470.0, SpectralBand.BLUE, "#0000FF"),
    (500.0, SpectralBand.GREEN, "#00FF00"),
    (580.0, SpectralBand.YELLOW, "#FFFF00"),
    (600.0, SpectralBand.ORANGE, "#FF7F00"),
    (749.9, SpectralBand.RED, "#FF0000"),
    (750.0, SpectralBand.INFRARED, "#FF4500"),
    (1000.0, SpectralBand.INFRARED, "#FF4500"),
])
def test_wavelength_colour_bands(wl, band, color):
    assert spectral_band(wl) == band
    assert wavelength_to_color(wl) == color


def test_result_colour_follows_wavelength(sodium_green, cesium_uv):
    assert sodium_green.color == "#00FF00"
    assert cesium_uv.color == "#8B00FF"


def test_threshold_frequency():
    f0 = threshold_frequency("Na")
    assert f0 == pytest.approx(2.75 / 0.4136)
    assert evaluate(round(f0 - 0.1, 1), "Na").emission_possible is False
    assert evaluate(round(f0 + 0.1, 1), "Na").emission_possible is True
