"""
Physics Evaluator
=================
Einstein's photoelectric equation and the light properties derived from the
selected frequency.

Ec,max = h·f - φ

The evaluator is a pure function: it keeps no memory of prior calls and is
recomputed whenever the frequency or the material changes.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Tuple, Union

from photoelectric.config import PLANCK_EV, SPEED_OF_LIGHT, FREQUENCY_SCALE, NANOMETER_SCALE
from photoelectric.model.materials import Material, get_material


class SpectralBand(StrEnum):
    ULTRAVIOLET = "UV"
    VIOLET = "Violeta"
    BLUE = "Azul"
    GREEN = "Verde"
    YELLOW = "Amarillo"
    ORANGE = "Naranja"
    RED = "Rojo"
    INFRARED = "IR"


# Upper wavelength limit (nm, exclusive) and display colour of each band,
# in ascending wavelength order. Anything beyond the last limit is infrared.
SPECTRAL_BANDS: Tuple[Tuple[float, SpectralBand, str], ...] = (
    (380.0, SpectralBand.ULTRAVIOLET, "#8B00FF"),
    (450.0, SpectralBand.VIOLET, "#4B0082"),
    (495.0, SpectralBand.BLUE, "#0000FF"),
    (570.0, SpectralBand.GREEN, "#00FF00"),
    (590.0, SpectralBand.YELLOW, "#FFFF00"),
    (620.0, SpectralBand.ORANGE, "#FF7F00"),
    (750.0, SpectralBand.RED, "#FF0000"),
)
INFRARED_COLOR = "#FF4500"


@dataclass(frozen=True)
class PhysicsResult:
    frequency: float  # 10^14 Hz
    material: str
    photon_energy: float  # eV
    work_function: float  # eV
    max_kinetic_energy: float  # eV
    stopping_voltage: float  # V
    wavelength: float  # nm
    emission_possible: bool
    color: str


def photon_energy(frequency: float) -> float:
    """Photon energy in eV for a frequency given in 10^14 Hz."""
    return PLANCK_EV * frequency * FREQUENCY_SCALE


def wavelength(frequency: float) -> float:
    """Wavelength in nm for a frequency given in 10^14 Hz."""
    return SPEED_OF_LIGHT / (frequency * FREQUENCY_SCALE) * NANOMETER_SCALE


def spectral_band(wavelength_nm: float) -> SpectralBand:
    for limit, band, _ in SPECTRAL_BANDS:
        if wavelength_nm < limit:
            return band
    return SpectralBand.INFRARED


def wavelength_to_color(wavelength_nm: float) -> str:
    """Map a wavelength (nm) to the colour used for the light beam."""
    for limit, _, color in SPECTRAL_BANDS:
        if wavelength_nm < limit:
            return color
    return INFRARED_COLOR


def threshold_frequency(material: Union[Material, str]) -> float:
    """Minimum frequency (10^14 Hz) at which the photon energy equals φ."""
    if isinstance(material, str):
        material = get_material(material)
    return material.work_function / (PLANCK_EV * FREQUENCY_SCALE)


def evaluate(frequency: float, material: Union[Material, str]) -> PhysicsResult:
    """
    Evaluate the photoelectric equation for the given light and cathode.

    Args:
        frequency: Light frequency in 10^14 Hz (already clamped by the caller).
        material: Cathode material or its chemical symbol.

    Returns:
        The derived PhysicsResult.
    """
    if isinstance(material, str):
        material = get_material(material)

    e_photon = photon_energy(frequency)
    phi = material.work_function
    e_kin = max(0.0, e_photon - phi)
    wl = wavelength(frequency)

    return PhysicsResult(
        frequency=frequency,
        material=material.symbol,
        photon_energy=e_photon,
        work_function=phi,
        max_kinetic_energy=e_kin,
        stopping_voltage=e_kin,
        wavelength=wl,
        emission_possible=e_photon > phi,
        color=wavelength_to_color(wl),
    )
