"""
Measurement Log
===============
Append-only record of the measurements taken by the user.

Each measurement is a noisy snapshot of the current PhysicsResult: photon and
kinetic energy are perturbed independently by up to ±2 % to mimic a real
instrument. Entries are never modified once appended.
"""
from __future__ import annotations

import csv
import io
import logging
import os
from dataclasses import dataclass
from typing import Iterator, List, Tuple, Union

from photoelectric.config import NOISE_AMPLITUDE
from photoelectric.model.particles import RandomSource
from photoelectric.model.physics import PhysicsResult

logger = logging.getLogger(__name__)

CSV_HEADER: Tuple[str, ...] = (
    "Frecuencia(Hz)",
    "Longitud(nm)",
    "Energía Fotón(eV)",
    "Energía Cinética(eV)",
    "Voltaje Frenado(V)",
    "Metal",
    "Emite Electrones",
)


@dataclass(frozen=True)
class Measurement:
    frequency: float  # 10^14 Hz
    wavelength: float  # nm, 1 dp
    photon_energy: float  # eV, 3 dp
    kinetic_energy: float  # eV, 3 dp
    stopping_voltage: float  # V, equal to kinetic_energy
    material: str
    emits_electrons: bool

    def to_row(self) -> List[str]:
        return [
            f"{self.frequency:g}e14",
            f"{self.wavelength:.1f}",
            f"{self.photon_energy:.3f}",
            f"{self.kinetic_energy:.3f}",
            f"{self.stopping_voltage:.3f}",
            self.material,
            "true" if self.emits_electrons else "false",
        ]


def add_noise(value: float, rng: RandomSource, amplitude: float = NOISE_AMPLITUDE) -> float:
    """Multiply by 1 + U(-amplitude, amplitude) and floor at zero."""
    noisy = value * (1.0 + float(rng.uniform(-amplitude, amplitude)))
    return max(0.0, noisy)


class MeasurementLog:
    def __init__(self) -> None:
        self._entries: List[Measurement] = []

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Measurement]:
        return iter(tuple(self._entries))

    @property
    def entries(self) -> Tuple[Measurement, ...]:
        return tuple(self._entries)

    def record(self, result: PhysicsResult, rng: RandomSource) -> Measurement:
        """Append a noisy snapshot of `result` and return it."""
        kinetic = round(add_noise(result.max_kinetic_energy, rng), 3)
        photon = round(add_noise(result.photon_energy, rng), 3)

        measurement = Measurement(
            frequency=result.frequency,
            wavelength=round(result.wavelength, 1),
            photon_energy=photon,
            kinetic_energy=kinetic,
            stopping_voltage=kinetic,
            material=result.material,
            emits_electrons=result.emission_possible,
        )
        self._entries.append(measurement)
        logger.info(
            f"Recorded measurement #{len(self._entries)}: f={measurement.frequency:g}e14 Hz, "
            f"Ec={measurement.kinetic_energy:.3f} eV ({measurement.material})"
        )
        return measurement

    def clear(self) -> None:
        logger.info(f"Clearing {len(self._entries)} measurements.")
        self._entries.clear()

    def export(self) -> str:
        """Serialize all entries as CSV text (header row + one line per entry)."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        for m in self._entries:
            writer.writerow(m.to_row())
        return buffer.getvalue()

    def save_csv(self, filepath: Union[str, os.PathLike]) -> None:
        logger.info(f"Exporting {len(self._entries)} measurements to: {filepath}")
        with open(filepath, "w", encoding="utf-8", newline="") as f:
            f.write(self.export())
