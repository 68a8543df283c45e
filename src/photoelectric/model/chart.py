"""
Kinetic Energy Chart Projection
===============================
Projects the measurement log into the Ec vs. f graph: scatter points,
trend line, work-function reference line and the linearised equation.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple, TYPE_CHECKING

import numpy as np

from photoelectric.config import (
    PLANCK_EV, FREQUENCY_MIN, FREQUENCY_MAX, PLOT_X_ORIGIN, PLOT_X_SPAN, PLOT_Y_ORIGIN, PLOT_PX_PER_EV
)
from photoelectric.model.measurements import Measurement

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class PlotFrame:
    """Fixed pixel frame: frequency maps linearly onto x, energy onto y (upwards)."""
    x_origin: float = PLOT_X_ORIGIN
    x_span: float = PLOT_X_SPAN
    f_min: float = FREQUENCY_MIN
    f_max: float = FREQUENCY_MAX
    y_origin: float = PLOT_Y_ORIGIN
    px_per_ev: float = PLOT_PX_PER_EV

    @property
    def px_per_frequency(self) -> float:
        return self.x_span / (self.f_max - self.f_min)

    @property
    def energy_range(self) -> Tuple[float, float]:
        """Energies visible between the x-axis and the top of the frame."""
        return 0.0, self.y_origin / self.px_per_ev

    def to_pixel(self, frequency: float, energy: float) -> Tuple[float, float]:
        x = self.x_origin + (frequency - self.f_min) * self.px_per_frequency
        y = self.y_origin - energy * self.px_per_ev
        return x, y

    def reference_level(self, work_function: float) -> float:
        """y pixel of the dashed work-function line."""
        return self.y_origin - work_function * self.px_per_ev


def scatter_points(entries: Sequence[Measurement]) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """Frequencies and kinetic energies of all entries, in insertion order."""
    f = np.array([m.frequency for m in entries], dtype=float)
    ec = np.array([m.kinetic_energy for m in entries], dtype=float)
    return f, ec


def trend_points(entries: Sequence[Measurement]) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
    """Points joined by the trend line: only entries that emitted (Ec > 0)."""
    if len(entries) < 2:
        return np.empty(0), np.empty(0)
    f, ec = scatter_points(entries)
    mask = ec > 0
    return f[mask], ec[mask]


def pixel_points(entries: Sequence[Measurement], frame: PlotFrame = PlotFrame()) -> list[Tuple[float, float]]:
    return [frame.to_pixel(m.frequency, m.kinetic_energy) for m in entries]


def equation_text(work_function: float) -> str:
    return f"Ec = h·f - φ = {PLANCK_EV:.3e}·f - {work_function:.2f} eV"
