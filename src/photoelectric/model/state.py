"""
Simulation State (Data Model)
=============================
This module defines the central data structure for the running simulation.

Why is this file needed?
------------------------
1. State Management: It holds the user inputs, the derived physics result,
   the particle population and the measurement log in one place.
2. Explicit updates: The physics result is recomputed once per mutation and
   cached; queries never trigger recomputation.
3. Decoupling: Views read from this object; the controller writes to it.

Classes:
    SimulationInput: Values set by the controls.
    SimulationState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
import logging
from typing import Optional, Tuple

import numpy as np

from photoelectric.config import (
    FREQUENCY_MIN, FREQUENCY_MAX, DEFAULT_FREQUENCY,
    INTENSITY_MIN, INTENSITY_MAX, INTENSITY_STEP, DEFAULT_INTENSITY, DEFAULT_MATERIAL
)
from photoelectric.model.materials import Material, get_material
from photoelectric.model.measurements import Measurement, MeasurementLog
from photoelectric.model.particles import Particle, ParticleEngine, RandomSource
from photoelectric.model.physics import PhysicsResult, evaluate

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SimulationInput:
    frequency: float = DEFAULT_FREQUENCY  # 10^14 Hz
    intensity: int = DEFAULT_INTENSITY  # %
    material: str = DEFAULT_MATERIAL
    running: bool = False


def clamp_frequency(value: float) -> float:
    """Clamp to the slider range and snap to its 0.1 step."""
    return round(min(FREQUENCY_MAX, max(FREQUENCY_MIN, float(value))), 1)


def clamp_intensity(value: float) -> int:
    value = min(INTENSITY_MAX, max(INTENSITY_MIN, value))
    return int(round(value / INTENSITY_STEP) * INTENSITY_STEP)


class SimulationState:
    """
    Owner of the whole simulation.
    Pass this instance to the controller and read it from the views.
    """

    def __init__(self, rng: Optional[RandomSource] = None) -> None:
        self.rng: RandomSource = rng if rng is not None else np.random.default_rng()
        self.engine = ParticleEngine(rng=self.rng)
        self.log = MeasurementLog()

        self._input = SimulationInput()
        self._physics = evaluate(self._input.frequency, self._input.material)

    # --- QUERIES ---
    @property
    def input(self) -> SimulationInput:
        return self._input

    @property
    def physics(self) -> PhysicsResult:
        return self._physics

    @property
    def material(self) -> Material:
        return get_material(self._input.material)

    @property
    def particles(self) -> Tuple[Particle, ...]:
        return self.engine.particles

    @property
    def measurements(self) -> Tuple[Measurement, ...]:
        return self.log.entries

    @property
    def is_running(self) -> bool:
        return self._input.running

    @property
    def is_animating(self) -> bool:
        """True while the tick driver should be scheduled."""
        return self._input.running and self._physics.emission_possible

    # --- MUTATIONS ---
    def set_frequency(self, value: float) -> None:
        self._update(frequency=clamp_frequency(value))

    def set_intensity(self, value: float) -> None:
        self._update(intensity=clamp_intensity(value))

    def set_material(self, symbol: str) -> None:
        get_material(symbol)  # raises UnknownMaterialError
        self._update(material=symbol)

    def set_running(self, running: bool) -> None:
        if running != self._input.running:
            logger.info("Simulation started." if running else "Simulation paused.")
        self._update(running=bool(running))

    def toggle_running(self) -> bool:
        self.set_running(not self._input.running)
        return self._input.running

    def reset(self) -> None:
        """Stop the simulation and discard all particles. Measurements are kept."""
        self._update(running=False)
        self.engine.clear()
        logger.info("Simulation has been reset.")

    def tick(self) -> Tuple[Particle, ...]:
        """Advance one animation frame. Does nothing but clear when not animating."""
        if not self.is_animating:
            self.engine.clear()
            return self.engine.particles
        return self.engine.tick(self._input.intensity, self._physics.max_kinetic_energy)

    def record_measurement(self) -> Measurement:
        return self.log.record(self._physics, self.rng)

    def clear_measurements(self) -> None:
        self.log.clear()

    def export_measurements(self) -> str:
        return self.log.export()

    # --- INTERNAL ---
    def _update(self, **changes) -> None:
        self._input = replace(self._input, **changes)
        self._physics = evaluate(self._input.frequency, self._input.material)
        if not self.is_animating:
            self.engine.clear()
        logger.debug(f"Input changed: {self._input}")
