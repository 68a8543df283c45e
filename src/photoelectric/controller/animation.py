"""
Animation Controller
====================
Drives the simulation from the Qt event loop.

Why is this file needed?
------------------------
1. Scheduling: The model's `tick()` knows nothing about time. This class
   calls it from a QTimer once per frame while the simulation is animating.
2. Cancellation: Whenever the simulation stops (pause, reset, or light that
   can no longer eject electrons) the timer is stopped synchronously, so no
   orphaned tick runs afterwards.
3. Signals: Views subscribe to Qt signals instead of polling the state.

Classes:
    AnimationController: Mutation entry point for the views.
"""
from __future__ import annotations

import logging
import os
from typing import Union

from PySide6.QtCore import QObject, QTimer, Signal

from photoelectric.config import FRAME_INTERVAL_MS
from photoelectric.model.state import SimulationState

logger = logging.getLogger(__name__)


class AnimationController(QObject):
    physics_changed = Signal(object)  # PhysicsResult
    particles_changed = Signal(object)  # tuple[Particle, ...]
    measurements_changed = Signal(object)  # tuple[Measurement, ...]
    running_changed = Signal(bool)

    def __init__(self, state: SimulationState, interval_ms: int = FRAME_INTERVAL_MS, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.state = state

        self.timer = QTimer(self)
        self.timer.setInterval(interval_ms)
        self.timer.timeout.connect(self.advance_frame)

    @property
    def is_active(self) -> bool:
        """True while a tick is scheduled."""
        return self.timer.isActive()

    # --- INPUT SLOTS ---
    def set_frequency(self, value: float) -> None:
        self.state.set_frequency(value)
        self._after_input_change()

    def set_intensity(self, value: int) -> None:
        self.state.set_intensity(value)
        self._after_input_change()

    def set_material(self, symbol: str) -> None:
        self.state.set_material(symbol)
        self._after_input_change()

    def toggle_running(self) -> None:
        self.state.toggle_running()
        self._after_input_change()
        self.running_changed.emit(self.state.is_running)

    def reset(self) -> None:
        self.state.reset()
        self._after_input_change()
        self.running_changed.emit(False)

    # --- RECORDING SLOTS ---
    def record_measurement(self) -> None:
        self.state.record_measurement()
        self.measurements_changed.emit(self.state.measurements)

    def clear_measurements(self) -> None:
        self.state.clear_measurements()
        self.measurements_changed.emit(self.state.measurements)

    def export_measurements(self, filepath: Union[str, os.PathLike]) -> None:
        self.state.log.save_csv(filepath)

    # --- FRAME ---
    def advance_frame(self) -> None:
        particles = self.state.tick()
        self.particles_changed.emit(particles)

    def _after_input_change(self) -> None:
        self.physics_changed.emit(self.state.physics)
        self._sync_timer()

    def _sync_timer(self) -> None:
        if self.state.is_animating:
            if not self.timer.isActive():
                logger.debug("Starting animation timer.")
                self.timer.start()
        elif self.timer.isActive():
            logger.debug("Stopping animation timer.")
            self.timer.stop()
            # State already dropped its particles; let the scene clear too
            self.particles_changed.emit(self.state.particles)
