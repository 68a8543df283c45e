"""
Particle Engine
===============
Maintains the transient population of emitted-electron markers drawn in the
scene.

Each call to `ParticleEngine.tick` represents one animation frame:
1. Spawn: one uniform draw decides whether a new electron leaves the cathode.
2. Advance: every electron moves by its velocity and ages by one frame.
3. Prune: expired electrons and electrons past the visible bound are removed.

The engine does not know about any scheduler. The caller (Qt timer or a test
loop) decides when a frame has passed.
"""
from __future__ import annotations

from dataclasses import dataclass
import itertools
import logging
import math
from typing import List, Optional, Protocol, Tuple

import numpy as np

from photoelectric.config import (
    EMISSION_ORIGIN_X, EMISSION_ORIGIN_Y, EMISSION_JITTER, SPEED_FACTOR, VERTICAL_SPREAD,
    PARTICLE_LIFETIME, VISIBLE_BOUND, SPAWN_DIVISOR, MAX_PARTICLES
)

logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    """Subset of numpy.random.Generator used by the simulation."""
    def random(self) -> float: ...
    def uniform(self, low: float, high: float) -> float: ...


@dataclass
class Particle:
    id: int
    x: float
    y: float
    vx: float
    vy: float
    life: int

    @property
    def opacity(self) -> float:
        """Fades linearly from 1 to 0 over the particle lifetime."""
        return max(0.0, min(1.0, self.life / PARTICLE_LIFETIME))


class ParticleEngine:
    def __init__(self, rng: Optional[RandomSource] = None, max_particles: Optional[int] = MAX_PARTICLES) -> None:
        self.rng: RandomSource = rng if rng is not None else np.random.default_rng()
        self.max_particles = max_particles
        self._particles: List[Particle] = []
        self._ids = itertools.count()

    def __len__(self) -> int:
        return len(self._particles)

    @property
    def particles(self) -> Tuple[Particle, ...]:
        """Snapshot of the current population, read by the scene each frame."""
        return tuple(self._particles)

    def clear(self) -> None:
        if self._particles:
            logger.debug(f"Discarding {len(self._particles)} particles.")
        self._particles.clear()

    def tick(self, intensity: float, max_kinetic_energy: float) -> Tuple[Particle, ...]:
        """
        Advance the population by one frame.

        Args:
            intensity: Light intensity in percent (spawn probability = intensity / 1000).
            max_kinetic_energy: Maximum kinetic energy of the electrons in eV.

        Returns:
            Snapshot of the population after the frame.
        """
        if self.rng.random() < intensity / SPAWN_DIVISOR and not self._is_full():
            self._particles.append(self._spawn(max_kinetic_energy))

        for p in self._particles:
            p.x += p.vx
            p.y += p.vy
            p.life -= 1

        self._particles = [p for p in self._particles if p.life > 0 and p.x < VISIBLE_BOUND]
        return self.particles

    def _is_full(self) -> bool:
        return self.max_particles is not None and len(self._particles) >= self.max_particles

    def _spawn(self, max_kinetic_energy: float) -> Particle:
        # Speed is proportional to sqrt(Ec)
        speed = math.sqrt(max(0.0, max_kinetic_energy)) * SPEED_FACTOR
        return Particle(
            id=next(self._ids),
            x=EMISSION_ORIGIN_X,
            y=EMISSION_ORIGIN_Y + float(self.rng.uniform(-0.5, 0.5)) * EMISSION_JITTER,
            vx=speed * float(self.rng.uniform(0.8, 1.2)),
            vy=float(self.rng.uniform(-0.5, 0.5)) * speed * VERTICAL_SPREAD,
            life=PARTICLE_LIFETIME,
        )
