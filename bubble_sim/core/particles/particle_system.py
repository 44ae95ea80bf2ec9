"""
Ambient and burst particles
Fixed-size replenished background pool plus transient selection bursts
"""

import logging
from typing import List, Optional

import numpy as np

from bubble_sim.core_types import Bounds, SimulationConfig, ParticleView

logger = logging.getLogger(__name__)


class ParticlePool:
    """Structure-of-arrays particle buffer.

    Every particle moves by its velocity, wraps toroidally at the bounds and
    loses lifespan multiplicatively; particles under ``epsilon`` are dropped.
    """

    def __init__(self, decay: float, epsilon: float):
        self.decay = decay
        self.epsilon = epsilon
        self.clear()

    def __len__(self) -> int:
        return len(self.lifespans)

    def add(self, positions: np.ndarray, velocities: np.ndarray,
            sizes: np.ndarray, alphas: np.ndarray):
        count = len(sizes)
        if count == 0:
            return
        self.positions = np.concatenate([self.positions, np.asarray(positions, dtype=np.float64).reshape(count, 2)])
        self.velocities = np.concatenate([self.velocities, np.asarray(velocities, dtype=np.float64).reshape(count, 2)])
        self.sizes = np.concatenate([self.sizes, np.asarray(sizes, dtype=np.float64)])
        self.alphas = np.concatenate([self.alphas, np.asarray(alphas, dtype=np.float64)])
        self.lifespans = np.concatenate([self.lifespans, np.ones(count)])

    def step(self, bounds: Bounds, scale: float = 1.0) -> int:
        """Advance all particles; returns how many expired"""
        if len(self) == 0 or scale <= 0:
            return 0

        self.positions += self.velocities * scale
        self._wrap(bounds)
        self.lifespans *= self.decay ** scale

        alive = self.lifespans > self.epsilon
        expired = int(len(alive) - np.count_nonzero(alive))
        if expired:
            self.positions = self.positions[alive]
            self.velocities = self.velocities[alive]
            self.sizes = self.sizes[alive]
            self.alphas = self.alphas[alive]
            self.lifespans = self.lifespans[alive]
        return expired

    def _wrap(self, bounds: Bounds):
        for axis, extent in enumerate((bounds.width, bounds.height)):
            extent = max(extent, 0.0)
            column = self.positions[:, axis]
            column[column < 0.0] = extent
            column[column > extent] = 0.0

    def clear(self):
        self.positions = np.zeros((0, 2))
        self.velocities = np.zeros((0, 2))
        self.sizes = np.zeros(0)
        self.alphas = np.zeros(0)
        self.lifespans = np.zeros(0)

    def views(self) -> List[ParticleView]:
        effective = self.alphas * self.lifespans
        return [
            ParticleView(x=float(p[0]), y=float(p[1]), size=float(s), alpha=float(a))
            for p, s, a in zip(self.positions, self.sizes, effective)
        ]


class ParticleSystem:
    """Owns the ambient and burst pools of one simulation"""

    def __init__(self, config: SimulationConfig, rng: np.random.Generator):
        self.config = config
        self.rng = rng
        self.ambient = ParticlePool(config.particle_decay, config.lifespan_epsilon)
        self.burst = ParticlePool(config.particle_decay, config.lifespan_epsilon)

    def __len__(self) -> int:
        return len(self.ambient) + len(self.burst)

    def seed(self, bounds: Bounds):
        """Fill the ambient pool up to its target count"""
        self._replenish(bounds)

    def step(self, bounds: Bounds, scale: float = 1.0):
        if scale <= 0:
            return
        expired = self.ambient.step(bounds, scale)
        self.burst.step(bounds, scale)
        if expired:
            logger.debug(f"{expired} ambient particles expired")
        self._replenish(bounds)

    def _replenish(self, bounds: Bounds):
        missing = self.config.ambient_count - len(self.ambient)
        if missing <= 0:
            return
        cfg = self.config
        width, height = max(bounds.width, 0.0), max(bounds.height, 0.0)
        positions = np.column_stack([
            self.rng.uniform(0.0, width, size=missing),
            self.rng.uniform(0.0, height, size=missing),
        ])
        velocities = self.rng.uniform(-cfg.ambient_speed, cfg.ambient_speed, size=(missing, 2))
        sizes = self.rng.uniform(*cfg.ambient_size_range, size=missing)
        alphas = self.rng.uniform(*cfg.ambient_alpha_range, size=missing)
        self.ambient.add(positions, velocities, sizes, alphas)

    def spawn_burst(self, x: float, y: float, count: Optional[int] = None) -> int:
        """Emit particles evenly spaced around a circle at (x, y)"""
        cfg = self.config
        count = cfg.burst_count if count is None else count
        if count <= 0:
            return 0

        slot = 2.0 * np.pi / count
        angles = np.arange(count) * slot + self.rng.uniform(0.0, slot, size=count)
        speeds = self.rng.uniform(*cfg.burst_speed_range, size=count)
        velocities = np.column_stack([np.cos(angles) * speeds, np.sin(angles) * speeds])
        positions = np.tile([float(x), float(y)], (count, 1))
        sizes = self.rng.uniform(*cfg.burst_size_range, size=count)
        alphas = np.full(count, cfg.burst_alpha)

        self.burst.add(positions, velocities, sizes, alphas)
        logger.debug(f"Spawned {count} burst particles at ({x:.1f}, {y:.1f})")
        return count

    def views(self) -> List[ParticleView]:
        return self.ambient.views() + self.burst.views()

    def clear(self):
        self.ambient.clear()
        self.burst.clear()
