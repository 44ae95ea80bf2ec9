"""
Entity store for the bubble simulation
Holds the mutable state of every bubble for the lifetime of a simulation
"""

import math
import logging
from dataclasses import dataclass, field
from typing import Any, List, Optional, Sequence

import numpy as np

from bubble_sim.core_types import Bounds, SimulationConfig, BubbleView

logger = logging.getLogger(__name__)


@dataclass
class Bubble:
    """A circular body carrying an opaque display payload"""
    id: int
    position: np.ndarray = field(default_factory=lambda: np.zeros(2))
    velocity: np.ndarray = field(default_factory=lambda: np.zeros(2))
    base_radius: float = 60.0
    radius: float = 60.0
    target_radius: float = 60.0
    mass: float = 6.0
    spring_stiffness: float = 0.05
    friction: float = 0.98
    pulse_phase: float = 0.0
    is_hovered: bool = False
    is_expanded: bool = False
    payload: Any = None

    def __post_init__(self):
        self.position = np.asarray(self.position, dtype=np.float64).copy()
        self.velocity = np.asarray(self.velocity, dtype=np.float64).copy()

    def apply_intensity(self, intensity: float, config: SimulationConfig):
        """Re-derive mass and spring stiffness from the external intensity"""
        intensity = max(float(intensity), 0.0)
        self.mass = max(self.base_radius * config.mass_per_radius * intensity, config.min_mass)
        stiffness = config.spring_stiffness * (1.0 + 0.5 * intensity)
        self.spring_stiffness = min(max(stiffness, 1e-6), 1.0)

    def distance_to(self, point: Sequence[float]) -> float:
        return math.hypot(point[0] - self.position[0], point[1] - self.position[1])

    def view(self) -> BubbleView:
        return BubbleView(
            id=self.id,
            x=float(self.position[0]),
            y=float(self.position[1]),
            radius=float(self.radius),
            is_hovered=self.is_hovered,
            is_expanded=self.is_expanded,
            payload=self.payload,
        )


class EntityStore:
    """Owns the bubble population of one simulation instance"""

    def __init__(self, config: SimulationConfig, rng: np.random.Generator):
        self.config = config
        self.rng = rng
        self.bubbles: List[Bubble] = []
        self.intensity = 1.0

    def __len__(self) -> int:
        return len(self.bubbles)

    def populate(self, payloads: Sequence[Any], bounds: Bounds):
        """Create one bubble per payload at a random position inside bounds"""
        self.bubbles = [self._spawn(index, payload, bounds) for index, payload in enumerate(payloads)]
        logger.debug(f"Populated {len(self.bubbles)} bubbles in {bounds.width}x{bounds.height}")

    def _spawn(self, index: int, payload: Any, bounds: Bounds) -> Bubble:
        cfg = self.config
        low, high = cfg.base_radius_range
        radius = max(float(self.rng.uniform(low, high)), cfg.min_radius)

        position = np.array([
            self._uniform_inside(radius, bounds.width),
            self._uniform_inside(radius, bounds.height),
        ])
        velocity = self.rng.uniform(-cfg.initial_speed, cfg.initial_speed, size=2)

        bubble = Bubble(
            id=index,
            position=position,
            velocity=velocity,
            base_radius=radius,
            radius=radius,
            target_radius=radius,
            friction=cfg.friction,
            pulse_phase=float(self.rng.uniform(0.0, 2.0 * np.pi)),
            payload=payload,
        )
        bubble.apply_intensity(self.intensity, cfg)
        return bubble

    def _uniform_inside(self, radius: float, extent: float) -> float:
        # Falls back to the midline when the extent cannot fit the bubble
        if extent < 2.0 * radius:
            return max(extent, 0.0) / 2.0
        return float(self.rng.uniform(radius, extent - radius))

    def set_intensity(self, intensity: float):
        self.intensity = max(float(intensity), 0.0)
        for bubble in self.bubbles:
            bubble.apply_intensity(self.intensity, self.config)

    def get(self, bubble_id: int) -> Optional[Bubble]:
        if 0 <= bubble_id < len(self.bubbles):
            return self.bubbles[bubble_id]
        return None

    def views(self) -> List[BubbleView]:
        return [bubble.view() for bubble in self.bubbles]

    def clear(self):
        self.bubbles = []
