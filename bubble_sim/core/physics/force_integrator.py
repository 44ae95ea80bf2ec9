"""
Force integration for floating bubbles
Pointer attraction, pairwise repulsion, ambient lift, friction and wall bounces
"""

import logging
from typing import Optional, Sequence

import numpy as np

from bubble_sim.core_types import Bounds, SimulationConfig, Vec2
from bubble_sim.core.entities import Bubble

logger = logging.getLogger(__name__)

# Separation direction used when two centers coincide exactly
FALLBACK_NORMAL = np.array([1.0, 0.0])


class ForceIntegrator:
    """Advances bubble velocities and positions once per step.

    Phases run over the whole population in a fixed order: attraction,
    repulsion, lift, friction, integration, boundary collision. ``scale`` is
    the elapsed time in nominal frames.
    """

    def __init__(self, config: SimulationConfig):
        self.config = config

    def step(self, bubbles: Sequence[Bubble], bounds: Bounds,
             pointer: Optional[Vec2] = None, scale: float = 1.0):
        if not bubbles or scale <= 0:
            return
        if bounds.is_degenerate:
            logger.debug("Skipping integration: bounds not laid out")
            return

        if pointer is not None:
            self._apply_pointer_attraction(bubbles, pointer, scale)
        self._apply_repulsion(bubbles, scale)
        self._apply_lift(bubbles, scale)
        self._apply_friction(bubbles, scale)
        self._integrate(bubbles, scale)
        self._resolve_boundaries(bubbles, bounds)

    def _apply_pointer_attraction(self, bubbles: Sequence[Bubble], pointer: Vec2, scale: float):
        target = np.asarray(pointer, dtype=np.float64)
        for bubble in bubbles:
            if bubble.is_hovered and not bubble.is_expanded:
                bubble.velocity += (target - bubble.position) * self.config.mouse_attraction * scale

    def _apply_repulsion(self, bubbles: Sequence[Bubble], scale: float):
        strength = self.config.bubble_repulsion * scale
        count = len(bubbles)
        for i in range(count):
            a = bubbles[i]
            for j in range(i + 1, count):
                b = bubbles[j]
                offset = a.position - b.position
                distance = float(np.hypot(offset[0], offset[1]))
                min_distance = a.radius + b.radius
                if distance >= min_distance:
                    continue

                if distance > 0.0:
                    normal = offset / distance
                else:
                    normal = FALLBACK_NORMAL

                force = normal * (min_distance - distance) * strength
                a.velocity += force / a.mass
                b.velocity -= force / b.mass

    def _apply_lift(self, bubbles: Sequence[Bubble], scale: float):
        # Screen coordinates: y grows downward
        for bubble in bubbles:
            bubble.velocity[1] -= self.config.ambient_lift * scale

    def _apply_friction(self, bubbles: Sequence[Bubble], scale: float):
        for bubble in bubbles:
            bubble.velocity *= bubble.friction ** scale

    def _integrate(self, bubbles: Sequence[Bubble], scale: float):
        for bubble in bubbles:
            bubble.position += bubble.velocity * scale

    def _resolve_boundaries(self, bubbles: Sequence[Bubble], bounds: Bounds):
        restitution = self.config.restitution
        extents = (bounds.width, bounds.height)
        for bubble in bubbles:
            r = bubble.radius
            for axis, extent in enumerate(extents):
                low, high = r, extent - r
                pos = bubble.position[axis]
                vel = bubble.velocity[axis]

                if low > high:
                    # Bounds narrower than the bubble: pin to the midline
                    bubble.position[axis] = extent / 2.0
                    bubble.velocity[axis] = -vel * restitution
                elif pos < low:
                    bubble.position[axis] = low
                    if vel < 0:
                        bubble.velocity[axis] = -vel * restitution
                elif pos > high:
                    bubble.position[axis] = high
                    if vel > 0:
                        bubble.velocity[axis] = -vel * restitution
