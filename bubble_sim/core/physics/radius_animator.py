"""Spring-damped radius animation: idle pulsation, hover and expansion growth."""

import math
from typing import Sequence

from bubble_sim.core_types import SimulationConfig
from bubble_sim.core.entities import Bubble


class RadiusAnimator:
    """Moves each radius a fixed fraction of the way to its target per frame.

    With a fraction in (0, 1] the approach is monotone, so the radius never
    overshoots its target.
    """

    def __init__(self, config: SimulationConfig):
        self.config = config

    def target_for(self, bubble: Bubble) -> float:
        cfg = self.config
        if bubble.is_expanded:
            target = bubble.base_radius * cfg.expand_growth
        elif bubble.is_hovered:
            target = bubble.base_radius * cfg.hover_growth
        else:
            target = bubble.base_radius * (1.0 + cfg.pulse_amplitude * math.sin(bubble.pulse_phase))
        return max(target, cfg.min_radius)

    def step(self, bubbles: Sequence[Bubble], scale: float = 1.0):
        if scale <= 0:
            return
        cfg = self.config
        for bubble in bubbles:
            bubble.pulse_phase += cfg.pulse_increment * scale
            bubble.target_radius = self.target_for(bubble)

            fraction = 1.0 - (1.0 - bubble.spring_stiffness) ** scale
            bubble.radius += (bubble.target_radius - bubble.radius) * fraction
            bubble.radius = max(bubble.radius, cfg.min_radius)
