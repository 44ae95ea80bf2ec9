"""Host-facing entry points for the bubble simulation.
Keeps the import surface small: hosts create a simulation handle here and
talk to it through its methods.
"""
from typing import Any, Optional, Sequence

from bubble_sim.config import INTENSITY_BASELINE
from bubble_sim.core_types import BoundsLike, SimulationConfig
from bubble_sim.core.simulation import BubbleSimulation


def initialize(bounds: BoundsLike, entities: Optional[Sequence[Any]] = None,
               config: Optional[SimulationConfig] = None,
               seed: Optional[int] = None) -> BubbleSimulation:
    """Create and initialize a simulation; the returned handle owns all state."""
    return BubbleSimulation(config=config, seed=seed).initialize(bounds, entities)


def create_engine(*args, **kwargs) -> BubbleSimulation:
    """Create an uninitialized simulation (step() is a no-op until initialize())."""
    return BubbleSimulation(*args, **kwargs)


def get_settings(**overrides) -> SimulationConfig:
    return SimulationConfig(**overrides)


def intensity_from_revenue(revenue: float, baseline: float = INTENSITY_BASELINE) -> float:
    """Normalise a monthly revenue figure to an intensity (baseline -> 1.0)."""
    if baseline <= 0:
        return 1.0
    return max(float(revenue), 0.0) / baseline


__all__ = ["initialize", "create_engine", "get_settings", "intensity_from_revenue"]
