"""
bubble-sim - floating bubble physics for the sales demo
Interactive 2D bubble simulation with collisions, pointer response,
exclusive expansion and particle bursts.
"""

"""Lightweight bubble_sim package initializer.

Nothing here draws or schedules frames; hosts create a simulation with
`initialize` and drive it with `step`.
"""

from bubble_sim.__version__ import __version__

from .core_types import Bounds, SimulationConfig, Snapshot, BubbleView, ParticleView, Connection
from .core.simulation import BubbleSimulation
from .core.interaction.selection import PressOutcome, SelectionPhase, SelectionState
from .physics_api import initialize, create_engine, intensity_from_revenue

__all__ = [
    "__version__",
    "Bounds",
    "SimulationConfig",
    "Snapshot",
    "BubbleView",
    "ParticleView",
    "Connection",
    "BubbleSimulation",
    "PressOutcome",
    "SelectionPhase",
    "SelectionState",
    "initialize",
    "create_engine",
    "intensity_from_revenue",
]
