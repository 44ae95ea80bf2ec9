"""
Floating bubble simulation
Wires the entity store, force integrator, radius animator, particle system
and selection state machine behind a single per-container handle
"""

import math
import logging
from typing import Any, Callable, List, Optional, Sequence

import numpy as np

from bubble_sim.core_types import (
    Bounds,
    BoundsLike,
    PointerLike,
    SimulationConfig,
    Snapshot,
    Vec2,
    to_bounds,
    to_pointer,
)
from bubble_sim.core.entities import Bubble, EntityStore
from bubble_sim.core.interaction.selection import (
    PressOutcome,
    SelectCallback,
    SelectionState,
    SelectionStateMachine,
)
from bubble_sim.core.particles.particle_system import ParticleSystem
from bubble_sim.core.physics.connections import find_connections
from bubble_sim.core.physics.force_integrator import ForceIntegrator
from bubble_sim.core.physics.radius_animator import RadiusAnimator

logger = logging.getLogger(__name__)


class BubbleSimulation:
    """One independent bubble simulation.

    The host calls :meth:`step` once per frame and forwards pointer events;
    nothing here schedules frames or draws. Every instance owns its own
    random generator, so several can run side by side.
    """

    def __init__(self, config: Optional[SimulationConfig] = None, seed: Optional[int] = None):
        self.config = config or SimulationConfig()
        self.rng = np.random.default_rng(seed)
        self.bounds = Bounds()
        self.frame = 0

        self.entities = EntityStore(self.config, self.rng)
        self.particles = ParticleSystem(self.config, self.rng)
        self.integrator = ForceIntegrator(self.config)
        self.animator = RadiusAnimator(self.config)
        self.selection = SelectionStateMachine(on_burst=self.particles.spawn_burst)

        self._pointer: Optional[Vec2] = None
        self._initialized = False
        self._destroyed = False
        self._paused = False
        self._release_frame: Optional[Callable[[], Any]] = None
        self._last_snapshot = Snapshot()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    @property
    def is_initialized(self) -> bool:
        return self._initialized and not self._destroyed

    @property
    def is_destroyed(self) -> bool:
        return self._destroyed

    def initialize(self, bounds: BoundsLike, entities: Optional[Sequence[Any]] = None) -> "BubbleSimulation":
        """Build one bubble per payload and seed the ambient particles.

        Calling it again, including after destroy(), starts a fresh session.
        """
        self.bounds = to_bounds(bounds)
        payloads = list(entities or [])

        self.selection.reset(self.entities.bubbles)
        self.entities.populate(payloads, self.bounds)
        self.particles.clear()
        self.particles.seed(self.bounds)
        self.frame = 0
        self._pointer = None
        self._initialized = True
        self._destroyed = False
        self._last_snapshot = self._build_snapshot()

        logger.info(
            f"Simulation initialized with {len(self.entities)} bubbles "
            f"in {self.bounds.width:g}x{self.bounds.height:g}"
        )
        return self

    def resize(self, bounds: BoundsLike):
        self.bounds = to_bounds(bounds)
        logger.debug(f"Resized to {self.bounds.width:g}x{self.bounds.height:g}")

    def bind_frame_handle(self, release: Callable[[], Any]):
        """Hand over the host's frame-callback cancel function; destroy() calls it"""
        self._release_frame = release

    def destroy(self):
        """Release all state. Safe to call more than once."""
        if self._destroyed:
            return
        self._destroyed = True

        release, self._release_frame = self._release_frame, None
        self.selection.clear_callbacks()
        self.selection.reset()
        self.entities.clear()
        self.particles.clear()
        self._pointer = None
        self._last_snapshot = Snapshot()

        if release is not None:
            release()
        logger.info("Simulation destroyed")

    def pause(self):
        self._paused = True

    def resume(self):
        self._paused = False

    @property
    def paused(self) -> bool:
        return self._paused

    def set_intensity(self, intensity: float):
        """Scale bubble mass and spring stiffness (1.0 is the baseline)"""
        if not math.isfinite(intensity):
            logger.debug(f"Ignoring non-finite intensity {intensity}")
            return
        self.entities.set_intensity(intensity)

    # ------------------------------------------------------------------
    # Frame loop
    # ------------------------------------------------------------------

    def frame_scale(self, delta_seconds: Optional[float]) -> float:
        """Convert elapsed seconds into nominal frames, clamped for catch-up"""
        if delta_seconds is None:
            return 1.0
        if not math.isfinite(delta_seconds) or delta_seconds <= 0:
            return 0.0
        return min(delta_seconds / self.config.nominal_dt, self.config.max_frame_scale)

    def step(self, delta_seconds: Optional[float] = None, pointer: PointerLike = None) -> Snapshot:
        """Advance one frame and return what to draw.

        A pointer passed here replaces the last known pointer and refreshes
        hover; ``None`` keeps whatever :meth:`pointer_moved` last reported.
        Before initialize, after destroy, while paused or with a
        non-positive delta the step changes nothing.
        """
        if not self.is_initialized:
            return self._last_snapshot

        point = to_pointer(pointer)
        if point is not None:
            self.pointer_moved(point)

        scale = self.frame_scale(delta_seconds)
        if self._paused or scale <= 0:
            return self._last_snapshot

        bubbles = self.entities.bubbles
        self.integrator.step(bubbles, self.bounds, self._pointer, scale)
        self.animator.step(bubbles, scale)
        self.particles.step(self.bounds, scale)
        self.frame += 1

        self._last_snapshot = self._build_snapshot()
        return self._last_snapshot

    def snapshot(self) -> Snapshot:
        return self._last_snapshot

    def _build_snapshot(self) -> Snapshot:
        return Snapshot(
            frame=self.frame,
            bubbles=self.entities.views(),
            particles=self.particles.views(),
            connections=find_connections(
                self.entities.bubbles,
                self.config.connection_distance,
                self.config.connection_max_alpha,
            ),
        )

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def pointer_moved(self, pointer: PointerLike) -> Optional[int]:
        """Update hover; returns the hovered bubble id"""
        if not self.is_initialized:
            return None
        self._pointer = to_pointer(pointer)
        previous = self.selection.hovered_id
        hovered = self.selection.pointer_moved(self.entities.bubbles, self._pointer)
        if hovered != previous:
            # Hover must show even when no frame follows (paused host)
            self._last_snapshot = self._build_snapshot()
        return hovered

    def pointer_pressed(self, pointer: PointerLike) -> PressOutcome:
        if not self.is_initialized:
            return PressOutcome.NONE
        outcome = self.selection.pointer_pressed(self.entities.bubbles, to_pointer(pointer))
        if outcome is not PressOutcome.NONE:
            # Reflect the new flags without waiting for the next frame
            self._last_snapshot = self._build_snapshot()
        return outcome

    def on_select(self, callback: SelectCallback) -> SelectCallback:
        """Register a payload callback; usable as a decorator"""
        return self.selection.subscribe(callback)

    def off_select(self, callback: SelectCallback):
        """Remove a callback registered with :meth:`on_select`"""
        self.selection.unsubscribe(callback)

    @property
    def selection_state(self) -> SelectionState:
        return self.selection.state

    @property
    def bubbles(self) -> List[Bubble]:
        return self.entities.bubbles


__all__ = ["BubbleSimulation"]
