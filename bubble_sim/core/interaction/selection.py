"""
Hover and selection handling for bubbles
Hit-testing, exclusive expansion and selection event dispatch
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence

from bubble_sim.core_types import Vec2
from bubble_sim.core.entities import Bubble

logger = logging.getLogger(__name__)

SelectCallback = Callable[[Any], None]


class SelectionPhase(Enum):
    """Phase of the selection state machine"""
    IDLE = "idle"
    HOVERED = "hovered"
    EXPANDED = "expanded"


@dataclass(frozen=True)
class SelectionState:
    phase: SelectionPhase = SelectionPhase.IDLE
    bubble_id: Optional[int] = None


class PressOutcome(Enum):
    """What a pointer press did"""
    NONE = "none"
    EXPANDED = "expanded"
    COLLAPSED = "collapsed"


def hit_test(bubbles: Sequence[Bubble], point: Optional[Vec2]) -> Optional[Bubble]:
    """Return the bubble under ``point``.

    A bubble is hit when the point is strictly inside its current radius.
    When several overlap, the one whose center is nearest wins; exact ties go
    to the lower id.
    """
    if point is None:
        return None
    best = None
    best_distance = 0.0
    for bubble in bubbles:
        distance = bubble.distance_to(point)
        if distance >= bubble.radius:
            continue
        if best is None or distance < best_distance or (
            distance == best_distance and bubble.id < best.id
        ):
            best, best_distance = bubble, distance
    return best


class SelectionStateMachine:
    """Tracks hover and the single expanded bubble.

    The expanded bubble is kept as an id and mirrored into the bubbles'
    ``is_expanded`` flags, so at most one flag can ever be set.
    """

    def __init__(self, on_burst: Optional[Callable[[float, float], Any]] = None):
        self.on_burst = on_burst
        self.hovered_id: Optional[int] = None
        self.expanded_id: Optional[int] = None
        self._callbacks: List[SelectCallback] = []

    @property
    def state(self) -> SelectionState:
        if self.expanded_id is not None:
            return SelectionState(SelectionPhase.EXPANDED, self.expanded_id)
        if self.hovered_id is not None:
            return SelectionState(SelectionPhase.HOVERED, self.hovered_id)
        return SelectionState()

    def subscribe(self, callback: SelectCallback) -> SelectCallback:
        self._callbacks.append(callback)
        return callback

    def unsubscribe(self, callback: SelectCallback):
        if callback in self._callbacks:
            self._callbacks.remove(callback)

    def pointer_moved(self, bubbles: Sequence[Bubble], point: Optional[Vec2]) -> Optional[int]:
        hit = hit_test(bubbles, point)
        self.hovered_id = hit.id if hit is not None else None
        for bubble in bubbles:
            bubble.is_hovered = bubble is hit
        return self.hovered_id

    def pointer_pressed(self, bubbles: Sequence[Bubble], point: Optional[Vec2]) -> PressOutcome:
        hit = hit_test(bubbles, point)

        if hit is None:
            if self.expanded_id is not None:
                self._collapse(bubbles)
                return PressOutcome.COLLAPSED
            return PressOutcome.NONE

        if hit.id == self.expanded_id:
            self._collapse(bubbles)
            return PressOutcome.COLLAPSED

        self._expand(bubbles, hit)
        return PressOutcome.EXPANDED

    def _expand(self, bubbles: Sequence[Bubble], bubble: Bubble):
        for other in bubbles:
            other.is_expanded = False
        bubble.is_expanded = True
        self.expanded_id = bubble.id
        logger.info(f"Bubble {bubble.id} expanded")

        if self.on_burst is not None:
            self.on_burst(float(bubble.position[0]), float(bubble.position[1]))

        for callback in list(self._callbacks):
            callback(bubble.payload)

    def _collapse(self, bubbles: Sequence[Bubble]):
        logger.info(f"Bubble {self.expanded_id} collapsed")
        for bubble in bubbles:
            bubble.is_expanded = False
        self.expanded_id = None

    def reset(self, bubbles: Sequence[Bubble] = ()):
        for bubble in bubbles:
            bubble.is_hovered = False
            bubble.is_expanded = False
        self.hovered_id = None
        self.expanded_id = None

    def clear_callbacks(self):
        self._callbacks.clear()
