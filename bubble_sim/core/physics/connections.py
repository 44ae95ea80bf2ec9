"""Links between nearby bubbles, faded by distance."""

from typing import List, Sequence

import numpy as np

from bubble_sim.core_types import Connection
from bubble_sim.core.entities import Bubble


def find_connections(bubbles: Sequence[Bubble], max_distance: float,
                     max_alpha: float) -> List[Connection]:
    """Return a link for every pair whose centers are closer than ``max_distance``.

    Alpha falls linearly from ``max_alpha`` at distance 0 to 0 at the threshold.
    """
    if len(bubbles) < 2 or max_distance <= 0:
        return []

    positions = np.array([bubble.position for bubble in bubbles])
    deltas = positions[:, None, :] - positions[None, :, :]
    distances = np.hypot(deltas[..., 0], deltas[..., 1])

    links = []
    rows, cols = np.triu_indices(len(bubbles), k=1)
    for i, j in zip(rows, cols):
        distance = distances[i, j]
        if distance < max_distance:
            alpha = max_alpha * (1.0 - distance / max_distance)
            links.append(Connection(a=bubbles[i].id, b=bubbles[j].id, alpha=float(alpha)))
    return links
