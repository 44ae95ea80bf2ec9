"""Metrics helpers for headless runs."""
from typing import Dict, Sequence

import numpy as np


def compute_basic_stats(values: Sequence[float]) -> Dict[str, float]:
    if len(values) == 0:
        return {}
    arr = np.asarray(values, dtype=np.float64)
    return {
        "min": float(arr.min()),
        "max": float(arr.max()),
        "mean": float(arr.mean()),
        "p95": float(np.percentile(arr, 95)),
    }


def kinetic_energy(bubbles) -> float:
    """Sum of 0.5 * m * |v|^2 over the bubble population"""
    return float(sum(0.5 * b.mass * float(np.dot(b.velocity, b.velocity)) for b in bubbles))


__all__ = ["compute_basic_stats", "kinetic_energy"]
