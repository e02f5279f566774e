"""
observations/metrics.py

Numbers that say whether a flock is a flock.
"""

from __future__ import annotations
from typing import Tuple
import numpy as np


def cohesion(positions: np.ndarray) -> float:
    """Mean distance from the centroid. Lower is tighter."""
    if len(positions) == 0:
        return 0.0
    centroid = positions.mean(axis=0)
    return float(np.linalg.norm(positions - centroid, axis=1).mean())


def polarization(velocities: np.ndarray) -> float:
    """
    Norm of the mean unit heading, in [0, 1].

    1 means everyone flies the same way; near 0 means no consensus.
    """
    if len(velocities) == 0:
        return 0.0
    speeds = np.linalg.norm(velocities, axis=1)
    moving = speeds > 0
    if not moving.any():
        return 0.0
    headings = velocities[moving] / speeds[moving][:, None]
    return float(np.linalg.norm(headings.mean(axis=0)))


def min_separation(positions: np.ndarray) -> float:
    """Smallest pairwise distance. inf for fewer than two agents."""
    if len(positions) < 2:
        return float("inf")
    diffs = positions[:, None, :] - positions[None, :, :]
    distances = np.linalg.norm(diffs, axis=2)
    np.fill_diagonal(distances, np.inf)
    return float(distances.min())


def speed_range(velocities: np.ndarray) -> Tuple[float, float]:
    """(slowest, fastest) speed in the flock."""
    if len(velocities) == 0:
        return (0.0, 0.0)
    speeds = np.linalg.norm(velocities, axis=1)
    return (float(speeds.min()), float(speeds.max()))
