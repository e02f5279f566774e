"""
core/geometry.py

The arena is a closed box. Agents live inside it.

Ranges and rectangles bound the world; clamp keeps everyone honest.
"""

from __future__ import annotations
from dataclasses import dataclass
import numpy as np


# Direction used when a zero-length vector has to be normalized.
# Matches the heading every swarmer is born with.
DEFAULT_HEADING = np.array([1.0, 1.0]) / np.sqrt(2.0)


@dataclass(frozen=True)
class Range:
    """Closed interval [min, max]."""
    min: float
    max: float

    def __post_init__(self):
        if self.min > self.max:
            raise ValueError(f"Range min {self.min} exceeds max {self.max}")

    @property
    def span(self) -> float:
        return self.max - self.min

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle, the arena every position is clamped to."""
    xrange: Range
    yrange: Range

    @classmethod
    def from_dimensions(cls, width: float, height: float) -> Rectangle:
        """Arena anchored at the origin, as the screen sees it."""
        return cls(Range(0.0, float(width)), Range(0.0, float(height)))

    def contains(self, point: np.ndarray) -> bool:
        return self.xrange.contains(point[0]) and self.yrange.contains(point[1])


def clamp(value: float, limits: Range) -> float:
    """Pull value back into limits. Total."""
    if value < limits.min:
        return limits.min
    elif value > limits.max:
        return limits.max
    return value


def normalize(vector: np.ndarray) -> np.ndarray:
    """
    Unit vector in the direction of `vector`.

    A zero vector has no direction; it gets DEFAULT_HEADING instead of NaN.
    """
    length = np.linalg.norm(vector)
    if length == 0.0:
        return DEFAULT_HEADING.copy()
    return vector / length
