"""
environments/obstacles.py

Things that don't move and don't want company.

An obstacle has a place, a push, and a shape.
"""

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable, List, Sequence, Tuple
import numpy as np

from swarmer.core.geometry import normalize
from swarmer.observations.shapes import Circle


class Obstacle(ABC):
    """
    Abstract static repeller.

    Every obstacle must support:
    - get_position: where it is
    - get_repulsion_vector: how hard it pushes a point away
    - get_shape: how it is drawn
    """

    @abstractmethod
    def get_position(self) -> np.ndarray:
        pass

    @abstractmethod
    def get_repulsion_vector(self, position: np.ndarray) -> np.ndarray:
        pass

    @abstractmethod
    def get_shape(self) -> Circle:
        pass


class Tree(Obstacle):
    """
    A round obstacle.

    Push is unit strength inside one diameter of the centre and falls off
    as 1/distance beyond it.
    """

    def __init__(self, position: np.ndarray, diameter: float):
        if diameter <= 0:
            raise ValueError(f"Tree diameter must be positive, got {diameter}")
        self.position = np.array(position, dtype=np.float64)
        self.diameter = float(diameter)

    def get_position(self) -> np.ndarray:
        return self.position.copy()

    def get_repulsion_vector(self, position: np.ndarray) -> np.ndarray:
        offset = np.asarray(position, dtype=np.float64) - self.position
        dist_from_edge = np.linalg.norm(offset) - self.diameter

        if dist_from_edge <= 0.0:
            return normalize(offset)
        return normalize(offset) / dist_from_edge

    def get_shape(self) -> Circle:
        return Circle(position=self.get_position(), diameter=self.diameter)

    def __repr__(self) -> str:
        return (
            f"Tree(pos=[{self.position[0]:.1f}, {self.position[1]:.1f}], "
            f"diameter={self.diameter:.1f})"
        )


def build_obstacles(entries: Iterable[Sequence[float]]) -> List[Obstacle]:
    """Trees from (x, y, diameter) triples."""
    obstacles: List[Obstacle] = []
    for entry in entries:
        if len(entry) != 3:
            raise ValueError(f"Obstacle must be (x, y, diameter), got {entry}")
        x, y, diameter = entry
        obstacles.append(Tree(np.array([x, y]), diameter))
    return obstacles


# Default forest, laid out for a 1920x1080 arena.
DEFAULT_OBSTACLES: Tuple[Tuple[float, float, float], ...] = (
    (500.0, 500.0, 90.0),
    (1000.0, 700.0, 60.0),
    (1200.0, 200.0, 70.0),
)
