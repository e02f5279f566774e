"""
observations/shapes.py

What a thing looks like, separate from how it is drawn.

Swarmers are arrows, trees are circles. The renderer decides the rest.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Union
import numpy as np


ARROW_LENGTH = 6.0
ARROW_WIDTH = 3.0


@dataclass
class Arrow:
    """A heading marker: centred at position, pointing along direction."""
    position: np.ndarray
    direction: np.ndarray          # Unit vector
    length: float = ARROW_LENGTH
    width: float = ARROW_WIDTH


@dataclass
class Circle:
    position: np.ndarray
    diameter: float


Shape = Union[Arrow, Circle]


def arrow_vertices(arrow: Arrow) -> np.ndarray:
    """
    Triangle corners for an arrow, shape (3, 2).

    Tip is ahead of the position; the base straddles the point behind it.
    """
    forward = np.asarray(arrow.direction, dtype=np.float64)
    sideways = np.array([forward[1], -forward[0]])
    position = np.asarray(arrow.position, dtype=np.float64)

    tip = position + arrow.length * forward
    left = position - arrow.length * forward + arrow.width * sideways
    right = position - arrow.length * forward - arrow.width * sideways
    return np.array([tip, left, right])
