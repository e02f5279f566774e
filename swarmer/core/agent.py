"""
core/agent.py

A swarmer knows where it is and where it is going.
Nothing else. The flock does the thinking.

Inspired by:
- Reynolds boids
- Starling murmurations (never still, never too fast)
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import numpy as np

from swarmer.core.geometry import Rectangle, clamp, normalize
from swarmer.observations.shapes import Arrow


MIN_SPEED = 3.0
MAX_SPEED = 6.0

# Small but non-zero, so a newborn swarmer already has a heading.
INITIAL_VELOCITY = (0.1, 0.1)


@dataclass
class SwarmerState:
    """Position and velocity at one instant."""
    position: np.ndarray
    velocity: np.ndarray

    def __post_init__(self):
        self.position = np.array(self.position, dtype=np.float64)
        self.velocity = np.array(self.velocity, dtype=np.float64)

    def copy(self) -> SwarmerState:
        return SwarmerState(self.position.copy(), self.velocity.copy())


class Swarmer:
    """
    A single flocking agent.

    State is only ever changed by `_update`, which the owning Swarm calls
    once per tick with an acceleration computed from the pre-tick flock.
    """

    def __init__(
        self,
        position: np.ndarray,
        velocity: Optional[np.ndarray] = None
    ):
        init_vel = velocity if velocity is not None else INITIAL_VELOCITY
        self.state = SwarmerState(position=position, velocity=init_vel)

    # ==================== Accessors ====================

    def get_position(self) -> np.ndarray:
        return self.state.position.copy()

    def get_velocity(self) -> np.ndarray:
        return self.state.velocity.copy()

    def get_shape(self) -> Arrow:
        """Arrow along the current heading. Magnitude is not drawn."""
        return Arrow(
            position=self.get_position(),
            direction=normalize(self.state.velocity)
        )

    # ==================== Integration ====================

    def _update(
        self,
        acceleration: np.ndarray,
        limits: Rectangle,
        dt: float,
        min_speed: float = MIN_SPEED,
        max_speed: float = MAX_SPEED
    ) -> None:
        """
        Advance one tick.

        1. Accelerate
        2. Clamp speed into [min_speed, max_speed], keeping the heading
        3. Move
        4. Clamp position into the arena (no reflection)
        """
        velocity = self.state.velocity + np.asarray(acceleration) * dt

        speed = float(np.clip(np.linalg.norm(velocity), min_speed, max_speed))
        velocity = normalize(velocity) * speed

        position = self.state.position + velocity * dt
        position[0] = clamp(position[0], limits.xrange)
        position[1] = clamp(position[1], limits.yrange)

        self.state.velocity = velocity
        self.state.position = position

    # ==================== Utilities ====================

    def distance_to(self, other: Swarmer) -> float:
        """Euclidean distance to another swarmer."""
        return float(np.linalg.norm(self.state.position - other.state.position))

    def __repr__(self) -> str:
        return (
            f"Swarmer(pos=[{self.state.position[0]:.2f}, {self.state.position[1]:.2f}], "
            f"vel=[{self.state.velocity[0]:.2f}, {self.state.velocity[1]:.2f}])"
        )
