"""
core/swarm.py

The flock as a whole.

Every tick happens in two phases:
1. Look: every swarmer computes its acceleration from the same frozen picture
2. Move: only then does anyone move

Nobody reacts to a neighbor's future.
"""

from __future__ import annotations
import logging
from typing import TYPE_CHECKING, Iterable, Iterator, List, Optional, Tuple
import numpy as np

from swarmer.core.agent import Swarmer
from swarmer.core.forces import FlockingConfig, compute_acceleration
from swarmer.core.geometry import Rectangle

if TYPE_CHECKING:
    from swarmer.environments.obstacles import Obstacle

logger = logging.getLogger(__name__)


class Swarm:
    """
    Ordered, fixed-membership collection of swarmers.

    The swarm is the only writer of its members' state.
    """

    def __init__(self, config: Optional[FlockingConfig] = None):
        self.config = config or FlockingConfig()
        self.config.validate()
        self._members: List[Swarmer] = []
        self.ticks = 0

    def add(self, swarmer: Swarmer) -> None:
        """Append to the end. Meant for initial population only."""
        self._members.append(swarmer)

    def iterate(self) -> Iterator[Swarmer]:
        """Members in insertion order."""
        return iter(tuple(self._members))

    def __iter__(self) -> Iterator[Swarmer]:
        return self.iterate()

    def __len__(self) -> int:
        return len(self._members)

    # ==================== Simulation ====================

    def snapshot(self) -> Tuple[np.ndarray, np.ndarray]:
        """Copy of all positions and velocities, each shaped (N, 2)."""
        if not self._members:
            return np.zeros((0, 2)), np.zeros((0, 2))
        positions = np.array([m.state.position for m in self._members])
        velocities = np.array([m.state.velocity for m in self._members])
        return positions, velocities

    def compute_accelerations(
        self,
        limits: Rectangle,
        obstacles: Iterable[Obstacle] = ()
    ) -> np.ndarray:
        """
        Acceleration for every member, from the current state.

        Read-only: results go into a fresh (N, 2) buffer.
        """
        obstacles = tuple(obstacles)
        positions, velocities = self.snapshot()
        accelerations = np.zeros_like(positions)
        for i in range(len(self._members)):
            accelerations[i] = compute_acceleration(
                i, positions, velocities, limits, self.config, obstacles
            )
        return accelerations

    def update(
        self,
        limits: Rectangle,
        dt: float,
        obstacles: Iterable[Obstacle] = ()
    ) -> None:
        """Advance every member by one tick of length dt."""
        obstacles = tuple(obstacles)

        # Phase 1: Look
        accelerations = self.compute_accelerations(limits, obstacles)

        # Phase 2: Move
        for swarmer, acceleration in zip(self._members, accelerations):
            swarmer._update(
                acceleration,
                limits,
                dt,
                min_speed=self.config.min_speed,
                max_speed=self.config.max_speed
            )

        self.ticks += 1
        logger.debug(f"Tick {self.ticks}: {len(self._members)} swarmers, dt={dt}")

    def __repr__(self) -> str:
        return f"Swarm(members={len(self._members)}, ticks={self.ticks})"
