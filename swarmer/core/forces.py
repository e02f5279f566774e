"""
core/forces.py

Four forces make a flock:
- Repulsion: don't collide
- Attraction: don't stray
- Alignment: go where the neighbors go
- Walls: stay in the box

Each is a pure function of one agent and a snapshot of everyone.
Nothing here mutates a swarmer.
"""

from __future__ import annotations
from dataclasses import dataclass, asdict
from typing import TYPE_CHECKING, Any, Dict, Iterable, Tuple
import numpy as np

from swarmer.core.agent import MIN_SPEED, MAX_SPEED
from swarmer.core.geometry import Range, Rectangle, normalize

if TYPE_CHECKING:
    from swarmer.environments.obstacles import Obstacle


REPULSION_RANGE = 8.0
ATTRACTION_RANGE = 40.0
WALL_REPULSION_RANGE = 200.0

# Below this, two agents are treated as the same point (and as self).
COINCIDENCE_DISTANCE = 0.001
# Keeps wall repulsion finite at the wall itself.
WALL_OFFSET = 0.01

REPULSION_FACTOR = 0.05
ATTRACTION_FACTOR = 0.0005
ALIGNMENT_FACTOR = 0.05
WALL_REPULSION_FACTOR = 2.0
OBSTACLE_REPULSION_FACTOR = 2.0


@dataclass
class FlockingConfig:
    """
    The tunable behavior of a flock.

    Defaults are the module constants; override per swarm.
    """
    repulsion_range: float = REPULSION_RANGE
    attraction_range: float = ATTRACTION_RANGE
    wall_repulsion_range: float = WALL_REPULSION_RANGE
    repulsion_factor: float = REPULSION_FACTOR
    attraction_factor: float = ATTRACTION_FACTOR
    alignment_factor: float = ALIGNMENT_FACTOR
    wall_repulsion_factor: float = WALL_REPULSION_FACTOR
    obstacle_repulsion_factor: float = OBSTACLE_REPULSION_FACTOR
    min_speed: float = MIN_SPEED
    max_speed: float = MAX_SPEED

    def validate(self) -> None:
        if self.min_speed < 0 or self.min_speed > self.max_speed:
            raise ValueError(
                f"Invalid speed limits: [{self.min_speed}, {self.max_speed}]"
            )
        for name in ("repulsion_range", "attraction_range", "wall_repulsion_range"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FlockingConfig:
        unknown = set(data) - set(cls.__dataclass_fields__)
        if unknown:
            raise ValueError(f"Unknown flocking parameters: {sorted(unknown)}")
        return cls(**{k: float(v) for k, v in data.items()})


@dataclass
class Neighborhood:
    """Boolean masks over the snapshot: who pushes, who pulls."""
    repulsors: np.ndarray
    attractors: np.ndarray


# ==================== Classification ====================

def compute_distances(position: np.ndarray, positions: np.ndarray) -> np.ndarray:
    """Distance from position to every row of positions."""
    return np.linalg.norm(positions - position, axis=1)


def classify_neighbors(
    distances: np.ndarray,
    config: FlockingConfig
) -> Neighborhood:
    """
    Split the flock by distance.

    Repulsors exclude self (distance 0) and near-coincident agents.
    Attractors include self, so the attractor set is never empty.
    """
    repulsors = (distances > COINCIDENCE_DISTANCE) & (distances < config.repulsion_range)
    attractors = distances < config.attraction_range
    return Neighborhood(repulsors=repulsors, attractors=attractors)


# ==================== Sub-forces ====================

def repulsion_force(position: np.ndarray, repulsor_positions: np.ndarray) -> np.ndarray:
    """Unit push away from each repulsor, summed. Distance inside the range is ignored."""
    force = np.zeros(2)
    for other in repulsor_positions:
        force += normalize(position - other)
    return force


def attraction_force(position: np.ndarray, attractor_positions: np.ndarray) -> np.ndarray:
    """Steer toward the local centroid."""
    if len(attractor_positions) == 0:
        return np.zeros(2)
    return attractor_positions.mean(axis=0) - position


def alignment_force(velocity: np.ndarray, attractor_velocities: np.ndarray) -> np.ndarray:
    """Steer toward the local average velocity."""
    if len(attractor_velocities) == 0:
        return np.zeros(2)
    return attractor_velocities.mean(axis=0) - velocity


def _axis_wall_repulsion(value: float, limits: Range, reach: float) -> float:
    # Near-min wins over near-max when the arena is narrower than 2 * reach.
    to_min = max(value - limits.min, 0.0)
    to_max = max(limits.max - value, 0.0)
    if to_min < reach:
        return 1.0 / (WALL_OFFSET + to_min)
    elif to_max < reach:
        return -1.0 / (WALL_OFFSET + to_max)
    return 0.0


def wall_repulsion_force(
    position: np.ndarray,
    limits: Rectangle,
    reach: float = WALL_REPULSION_RANGE
) -> np.ndarray:
    """Per-axis push away from whichever wall is within reach."""
    return np.array([
        _axis_wall_repulsion(position[0], limits.xrange, reach),
        _axis_wall_repulsion(position[1], limits.yrange, reach),
    ])


def obstacle_repulsion(position: np.ndarray, obstacles: Iterable[Obstacle]) -> np.ndarray:
    """Sum of every obstacle's push on a point."""
    force = np.zeros(2)
    for obstacle in obstacles:
        force += obstacle.get_repulsion_vector(position)
    return force


# ==================== Composition ====================

def compute_forces(
    index: int,
    positions: np.ndarray,
    velocities: np.ndarray,
    limits: Rectangle,
    config: FlockingConfig
) -> Tuple[np.ndarray, np.ndarray, np.ndarray, np.ndarray]:
    """
    Unweighted (repulsion, attraction, alignment, wall) for agent `index`.

    positions and velocities are the (N, 2) pre-tick snapshot, self included.
    """
    position = positions[index]
    velocity = velocities[index]

    distances = compute_distances(position, positions)
    hood = classify_neighbors(distances, config)

    return (
        repulsion_force(position, positions[hood.repulsors]),
        attraction_force(position, positions[hood.attractors]),
        alignment_force(velocity, velocities[hood.attractors]),
        wall_repulsion_force(position, limits, config.wall_repulsion_range),
    )


def compute_acceleration(
    index: int,
    positions: np.ndarray,
    velocities: np.ndarray,
    limits: Rectangle,
    config: FlockingConfig,
    obstacles: Iterable[Obstacle] = ()
) -> np.ndarray:
    """Weighted sum of the flocking forces plus obstacle repulsion."""
    repulsion, attraction, alignment, wall = compute_forces(
        index, positions, velocities, limits, config
    )
    acceleration = (
        config.repulsion_factor * repulsion
        + config.attraction_factor * attraction
        + config.alignment_factor * alignment
        + config.wall_repulsion_factor * wall
    )
    obstacle_force = obstacle_repulsion(positions[index], obstacles)
    return acceleration + config.obstacle_repulsion_factor * obstacle_force
