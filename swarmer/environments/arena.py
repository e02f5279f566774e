"""
environments/arena.py

A walled, screen-sized field with a few trees and a lot of swarmers.

The arena is the host: it decides the size of the world and who lives
in it, then steps the swarm forward. It does not decide how they move.
"""

from __future__ import annotations
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union
import numpy as np
import yaml

from swarmer.core.agent import Swarmer
from swarmer.core.forces import FlockingConfig
from swarmer.core.geometry import Rectangle
from swarmer.core.swarm import Swarm
from swarmer.environments.obstacles import DEFAULT_OBSTACLES, Obstacle, build_obstacles

logger = logging.getLogger(__name__)


@dataclass
class ArenaConfig:
    """Construction-time parameters. Fixed for the life of an arena."""
    width: float = 1920.0                   # Arena extent, x
    height: float = 1080.0                  # Arena extent, y
    n_agents: int = 1500                    # Population, fixed once spawned
    spawn_margin: float = 10.0              # Keep spawns off the walls
    dt: float = 1.0                         # Default tick length
    seed: Optional[int] = None              # Spawn placement only
    obstacles: List[Tuple[float, float, float]] = field(
        default_factory=lambda: list(DEFAULT_OBSTACLES)
    )
    flocking: FlockingConfig = field(default_factory=FlockingConfig)

    def validate(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError(
                f"Arena dimensions must be positive, got {self.width}x{self.height}"
            )
        if isinstance(self.n_agents, bool) or not isinstance(self.n_agents, (int, np.integer)):
            raise ValueError(f"n_agents must be a whole number, got {self.n_agents!r}")
        if self.n_agents < 0:
            raise ValueError(f"n_agents must be non-negative, got {self.n_agents}")
        if self.spawn_margin < 0 or 2 * self.spawn_margin > min(self.width, self.height):
            raise ValueError(
                f"Spawn margin {self.spawn_margin} leaves no room in "
                f"{self.width}x{self.height}"
            )
        self.flocking.validate()

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ArenaConfig:
        known = {f.name for f in fields(cls)}
        unknown = set(data) - known
        if unknown:
            raise ValueError(f"Unknown arena parameters: {sorted(unknown)}")

        values = dict(data)
        if "flocking" in values:
            values["flocking"] = FlockingConfig.from_dict(values["flocking"] or {})
        if "obstacles" in values:
            values["obstacles"] = [tuple(o) for o in values["obstacles"] or []]
        return cls(**values)


def load_arena_config(config_path: Union[str, Path]) -> ArenaConfig:
    """Load an ArenaConfig from a YAML mapping."""
    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Arena config must be a mapping: {config_path}")

    return ArenaConfig.from_dict(data)


class Arena:
    """
    Walled 2D field hosting one swarm and a set of static obstacles.

    Features:
    - Rectangle bounds anchored at the origin
    - Seeded random spawn placement
    - Step-based simulation with a caller-chosen dt
    """

    def __init__(self, config: Optional[ArenaConfig] = None):
        self.config = config or ArenaConfig()
        self.config.validate()

        self.bounds = Rectangle.from_dimensions(self.config.width, self.config.height)
        self.obstacles: List[Obstacle] = build_obstacles(self.config.obstacles)
        self.swarm = Swarm(self.config.flocking)
        self.time = 0

        self._populate(np.random.default_rng(self.config.seed))

        logger.info(
            f"Arena {self.config.width:.0f}x{self.config.height:.0f}: "
            f"{len(self.swarm)} swarmers, {len(self.obstacles)} obstacles"
        )

    def _populate(self, rng: np.random.Generator) -> None:
        margin = self.config.spawn_margin
        for _ in range(self.config.n_agents):
            x = rng.uniform(margin, self.config.width - margin)
            y = rng.uniform(margin, self.config.height - margin)
            self.swarm.add(Swarmer(np.array([x, y])))

    def step(self, dt: Optional[float] = None) -> None:
        """Advance the swarm one tick."""
        tick = self.config.dt if dt is None else dt
        self.swarm.update(self.bounds, tick, self.obstacles)
        self.time += 1

    def get_positions(self) -> np.ndarray:
        """Positions of all swarmers, shape (N, 2)."""
        return self.swarm.snapshot()[0]

    def get_velocities(self) -> np.ndarray:
        """Velocities of all swarmers, shape (N, 2)."""
        return self.swarm.snapshot()[1]

    def __repr__(self) -> str:
        return (
            f"Arena(agents={len(self.swarm)}, "
            f"obstacles={len(self.obstacles)}, "
            f"time={self.time})"
        )
