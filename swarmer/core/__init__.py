"""
Core components of the flocking engine.

- geometry: Range, Rectangle, clamp
- agent: The Swarmer - position and velocity, nothing more
- forces: Repulsion, attraction, alignment, walls
- swarm: Two-phase tick over the whole flock
"""

from .geometry import Range, Rectangle, clamp, normalize
from .agent import Swarmer, SwarmerState
from .forces import FlockingConfig
from .swarm import Swarm

__all__ = [
    "Range",
    "Rectangle",
    "clamp",
    "normalize",
    "Swarmer",
    "SwarmerState",
    "FlockingConfig",
    "Swarm",
]
