"""
Swarmer: a 2D boids flock in a walled arena.

Local repulsion, attraction and alignment, plus walls and trees,
integrated in lockstep so no swarmer ever sees another's future.
"""

__version__ = "0.1.0"
