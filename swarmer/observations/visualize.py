"""
observations/visualize.py

Watch the flock.

Arrows for swarmers, circles for trees, a grey field behind them.
"""

from __future__ import annotations
from typing import Optional, TYPE_CHECKING

from swarmer.observations.shapes import Arrow, Circle, Shape, arrow_vertices

if TYPE_CHECKING:
    from swarmer.environments.arena import Arena


BACKGROUND = '#505050'
SWARMER_COLOR = '#e62937'
TREE_COLOR = '#006400'


class SwarmVisualizer:
    """
    matplotlib view of an arena.

    Draws whatever each object reports from get_shape().
    """

    def __init__(self, arena: Arena, figsize: tuple = (16, 9)):
        self.arena = arena
        self.figsize = figsize

        # Lazy import matplotlib
        self._plt = None
        self._fig = None
        self._ax = None

    def _setup_plot(self):
        """Initialize matplotlib figure."""
        import matplotlib.pyplot as plt
        self._plt = plt

        self._fig, self._ax = plt.subplots(figsize=self.figsize)
        self._fig.patch.set_facecolor(BACKGROUND)

    def _reset_axes(self) -> None:
        bounds = self.arena.bounds
        self._ax.clear()
        self._ax.set_xlim(bounds.xrange.min, bounds.xrange.max)
        # Screen coordinates: y grows downward
        self._ax.set_ylim(bounds.yrange.max, bounds.yrange.min)
        self._ax.set_aspect('equal')
        self._ax.set_facecolor(BACKGROUND)

    def render(self, pause: float = 0.001) -> None:
        """Draw the current state of the arena."""
        if self._plt is None:
            self._setup_plot()

        self._reset_axes()

        for obstacle in self.arena.obstacles:
            self._draw(obstacle.get_shape())
        for swarmer in self.arena.swarm.iterate():
            self._draw(swarmer.get_shape())

        self._ax.set_title(
            f"Time: {self.arena.time} | Swarmers: {len(self.arena.swarm)}",
            color='white', fontsize=12
        )

        if pause > 0:
            self._plt.pause(pause)

    def _draw(self, shape: Shape) -> None:
        from matplotlib.patches import Circle as CirclePatch, Polygon

        if isinstance(shape, Arrow):
            self._ax.add_patch(Polygon(arrow_vertices(shape), closed=True, color=SWARMER_COLOR))
        elif isinstance(shape, Circle):
            self._ax.add_patch(CirclePatch(
                (shape.position[0], shape.position[1]),
                0.5 * shape.diameter,
                color=TREE_COLOR
            ))

    def save_frame(self, path: str) -> None:
        """Save current frame to file."""
        if self._fig is not None:
            self._fig.savefig(path, dpi=100, facecolor=self._fig.get_facecolor())

    def close(self) -> None:
        """Close the visualization."""
        if self._plt is not None:
            self._plt.close(self._fig)


def animate_study(
    arena: Arena,
    steps: int = 100,
    save_path: Optional[str] = None
) -> None:
    """Run and animate an arena for a number of ticks."""
    viz = SwarmVisualizer(arena)

    try:
        for _ in range(steps):
            arena.step()
            viz.render()

        if save_path:
            viz.save_frame(save_path)

    finally:
        viz.close()
