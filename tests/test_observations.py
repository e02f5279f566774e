"""
Tests for observations/

Shapes, metrics, and the renderer.
"""

import numpy as np
import pytest

from swarmer.environments.arena import Arena, ArenaConfig
from swarmer.observations.metrics import (
    cohesion,
    min_separation,
    polarization,
    speed_range,
)
from swarmer.observations.shapes import Arrow, arrow_vertices


class TestShapes:

    def test_arrow_defaults(self):
        arrow = Arrow(position=np.zeros(2), direction=np.array([1.0, 0.0]))
        assert arrow.length == 6.0
        assert arrow.width == 3.0

    def test_arrow_vertices(self):
        arrow = Arrow(position=np.zeros(2), direction=np.array([1.0, 0.0]))
        vertices = arrow_vertices(arrow)

        assert vertices.shape == (3, 2)
        np.testing.assert_allclose(vertices[0], [6.0, 0.0])
        np.testing.assert_allclose(vertices[1], [-6.0, -3.0])
        np.testing.assert_allclose(vertices[2], [-6.0, 3.0])


class TestMetrics:

    def test_cohesion(self):
        assert cohesion(np.array([[0.0, 0.0], [2.0, 0.0]])) == pytest.approx(1.0)
        assert cohesion(np.zeros((0, 2))) == 0.0

    def test_polarization_aligned(self):
        velocities = np.array([[3.0, 0.0], [5.0, 0.0], [4.0, 0.0]])
        assert polarization(velocities) == pytest.approx(1.0)

    def test_polarization_opposed(self):
        velocities = np.array([[3.0, 0.0], [-5.0, 0.0]])
        assert polarization(velocities) == pytest.approx(0.0)

    def test_polarization_ignores_still_agents(self):
        velocities = np.array([[0.0, 0.0], [0.0, 4.0]])
        assert polarization(velocities) == pytest.approx(1.0)
        assert polarization(np.zeros((2, 2))) == 0.0

    def test_min_separation(self):
        positions = np.array([[0.0, 0.0], [10.0, 0.0], [0.0, 3.0]])
        assert min_separation(positions) == pytest.approx(3.0)
        assert min_separation(positions[:1]) == float("inf")

    def test_speed_range(self):
        velocities = np.array([[3.0, 4.0], [0.0, 3.0]])
        assert speed_range(velocities) == (pytest.approx(3.0), pytest.approx(5.0))
        assert speed_range(np.zeros((0, 2))) == (0.0, 0.0)


class TestVisualizer:

    def test_render_and_save(self, tmp_path):
        matplotlib = pytest.importorskip("matplotlib")
        matplotlib.use("Agg")
        from swarmer.observations.visualize import SwarmVisualizer

        arena = Arena(ArenaConfig(
            width=200.0, height=100.0, n_agents=5, seed=0,
            obstacles=[(100.0, 50.0, 20.0)]
        ))
        viz = SwarmVisualizer(arena, figsize=(4, 2))
        try:
            arena.step()
            viz.render(pause=0)
            # One circle for the tree, one triangle per swarmer
            assert len(viz._ax.patches) == 6

            path = tmp_path / "frame.png"
            viz.save_frame(str(path))
            assert path.exists()
        finally:
            viz.close()
