"""
Tests for core/geometry.py
"""

import numpy as np
import pytest

from swarmer.core.geometry import (
    DEFAULT_HEADING,
    Range,
    Rectangle,
    clamp,
    normalize,
)


class TestRange:

    def test_valid_range(self):
        limits = Range(0.0, 10.0)
        assert limits.span == 10.0
        assert limits.contains(0.0)
        assert limits.contains(10.0)
        assert not limits.contains(10.5)

    def test_degenerate_range_allowed(self):
        limits = Range(3.0, 3.0)
        assert limits.span == 0.0

    def test_inverted_range_rejected(self):
        with pytest.raises(ValueError):
            Range(5.0, 1.0)

    def test_immutable(self):
        limits = Range(0.0, 1.0)
        with pytest.raises(AttributeError):
            limits.min = 2.0


class TestRectangle:

    def test_from_dimensions(self):
        rect = Rectangle.from_dimensions(1920, 1080)
        assert rect.xrange == Range(0.0, 1920.0)
        assert rect.yrange == Range(0.0, 1080.0)

    def test_contains_inclusive(self):
        rect = Rectangle.from_dimensions(10, 10)
        assert rect.contains(np.array([0.0, 10.0]))
        assert not rect.contains(np.array([-0.1, 5.0]))


class TestClamp:

    def test_below(self):
        assert clamp(-3.0, Range(0.0, 10.0)) == 0.0

    def test_above(self):
        assert clamp(12.0, Range(0.0, 10.0)) == 10.0

    def test_inside(self):
        assert clamp(4.5, Range(0.0, 10.0)) == 4.5


class TestNormalize:

    def test_unit_length(self):
        np.testing.assert_allclose(normalize(np.array([3.0, 4.0])), [0.6, 0.8])

    def test_zero_vector_falls_back(self):
        result = normalize(np.zeros(2))
        np.testing.assert_allclose(result, DEFAULT_HEADING)
        assert np.linalg.norm(result) == pytest.approx(1.0)

    def test_fallback_not_shared(self):
        """Mutating the fallback doesn't corrupt the constant."""
        result = normalize(np.zeros(2))
        result[0] = 42.0
        assert DEFAULT_HEADING[0] != 42.0
