"""
Tests for line helpers.

Run with: pytest tests/test_lines.py -v
"""

import math

import pytest

from transform_curves.core.lines import line_from_zero, line_through_points, line_to_one


class TestLineThroughPoints:
    """Lines from two points."""

    def test_identity_line(self):
        assert line_through_points(0.5, (0, 0), (1, 1)) == 0.5

    def test_slope_and_intercept(self):
        # y = 2x + 1
        assert line_through_points(3.0, (0.0, 1.0), (1.0, 3.0)) == pytest.approx(7.0)

    def test_extrapolates_outside_unit_range(self):
        assert line_through_points(-1.0, (0, 0), (1, 1)) == pytest.approx(-1.0)
        assert line_through_points(2.0, (0, 0), (1, 1)) == pytest.approx(2.0)

    def test_point_order_does_not_matter(self):
        a, b = (0.2, 0.7), (0.9, 0.1)
        assert line_through_points(0.4, a, b) == pytest.approx(line_through_points(0.4, b, a))

    def test_returns_python_float(self):
        assert type(line_through_points(0.5, (0, 0), (1, 1))) is float

    def test_vertical_line_is_not_finite(self):
        """Shared x-coordinates yield inf/nan instead of raising."""
        result = line_through_points(0.5, (0.3, 0.0), (0.3, 1.0))
        assert not math.isfinite(result)

    def test_coincident_points_are_nan(self):
        assert math.isnan(line_through_points(0.5, (0.3, 0.4), (0.3, 0.4)))


class TestAnchoredLines:
    """Lines fixed through (0, 0) or (1, 1)."""

    def test_line_from_zero(self):
        assert line_from_zero(0.5, (1.0, 2.0)) == pytest.approx(1.0)
        assert line_from_zero(0.0, (0.4, 0.8)) == pytest.approx(0.0)

    def test_line_to_one(self):
        assert line_to_one(1.0, (0.5, 0.0)) == pytest.approx(1.0)
        assert line_to_one(0.5, (0.5, 0.0)) == pytest.approx(0.0)
        assert line_to_one(0.75, (0.5, 0.0)) == pytest.approx(0.5)

    def test_line_to_one_from_one_is_not_finite(self):
        assert not math.isfinite(line_to_one(0.5, (1.0, 0.5)))
