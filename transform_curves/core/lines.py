"""
Straight lines through known points.

Points are ``(x, y)`` tuples. Lines are not limited to the 0-1 domain.
"""

from typing import Tuple

import numpy as np

from .algebra import lin_eq

Point = Tuple[float, float]


def line_through_points(t: float, point_a: Point, point_b: Point) -> float:
    """
    Evaluate the line through ``point_a`` and ``point_b`` at x=t.

    Args:
        t: Value plugged in as x
        point_a: One point on the line
        point_b: The other point on the line

    Returns:
        y at x=t. Points sharing an x-coordinate give inf or nan
    """
    (x1, y1), (x2, y2) = point_a, point_b
    with np.errstate(divide="ignore", invalid="ignore"):
        m = np.float64(y2 - y1) / np.float64(x2 - x1)
        b = y1 - m * x1
        return float(lin_eq(t, m, b))


def line_from_zero(t: float, point: Point) -> float:
    """Line through (0, 0) and ``point``."""
    return line_through_points(t, (0.0, 0.0), point)


def line_to_one(t: float, point: Point) -> float:
    """Line through ``point`` and (1, 1)."""
    return line_through_points(t, point, (1.0, 1.0))


__all__ = [
    "Point",
    "line_through_points",
    "line_from_zero",
    "line_to_one",
]
