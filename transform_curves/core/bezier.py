"""
One-dimensional Bezier curves of arbitrary degree.

Control values are evenly spaced sample heights along 0-1; the curve is
evaluated in the Bernstein basis using a row of Pascal's triangle as
weights:

    rowIndex 0 = [1]
    rowIndex 1 = [1, 1]
    rowIndex 2 = [1, 2, 1]
    rowIndex 3 = [1, 3, 3, 1]
    rowIndex 4 = [1, 4, 6, 4, 1]
"""

import logging
from functools import lru_cache
from typing import List, Sequence, Tuple

import numpy as np

from .algebra import lerp, power

logger = logging.getLogger(__name__)


@lru_cache(maxsize=128)
def _pascal_row(row_index: int) -> Tuple[int, ...]:
    row = [1]
    for k in range(1, row_index + 1):
        row = [1] + [row[i] + row[i - 1] for i in range(1, k)] + [1]
    logger.debug(f"Built Pascal row {row_index} ({len(row)} coefficients)")
    return tuple(row)


def pascal_row(row_index: int) -> List[int]:
    """
    Binomial coefficients C(row_index, 0..row_index).

    Rows are built bottom-up and cached per index. A negative index yields
    an empty list.
    """
    if row_index < 0:
        return []
    return list(_pascal_row(row_index))


def bezier(t: float, vals: Sequence[float]) -> float:
    """
    Value of the Bezier curve formed by ``vals`` at x=t.

    Args:
        t: Curve parameter, usually 0-1
        vals: Control values spaced evenly over [0, 1] inclusive

    Returns:
        Curve value at t

    Note:
        With two or fewer control values the values are ignored and the
        curve is the identity line (returns ``t``).
    """
    num_vals = len(vals)
    if num_vals <= 2:
        return lerp(t, 0.0, 1.0)

    s = 1.0 - t
    degree = num_vals - 1
    pas = pascal_row(degree)

    ret = 0.0
    for i in range(num_vals):
        ret += pas[i] * vals[i] * power(s, degree - i) * power(t, i)
    return ret


def normalized_bezier(t: float, mids: Sequence[float]) -> float:
    """
    Bezier curve pinned to (0, 0) and (1, 1).

    Args:
        t: Curve parameter, usually 0-1
        mids: Interior control values, evenly spaced between 0 and 1 exclusive

    Returns:
        Curve value at t; 0 when t=0 and 1 when t=1
    """
    return bezier(t, [0.0, *mids, 1.0])


def bezier_array(ts, vals: Sequence[float]) -> np.ndarray:
    """
    Evaluate ``bezier`` over an array of parameters.

    Returns:
        float64 array with the shape of ``ts``
    """
    ts = np.asarray(ts, dtype=np.float64)
    num_vals = len(vals)
    if num_vals <= 2:
        return ts.copy()

    degree = num_vals - 1
    pas = np.asarray(pascal_row(degree), dtype=np.float64)
    weights = pas * np.asarray(vals, dtype=np.float64)
    i = np.arange(num_vals)

    flat = ts.reshape(-1, 1)
    terms = weights * (1.0 - flat) ** (degree - i) * flat ** i
    return terms.sum(axis=1).reshape(ts.shape)


def normalized_bezier_array(ts, mids: Sequence[float]) -> np.ndarray:
    """Evaluate ``normalized_bezier`` over an array of parameters."""
    return bezier_array(ts, [0.0, *mids, 1.0])


__all__ = [
    "pascal_row",
    "bezier",
    "normalized_bezier",
    "bezier_array",
    "normalized_bezier_array",
]
