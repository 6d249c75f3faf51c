"""
Power-based easing families with integer and real exponents.

Each family has an integer-exponent base case. Real exponents are handled
by blending the curves at the two bracketing whole exponents, so sharpness
can vary continuously:

    smooth_start_x(t, 2.5) == mix(smooth_start(t, 2), smooth_start(t, 3), 0.5)
"""

import math
from enum import Enum
from typing import Callable, Dict, Tuple, Union

from .algebra import crossfade, flip, mix, power


class CurveFamily(Enum):
    """Power curve families."""
    SMOOTH_START = "smooth_start"   # ease in
    SMOOTH_STOP = "smooth_stop"     # ease out
    SMOOTH_STEP = "smooth_step"     # ease in-out
    ARCH = "arch"                   # 0 at both ends, 1 at t=0.5


IntegerCurve = Callable[[float, int], float]


def smooth_start(t: float, n: int) -> float:
    """Slow at low ``t``, accelerating towards 1 (``t^n``)."""
    return power(t, n)


def smooth_stop(t: float, n: int) -> float:
    """Fast at low ``t``, settling towards 1 (``1 - (1-t)^n``)."""
    return flip(power(flip(t), n))


def smooth_step(t: float, n: int) -> float:
    """Slow near 0 and 1, fastest around 0.5."""
    return crossfade(smooth_start(t, n), smooth_stop(t, n), t)


def arch(t: float, n: int) -> float:
    """Zero at t=0 and t=1, peaking at 1 when t=0.5."""
    return power(4 * t * flip(t), n)


CURVE_FAMILIES: Dict[CurveFamily, IntegerCurve] = {
    CurveFamily.SMOOTH_START: smooth_start,
    CurveFamily.SMOOTH_STOP: smooth_stop,
    CurveFamily.SMOOTH_STEP: smooth_step,
    CurveFamily.ARCH: arch,
}


def split_power(pow_: float) -> Tuple[int, float]:
    """
    Split a real exponent into its floor and fractional remainder.

    Returns:
        (whole, fraction) with fraction in [0, 1)
    """
    whole = int(math.floor(pow_))
    return whole, pow_ - whole


def _resolve(family: Union[CurveFamily, str, IntegerCurve]) -> IntegerCurve:
    if callable(family):
        return family
    if isinstance(family, str):
        family = CurveFamily(family)
    return CURVE_FAMILIES[family]


def curve_by_integer_power(
    t: float,
    n: int,
    family: Union[CurveFamily, str, IntegerCurve] = CurveFamily.SMOOTH_START,
) -> float:
    """
    Evaluate a curve family at a whole exponent.

    Args:
        t: Input value 0-1
        n: Exponent, >= 0
        family: CurveFamily, its string value, or a callable f(t, n)

    Returns:
        Curve value at t
    """
    return _resolve(family)(t, n)


def curve_by_real_power(
    t: float,
    pow_: float,
    family: Union[CurveFamily, str, IntegerCurve] = CurveFamily.SMOOTH_START,
) -> float:
    """
    Evaluate a curve family at a real exponent.

    The curves at floor(pow_) and floor(pow_)+1 are blended using the
    fractional part of the exponent as the weight. A whole-valued exponent
    gives exactly the integer curve.

    Args:
        t: Input value 0-1
        pow_: Exponent, >= 0. Higher values give more dramatic curves
        family: CurveFamily, its string value, or a callable f(t, n)

    Returns:
        Curve value at t
    """
    func = _resolve(family)
    whole, fraction = split_power(pow_)
    return mix(func(t, whole), func(t, whole + 1), fraction)


def smooth_start_x(t: float, pow_: float) -> float:
    return curve_by_real_power(t, pow_, smooth_start)


def smooth_stop_x(t: float, pow_: float) -> float:
    return curve_by_real_power(t, pow_, smooth_stop)


def smooth_step_x(t: float, pow_: float) -> float:
    return curve_by_real_power(t, pow_, smooth_step)


def arch_x(t: float, pow_: float) -> float:
    return curve_by_real_power(t, pow_, arch)


__all__ = [
    "CurveFamily",
    "CURVE_FAMILIES",
    "smooth_start",
    "smooth_stop",
    "smooth_step",
    "arch",
    "split_power",
    "curve_by_integer_power",
    "curve_by_real_power",
    "smooth_start_x",
    "smooth_stop_x",
    "smooth_step_x",
    "arch_x",
]
