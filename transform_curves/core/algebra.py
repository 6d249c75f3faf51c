"""
Primitive algebra for curve evaluation.

Small scalar helpers shared by the power-curve and Bezier modules.
Arguments named ``t`` are interpolants, usually within 0-1.
"""

import numpy as np


def clamp01(b_mult: float) -> float:
    """Saturate a blend weight into the 0-1 range."""
    if b_mult > 1.0:
        return 1.0
    if b_mult < 0.0:
        return 0.0
    return b_mult


def mix(a: float, b: float, b_mult: float) -> float:
    """
    Blend two values, applying ``b_mult`` to ``b`` and ``1 - b_mult`` to ``a``.

    Args:
        a: Value returned when the weight is 0
        b: Value returned when the weight is 1
        b_mult: Blend weight, clamped to 0-1 (never rejected)

    Returns:
        Weighted blend of a and b
    """
    b_mult = clamp01(b_mult)
    return (1.0 - b_mult) * a + b_mult * b


def crossfade(a: float, b: float, t: float) -> float:
    """Fade from ``a`` (t=0) to ``b`` (t=1)."""
    return mix(a, b, t)


def flip(t: float) -> float:
    return 1.0 - t


def square(t: float) -> float:
    return t * t


def scale(t: float, a: float) -> float:
    return t * a


def lin_eq(x: float, m: float, b: float) -> float:
    """Evaluate the linear equation ``m*x + b``."""
    return m * x + b


def lerp(t: float, lo: float, hi: float) -> float:
    """Unclamped linear interpolation from ``lo`` (t=0) to ``hi`` (t=1)."""
    return lo + (hi - lo) * t


def inverse_lerp(a: float, lo: float, hi: float) -> float:
    """
    Fraction of the way ``a`` sits between ``lo`` and ``hi``.

    Values outside the range map outside 0-1. When ``lo == hi`` every
    input maps to ``hi``.
    """
    if lo == hi:
        return hi
    return (a - lo) / (hi - lo)


def power(t: float, x: int) -> float:
    """
    Multiply ``t`` by itself ``x`` times.

    ``x == 0`` yields 1 for any base, including 0.
    """
    if x == 0:
        return 1.0

    result = t
    while x > 1:
        result *= t
        x -= 1
    return result


def absolute(a: float) -> float:
    if a < 0:
        return -a
    return a


def clamp_min(t: float, x: float) -> float:
    """Never return less than ``x``."""
    if t < x:
        return x
    return t


def clamp_max(t: float, x: float) -> float:
    """Never return more than ``x``."""
    if t > x:
        return x
    return t


def sine(
    t: float,
    x_offset: float = 0.0,
    magnitude: float = 0.5,
    midline: float = 0.5,
) -> float:
    """
    Sine wave with one full period per unit of ``t``.

    Args:
        t: Input value, one period spans 0-1
        x_offset: Phase offset in periods
        magnitude: Peak deviation from the midline
        midline: Center value between peaks and troughs

    Returns:
        Wave value at t (0.5 -> 1.0 -> 0.5 -> 0.0 -> 0.5 with defaults)
    """
    return float(np.sin(2.0 * np.pi * (t + x_offset)) * magnitude + midline)


__all__ = [
    "clamp01",
    "mix",
    "crossfade",
    "flip",
    "square",
    "scale",
    "lin_eq",
    "lerp",
    "inverse_lerp",
    "power",
    "absolute",
    "clamp_min",
    "clamp_max",
    "sine",
]
