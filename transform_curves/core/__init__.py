"""
Core curve math - primitive algebra, power curves, Bezier curves, lines.
"""

from .algebra import (
    clamp01,
    mix,
    crossfade,
    flip,
    square,
    scale,
    lin_eq,
    lerp,
    inverse_lerp,
    power,
    absolute,
    clamp_min,
    clamp_max,
    sine,
)

from .power_curves import (
    CurveFamily,
    CURVE_FAMILIES,
    smooth_start,
    smooth_stop,
    smooth_step,
    arch,
    split_power,
    curve_by_integer_power,
    curve_by_real_power,
    smooth_start_x,
    smooth_stop_x,
    smooth_step_x,
    arch_x,
)

from .bezier import (
    pascal_row,
    bezier,
    normalized_bezier,
    bezier_array,
    normalized_bezier_array,
)

from .lines import (
    Point,
    line_through_points,
    line_from_zero,
    line_to_one,
)

__all__ = [
    # Algebra
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
    # Power curves
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
    # Bezier
    "pascal_row",
    "bezier",
    "normalized_bezier",
    "bezier_array",
    "normalized_bezier_array",
    # Lines
    "Point",
    "line_through_points",
    "line_from_zero",
    "line_to_one",
]
