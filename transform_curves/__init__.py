"""
Transform curves - easing curves over 0-1 and 1D Bezier evaluation.

Stateless curve functions for animation and procedural generation:
power-based ease in/out/in-out and arch curves with real-valued
sharpness, plus Bezier curves of any degree.

Usage:
    from transform_curves import smooth_step_x, normalized_bezier, apply_curve

    # Ease in-out with sharpness between quadratic and cubic
    y = smooth_step_x(0.3, 2.5)

    # Bezier through (0,0) and (1,1) with two interior control values
    y = normalized_bezier(0.3, [0.1, 0.9])

    # Named preset
    y = apply_curve(0.3, "easeOutCubic")
"""

from .core import (
    # Algebra
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
    # Power curves
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
    # Bezier
    pascal_row,
    bezier,
    normalized_bezier,
    bezier_array,
    normalized_bezier_array,
    # Lines
    Point,
    line_through_points,
    line_from_zero,
    line_to_one,
)

from .presets import (
    CurveConfig,
    CURVE_PRESETS,
    list_curves,
    get_curve,
    apply_curve,
    apply_curve_to_range,
)

from .exceptions import (
    TransformError,
    CurveConfigError,
    UnknownCurveError,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Core - Algebra
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
    # Core - Power curves
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
    # Core - Bezier
    "pascal_row",
    "bezier",
    "normalized_bezier",
    "bezier_array",
    "normalized_bezier_array",
    # Core - Lines
    "Point",
    "line_through_points",
    "line_from_zero",
    "line_to_one",
    # Presets
    "CurveConfig",
    "CURVE_PRESETS",
    "list_curves",
    "get_curve",
    "apply_curve",
    "apply_curve_to_range",
    # Exceptions
    "TransformError",
    "CurveConfigError",
    "UnknownCurveError",
]
