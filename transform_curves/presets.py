"""
Declarative curve configuration and named presets.

A CurveConfig describes one easing curve (family, sharpness, and Bezier
control values) and can be evaluated, sampled, or converted to a plain dict.

Usage:
    from transform_curves import CurveConfig, apply_curve

    config = CurveConfig(family="smooth_stop", power=2.5)
    config.evaluate(0.25)

    apply_curve(0.25, "easeInOutCubic")
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List

import numpy as np

from .core import CurveFamily, curve_by_real_power, normalized_bezier, normalized_bezier_array
from .exceptions import CurveConfigError, UnknownCurveError

logger = logging.getLogger(__name__)

LINEAR = "linear"
BEZIER = "bezier"

FAMILY_NAMES = {f.value for f in CurveFamily} | {LINEAR, BEZIER}


@dataclass
class CurveConfig:
    """
    Single curve description.

    Attributes:
        family: "linear", "bezier", or a CurveFamily value
        power: Sharpness for power families, real and >= 0
        controls: Interior control values for "bezier" (ends pinned to 0 and 1)
    """
    family: str = CurveFamily.SMOOTH_STEP.value
    power: float = 2.0
    controls: List[float] = field(default_factory=list)

    def __post_init__(self):
        if isinstance(self.family, CurveFamily):
            self.family = self.family.value
        if self.family not in FAMILY_NAMES:
            raise CurveConfigError(
                f"Unknown curve family: {self.family}",
                field="family", value=self.family,
            )
        if self.power < 0:
            raise CurveConfigError(
                "Curve power must be >= 0",
                field="power", value=self.power,
            )
        self.controls = [float(v) for v in self.controls]

    def evaluate(self, t: float) -> float:
        """Curve value at t."""
        if self.family == LINEAR:
            return t
        if self.family == BEZIER:
            return normalized_bezier(t, self.controls)
        return curve_by_real_power(t, self.power, self.family)

    def sample(self, num_samples: int = 64) -> np.ndarray:
        """
        Curve values at evenly spaced points over 0-1 inclusive.

        Returns:
            Array of num_samples values
        """
        ts = np.linspace(0.0, 1.0, num_samples)
        if self.family == BEZIER:
            return normalized_bezier_array(ts, self.controls)
        return np.array([self.evaluate(t) for t in ts], dtype=np.float64)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to JSON-serializable dict."""
        return {
            "family": self.family,
            "power": self.power,
            "controls": list(self.controls),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CurveConfig':
        """Create from dict."""
        return cls(
            family=data.get("family", CurveFamily.SMOOTH_STEP.value),
            power=data.get("power", 2.0),
            controls=data.get("controls", []),
        )


# ============================================================================
# CURVE PRESETS
# ============================================================================

CURVE_PRESETS: Dict[str, CurveConfig] = {
    "linear": CurveConfig(LINEAR),

    # Quadratic
    "easeIn": CurveConfig("smooth_start", 2),
    "easeOut": CurveConfig("smooth_stop", 2),
    "easeInOut": CurveConfig("smooth_step", 2),

    # Cubic
    "easeInCubic": CurveConfig("smooth_start", 3),
    "easeOutCubic": CurveConfig("smooth_stop", 3),
    "easeInOutCubic": CurveConfig("smooth_step", 3),

    # Quart
    "easeInQuart": CurveConfig("smooth_start", 4),
    "easeOutQuart": CurveConfig("smooth_stop", 4),
    "easeInOutQuart": CurveConfig("smooth_step", 4),

    # In-between sharpness
    "easeInSoft": CurveConfig("smooth_start", 1.5),
    "easeOutSoft": CurveConfig("smooth_stop", 1.5),

    # Arches (0 -> 1 -> 0)
    "arch": CurveConfig("arch", 1),
    "archSharp": CurveConfig("arch", 2.5),

    # Bezier shapes
    "hump": CurveConfig(BEZIER, controls=[1.0, 1.0]),
    "sCurve": CurveConfig(BEZIER, controls=[0.0, 1.0]),
    "anticipate": CurveConfig(BEZIER, controls=[-0.4, 0.2, 1.0]),
    "overshoot": CurveConfig(BEZIER, controls=[0.0, 1.0, 1.4]),
}


def list_curves() -> list:
    """Get list of available curve preset names."""
    return sorted(CURVE_PRESETS.keys())


def get_curve(name: str) -> CurveConfig:
    """Get a curve preset by name."""
    try:
        return CURVE_PRESETS[name]
    except KeyError:
        raise UnknownCurveError(name) from None


def apply_curve(t: float, name: str) -> float:
    """
    Apply a named curve preset.

    Args:
        t: Input value 0-1
        name: Name of curve preset

    Returns:
        Curved value; unknown names fall back to linear
    """
    config = CURVE_PRESETS.get(name)
    if config is None:
        logger.warning(f"Unknown curve preset '{name}', using linear")
        return t
    return config.evaluate(t)


def apply_curve_to_range(
    t: float,
    from_val: float,
    to_val: float,
    name: str = "linear"
) -> float:
    """
    Apply a curve preset to interpolate between two values.

    Args:
        t: Progress 0-1
        from_val: Start value
        to_val: End value
        name: Curve preset name

    Returns:
        Curved interpolated value
    """
    curved_t = apply_curve(t, name)
    return from_val + (to_val - from_val) * curved_t


__all__ = [
    "CurveConfig",
    "CURVE_PRESETS",
    "FAMILY_NAMES",
    "list_curves",
    "get_curve",
    "apply_curve",
    "apply_curve_to_range",
]
