"""
Exception hierarchy for transform curves.

Curve math never raises; only curve configuration and preset lookup do.
"""

from typing import Any, Dict, Optional


class TransformError(Exception):
    """Base exception for transform curve errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            detail_str = ", ".join(f"{k}={v!r}" for k, v in self.details.items())
            return f"{self.message} ({detail_str})"
        return self.message


class CurveConfigError(TransformError, ValueError):
    """Invalid field in a curve configuration."""

    def __init__(self, message: str, field=None, value=None, **kwargs):
        details = kwargs.copy()
        if field:
            details["field"] = field
            details["value"] = value
        super().__init__(message, details)


class UnknownCurveError(TransformError, KeyError):
    """Requested curve preset does not exist."""

    def __init__(self, name: str, **kwargs):
        details = kwargs.copy()
        details["name"] = name
        super().__init__(f"Unknown curve preset: {name}", details)


__all__ = [
    "TransformError",
    "CurveConfigError",
    "UnknownCurveError",
]
