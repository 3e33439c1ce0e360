"""Small angle and number helpers shared by the codecs and projections."""

from __future__ import annotations

import math


def ang_normalize(x: float) -> float:
    """
    Reduce an angle in degrees to the range [-180, 180).

    math.fmod is exact, so tiny negative angles stay tiny and negative.

    Args:
        x: Angle in degrees

    Returns:
        The equivalent angle in [-180, 180), or NaN for a non-finite input
    """
    if not math.isfinite(x):
        return math.nan
    y = math.fmod(x, 360.0)
    if y >= 180.0:
        y -= 360.0
    elif y < -180.0:
        y += 360.0
    return y


def is_finite_pair(a: float, b: float) -> bool:
    """Return True when both values are finite numbers."""
    return math.isfinite(a) and math.isfinite(b)
