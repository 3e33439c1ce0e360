"""Geodesic engine construction for ellipsoids named the PROJ way."""

from __future__ import annotations

import logging

from geographiclib.geodesic import Geodesic
from pyproj import Geod

from geoproj_lib.core.exceptions import ProjectionError

logger = logging.getLogger(__name__)

DEFAULT_ELLPS = "WGS84"


def geodesic_from_ellps(ellps: str = DEFAULT_ELLPS) -> Geodesic:
    """
    Create a geodesic engine for a named ellipsoid.

    Args:
        ellps: PROJ ellipsoid name, e.g. "WGS84", "GRS80", "krass"

    Returns:
        A geographiclib Geodesic for the ellipsoid

    Raises:
        ProjectionError: If the ellipsoid is unknown or degenerate
    """
    try:
        geod = Geod(ellps=ellps)
        earth = Geodesic(geod.a, geod.f)
    except Exception as e:
        raise ProjectionError(f"Failed to create geodesic for ellipsoid {ellps!r}: {e}") from e
    logger.debug("Resolved ellipsoid %s: a=%.3f f=%.12g", ellps, earth.a, earth.f)
    return earth
