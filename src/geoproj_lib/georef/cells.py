"""Shapely geometry for GEOREF cells."""

from __future__ import annotations

import math

from shapely.geometry import Polygon, box

from geoproj_lib.core.exceptions import GeometryError
from geoproj_lib.georef.codec import resolution, reverse


def cell_polygon(georef: str) -> Polygon:
    """
    Build the rectangle a GEOREF string denotes, in lon/lat degrees.

    Args:
        georef: A GEOREF string at any precision

    Returns:
        Polygon spanning the cell from its south-west corner

    Raises:
        FormatError: If the string is not a legal GEOREF
        GeometryError: If the string is the INVALID sentinel
    """
    lat, lon, prec = reverse(georef, centerp=False)
    if math.isnan(lat) or math.isnan(lon):
        raise GeometryError(f"Cannot build a cell polygon for {georef!r}")
    size = resolution(prec)
    return box(lon, lat, lon + size, lat + size)
