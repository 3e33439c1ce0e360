"""Conversions between geographic coordinates and GEOREF strings.

A GEOREF string names a rectangular cell of the globe:

- 2 letters: a 15 degree tile, e.g. ``NK`` (precision -1);
- 4 letters: a 1 degree cell inside the tile, e.g. ``NKLN`` (precision 0);
- 4 letters and 2 * prec digits: whole minutes followed by prec - 2 decimal
  places of minutes, all longitude digits first, e.g. ``NKLN2438``
  (precision 2) or ``NKLN244389`` (precision 3).

Precision 1 (whole minutes without the tens digit split) does not exist and
is promoted to 2 on encoding.
"""

from __future__ import annotations

import logging
import math
import sys
from typing import NamedTuple, Optional

from geoproj_lib.core.definitions import (
    BASE,
    BASE_LEN,
    DEGREES,
    DIGITS,
    INVALID,
    LAT_ORIGIN,
    LAT_TILES,
    LON_ORIGIN,
    LON_TILES,
    MAX_LAT,
    MAX_PRECISION,
    MIN_PRECISION,
    MINUTES_PER_DEGREE,
    TILE,
)
from geoproj_lib.core.exceptions import FormatError, RangeError
from geoproj_lib.core.helpers import ang_normalize

logger = logging.getLogger(__name__)

_LON_TILE_INDEX = {c: i for i, c in enumerate(LON_TILES)}
_LAT_TILE_INDEX = {c: i for i, c in enumerate(LAT_TILES)}
_DEGREE_INDEX = {c: i for i, c in enumerate(DEGREES)}

# Largest double below 1 is 1 - eps/2
_ONE_MINUS = 1 - sys.float_info.epsilon / 2


class GeorefCell(NamedTuple):
    """Result of decoding a GEOREF string."""

    lat: float
    lon: float
    prec: Optional[int]


def forward(lat: float, lon: float, prec: int) -> str:
    """
    Convert a geographic position to a GEOREF string.

    Args:
        lat: Latitude in degrees, in [-90, 90]
        lon: Longitude in degrees, any value
        prec: Requested precision; clamped to [-1, 11] with 1 changed to 2

    Returns:
        The upper-case GEOREF string, or "INVALID" if lat or lon is NaN

    Raises:
        RangeError: If |lat| > 90
    """
    if abs(lat) > 90:
        raise RangeError(f"Latitude {lat}d not in [-90d, 90d]")
    lon = ang_normalize(lon)
    if math.isnan(lat) or math.isnan(lon):
        return INVALID

    prec = max(MIN_PRECISION, min(MAX_PRECISION, prec))
    if prec == 1:
        prec += 1

    ilon = math.floor(lon)
    ilat = min(math.floor(lat), MAX_LAT)
    lon -= ilon
    lat -= ilat

    lon_tile, lon_deg = divmod(ilon - LON_ORIGIN * TILE, TILE)
    lat_tile, lat_deg = divmod(ilat - LAT_ORIGIN * TILE, TILE)

    parts = [LON_TILES[lon_tile], LAT_TILES[lat_tile]]
    if prec >= 0:
        parts.append(DEGREES[lon_deg])
        parts.append(DEGREES[lat_deg])
    if prec > 0:
        # lon == 1 when lon was -tiny; lat == 1 at the pole
        if lon == 1:
            lon = _ONE_MINUS
        if lat == 1:
            lat = _ONE_MINUS
        mult = BASE ** (prec - 2) * MINUTES_PER_DEGREE
        x = math.floor(mult * lon)
        y = math.floor(mult * lat)
        parts.append(f"{x:0{prec}d}")
        parts.append(f"{y:0{prec}d}")
    return "".join(parts)


def _lookup(table: dict[str, int], georef: str, pos: int, what: str) -> int:
    k = table.get(georef[pos].upper(), -1)
    if k < 0:
        raise FormatError(
            f"Bad {what} letter {georef[pos]!r} at position {pos} in georef {georef}"
        )
    return k


def reverse(georef: str, centerp: bool = True, prec: Optional[int] = None) -> GeorefCell:
    """
    Convert a GEOREF string to a geographic position.

    The case of the letters is ignored. If the string starts with "INV" the
    position is NaN and ``prec`` is handed back untouched, so callers that
    keep a running precision can pass it through.

    Args:
        georef: The GEOREF string
        centerp: Return the center of the cell (default) instead of its
            south-west corner
        prec: Value returned as the precision for the INVALID sentinel

    Returns:
        GeorefCell with latitude, longitude and precision of the string

    Raises:
        FormatError: If the string is not a legal GEOREF
    """
    if not georef.isascii():
        raise FormatError(f"Non ASCII characters in georef {georef!r}")
    if georef[:3].upper() == "INV":
        logger.debug("GEOREF %r is the INVALID sentinel", georef)
        return GeorefCell(math.nan, math.nan, prec)

    length = len(georef)
    if length < BASE_LEN - 2:
        raise FormatError(f"Georef must have at least 2 characters {georef!r}")
    prec1 = (2 + length - BASE_LEN) // 2 - 1

    lon1 = _lookup(_LON_TILE_INDEX, georef, 0, "longitude tile") + LON_ORIGIN
    lat1 = _lookup(_LAT_TILE_INDEX, georef, 1, "latitude tile") + LAT_ORIGIN
    unit = 1
    if length > 2:
        unit *= TILE
        lon1 = lon1 * TILE + _lookup(_DEGREE_INDEX, georef, 2, "longitude degree")
        if length < 4:
            raise FormatError(f"Missing latitude degree letter in georef {georef}")
        lat1 = lat1 * TILE + _lookup(_DEGREE_INDEX, georef, 3, "latitude degree")
        if prec1 > 0:
            tail = georef[BASE_LEN:]
            if any(c not in DIGITS for c in tail):
                raise FormatError(
                    f"Non digits in trailing portion of georef {tail} {georef}"
                )
            if length % 2:
                raise FormatError(f"Georef must end with an even number of digits {tail}")
            if prec1 == 1:
                raise FormatError(f"Georef needs at least 4 digits for minutes {tail}")
            for i in range(prec1):
                # Tens of minutes are base 6, the rest base 10
                m = BASE if i else 6
                unit *= m
                x = int(georef[BASE_LEN + i])
                y = int(georef[BASE_LEN + i + prec1])
                if not (i or (x < m and y < m)):
                    raise FormatError(f"Minutes terms in georef must be less than 60 {tail}")
                lon1 = m * lon1 + x
                lat1 = m * lat1 + y

    if centerp:
        unit *= 2
        lat1 = 2 * lat1 + 1
        lon1 = 2 * lon1 + 1
    return GeorefCell(TILE * lat1 / unit, TILE * lon1 / unit, prec1)


def resolution(prec: int) -> float:
    """
    Return the size in degrees of a GEOREF cell at a given precision.

    Args:
        prec: Precision level; clamped to [-1, 11] with 1 treated as 2

    Returns:
        Cell size in degrees
    """
    if prec < 1:
        return float(TILE if prec < 0 else 1)
    prec = max(2, min(MAX_PRECISION, prec))
    return 1 / (MINUTES_PER_DEGREE * BASE ** (prec - 2))


def precision(res: float) -> int:
    """Return the coarsest precision whose cell size is at most |res| degrees."""
    res = abs(res)
    for prec in range(MIN_PRECISION, MAX_PRECISION):
        if prec == 1:
            continue
        if resolution(prec) <= res:
            return prec
    return MAX_PRECISION
