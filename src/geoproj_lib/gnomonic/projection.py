"""
Gnomonic projection on an ellipsoid.

The projection is centered on an arbitrary point (lat0, lon0). A point at
geodesic distance s and azimuth azi0 from the center maps to

    rho = m / M,  x = rho * sin(azi0),  y = rho * cos(azi0)

where m is the reduced length and M the geodesic scale of the geodesic from
the center. On a sphere this is the classical gnomonic projection and all
great circles become straight lines; on an ellipsoid geodesics through the
center are straight and others nearly so.

The projection is only defined while M > 0, i.e. short of the conjugate
point of the center. Forward reports NaN x, y past that horizon. Reverse
solves rho(s) = rho by Newton's method along the geodesic with azimuth
atan2(x, y); a failure to converge is reported as NaN, never raised.

The geodesic computations are delegated to a geographiclib Geodesic owned by
the caller.
"""

from __future__ import annotations

import logging
import math
from typing import NamedTuple, Optional

from geographiclib.geodesic import Geodesic

from geoproj_lib.core.helpers import is_finite_pair
from geoproj_lib.gnomonic.config import GnomonicConfig
from geoproj_lib.gnomonic.engine import DEFAULT_ELLPS, geodesic_from_ellps

logger = logging.getLogger(__name__)

_INVERSE_MASK = Geodesic.AZIMUTH | Geodesic.REDUCEDLENGTH | Geodesic.GEODESICSCALE
_LINE_CAPS = (
    Geodesic.LATITUDE
    | Geodesic.LONGITUDE
    | Geodesic.AZIMUTH
    | Geodesic.DISTANCE_IN
    | Geodesic.REDUCEDLENGTH
    | Geodesic.GEODESICSCALE
)
_POSITION_MASK = (
    Geodesic.LATITUDE
    | Geodesic.LONGITUDE
    | Geodesic.AZIMUTH
    | Geodesic.REDUCEDLENGTH
    | Geodesic.GEODESICSCALE
)


class GnomonicPoint(NamedTuple):
    """Projected point: easting, northing, azimuth and reciprocal radial scale."""

    x: float
    y: float
    azi: float
    rk: float


class GeodeticPoint(NamedTuple):
    """Geographic point with the azimuth and reciprocal radial scale there."""

    lat: float
    lon: float
    azi: float
    rk: float


_NAN_POINT = GeodeticPoint(math.nan, math.nan, math.nan, math.nan)


class Gnomonic:
    """Gnomonic projection centered at a caller-supplied point."""

    def __init__(self, earth: Geodesic, config: Optional[GnomonicConfig] = None):
        """
        Args:
            earth: Geodesic engine; kept by reference and never modified
            config: Reverse solver settings
        """
        self._earth = earth
        self._a = earth.a
        self._config = config or GnomonicConfig()

    @classmethod
    def from_ellps(
        cls, ellps: str = DEFAULT_ELLPS, config: Optional[GnomonicConfig] = None
    ) -> Gnomonic:
        """
        Create a projection on a named ellipsoid.

        Raises:
            ProjectionError: If the ellipsoid is unknown
        """
        return cls(geodesic_from_ellps(ellps), config)

    @property
    def earth(self) -> Geodesic:
        return self._earth

    @property
    def config(self) -> GnomonicConfig:
        return self._config

    @property
    def major_radius(self) -> float:
        """Equatorial radius of the ellipsoid (meters)."""
        return self._a

    @property
    def flattening(self) -> float:
        """Flattening of the ellipsoid."""
        return self._earth.f

    def forward(self, lat0: float, lon0: float, lat: float, lon: float) -> GnomonicPoint:
        """
        Project a geographic point.

        Args:
            lat0, lon0: Center of the projection (degrees)
            lat, lon: Point to project (degrees)

        Returns:
            GnomonicPoint; x and y are NaN when the point lies beyond the
            horizon (rk <= 0). azi and rk are always reported.
        """
        g = self._earth.Inverse(lat0, lon0, lat, lon, _INVERSE_MASK)
        azi0, azi, m, M = g["azi1"], g["azi2"], g["m12"], g["M12"]
        if M <= 0:
            return GnomonicPoint(math.nan, math.nan, azi, M)
        rho = m / M
        azi0 = math.radians(azi0)
        return GnomonicPoint(rho * math.sin(azi0), rho * math.cos(azi0), azi, M)

    def reverse(self, lat0: float, lon0: float, x: float, y: float) -> GeodeticPoint:
        """
        Find the geographic point for projected coordinates.

        Convergence is confirmed one iteration late: once a Newton step drops
        below tolerance * a, the geodesic is evaluated once more at the
        updated distance and that evaluation is returned.

        Args:
            lat0, lon0: Center of the projection (degrees)
            x, y: Projected coordinates (meters)

        Returns:
            GeodeticPoint; all fields NaN if the solver does not converge
        """
        if not is_finite_pair(x, y):
            return _NAN_POINT

        a = self._a
        azi0 = math.degrees(math.atan2(x, y))
        rho = math.hypot(x, y)
        s = a * math.atan(rho / a)
        little = rho <= a
        if not little:
            # Track 1/rho far from the center
            rho = 1 / rho

        line = self._earth.Line(lat0, lon0, azi0, _LINE_CAPS)
        threshold = self._config.tolerance * a
        trip = False
        pos = None
        for _ in range(self._config.max_iterations):
            pos = line.Position(s, _POSITION_MASK)
            if trip:
                break
            m, M = pos["m12"], pos["M12"]
            try:
                # little: drho/ds = 1/M^2; otherwise d(1/rho)/ds = -1/m^2
                ds = (m / M - rho) * M * M if little else (rho - M / m) * m * m
            except ZeroDivisionError:
                logger.debug("Gnomonic reverse hit a zero scale at s=%g", s)
                return _NAN_POINT
            s -= ds
            if not abs(ds) >= threshold:
                trip = True

        if not trip:
            logger.debug(
                "Gnomonic reverse of (%g, %g) about (%g, %g) did not converge in %d iterations",
                x,
                y,
                lat0,
                lon0,
                self._config.max_iterations,
            )
            return _NAN_POINT
        return GeodeticPoint(pos["lat2"], pos["lon2"], pos["azi2"], pos["M12"])
