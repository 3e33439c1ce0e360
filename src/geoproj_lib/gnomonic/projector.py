"""Projection utilities for converting shapely geometries to and from gnomonic coordinates."""

from __future__ import annotations

import math
from dataclasses import dataclass

from shapely.geometry.base import BaseGeometry
from shapely.ops import transform as shp_transform

from geoproj_lib.core.exceptions import GeometryError, ProjectionError
from geoproj_lib.gnomonic.engine import DEFAULT_ELLPS
from geoproj_lib.gnomonic.projection import Gnomonic


@dataclass
class GnomonicProjector:
    """Maps lon/lat geometries to a gnomonic plane about (lat0, lon0) and back."""

    projection: Gnomonic
    lat0: float
    lon0: float

    @staticmethod
    def from_geom(geom: BaseGeometry, ellps: str = DEFAULT_ELLPS) -> GnomonicProjector:
        """
        Create a GnomonicProjector centered on a geometry's centroid.

        Args:
            geom: A Shapely geometry in lon/lat degrees
            ellps: PROJ ellipsoid name

        Returns:
            A GnomonicProjector centered on the centroid

        Raises:
            ProjectionError: If projection setup fails
        """
        if geom.is_empty:
            raise ProjectionError("Cannot center a projector on an empty geometry")
        centroid = geom.centroid
        return GnomonicProjector(Gnomonic.from_ellps(ellps), centroid.y, centroid.x)

    def _forward(self, lons, lats, *rest):
        xs, ys = [], []
        for lon, lat in zip(lons, lats):
            p = self.projection.forward(self.lat0, self.lon0, lat, lon)
            if math.isnan(p.x):
                raise GeometryError(
                    f"Point ({lon}, {lat}) is beyond the gnomonic horizon of "
                    f"({self.lon0}, {self.lat0})"
                )
            xs.append(p.x)
            ys.append(p.y)
        return (xs, ys, *rest)

    def _reverse(self, xs, ys, *rest):
        lons, lats = [], []
        for x, y in zip(xs, ys):
            p = self.projection.reverse(self.lat0, self.lon0, x, y)
            if math.isnan(p.lat):
                raise GeometryError(f"Gnomonic reverse projection failed for ({x}, {y})")
            lons.append(p.lon)
            lats.append(p.lat)
        return (lons, lats, *rest)

    def to_local(self, geom: BaseGeometry) -> BaseGeometry:
        """Transform geometry from lon/lat to gnomonic x/y in meters."""
        return shp_transform(self._forward, geom)

    def to_wgs84(self, geom: BaseGeometry) -> BaseGeometry:
        """Transform geometry from gnomonic x/y to lon/lat."""
        return shp_transform(self._reverse, geom)
