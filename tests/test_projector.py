"""Tests for the shapely gnomonic projector."""

import pytest
from shapely.geometry import LineString, Point, Polygon

from geoproj_lib.core.exceptions import GeometryError, ProjectionError
from geoproj_lib.gnomonic import Gnomonic, GnomonicProjector


class TestGnomonicProjector:
    """Tests for GnomonicProjector class."""

    def test_from_geom_centers_on_centroid(self):
        """Test projector creation centers on the geometry centroid."""
        # Point in London (51.5°N, 0.1°W)
        projector = GnomonicProjector.from_geom(Point(-0.1, 51.5))

        assert projector.lat0 == pytest.approx(51.5)
        assert projector.lon0 == pytest.approx(-0.1)
        assert projector.projection.major_radius == pytest.approx(6378137.0)

    def test_from_geom_other_ellipsoid(self):
        """Test projector creation on a named ellipsoid."""
        projector = GnomonicProjector.from_geom(Point(151.2, -33.9), ellps="sphere")

        assert projector.projection.flattening == 0

    def test_from_geom_empty(self):
        """Test an empty geometry cannot be a center."""
        with pytest.raises(ProjectionError):
            GnomonicProjector.from_geom(Polygon())

    def test_from_geom_unknown_ellipsoid(self):
        """Test an unknown ellipsoid name raises ProjectionError."""
        with pytest.raises(ProjectionError):
            GnomonicProjector.from_geom(Point(0, 0), ellps="bogus")

    def test_center_maps_to_origin(self):
        """Test the centroid of a point projects to the origin."""
        point = Point(2.35, 48.85)
        projector = GnomonicProjector.from_geom(point)

        local = projector.to_local(point)

        assert local.x == pytest.approx(0, abs=1e-6)
        assert local.y == pytest.approx(0, abs=1e-6)

    def test_to_local_and_back(self):
        """Test round-trip transformation."""
        poly = Polygon([(0.0, 0.0), (0.1, 0.0), (0.1, 0.1), (0.0, 0.1), (0.0, 0.0)])

        projector = GnomonicProjector.from_geom(poly)

        poly_local = projector.to_local(poly)
        poly_back = projector.to_wgs84(poly_local)

        assert poly.equals_exact(poly_back, tolerance=1e-9)

    def test_local_units_are_meters(self):
        """Test a 0.01 degree square near the equator is about 1 km²."""
        poly = Polygon([(0.0, 0.0), (0.01, 0.0), (0.01, 0.01), (0.0, 0.01), (0.0, 0.0)])

        poly_local = GnomonicProjector.from_geom(poly).to_local(poly)

        assert 1_000_000 < poly_local.area < 1_500_000

    def test_vertices_keep_bearing(self):
        """Test vertices land in the quadrant of their bearing from the center."""
        projector = GnomonicProjector.from_geom(Point(10, 45))
        line = LineString([(0, 40), (10, 45), (20, 50)])

        local = projector.to_local(line)
        (x0, y0), (x1, y1), (x2, y2) = local.coords

        assert x1 == pytest.approx(0, abs=1e-6)
        assert y1 == pytest.approx(0, abs=1e-6)
        assert x0 < 0 < x2
        assert y0 < 0 < y2

    def test_beyond_horizon(self):
        """Test geometries reaching past the horizon are rejected."""
        projector = GnomonicProjector(Gnomonic.from_ellps(), 0, 0)
        line = LineString([(10, 0), (120, 0)])

        with pytest.raises(GeometryError, match="horizon"):
            projector.to_local(line)
