"""Gnomonic projection examples for geoproj-lib."""

from shapely.geometry import LineString

from geoproj_lib import Gnomonic, GnomonicProjector

# Paris
lat0, lon0 = 48 + 50 / 60, 2 + 20 / 60

proj = Gnomonic.from_ellps("WGS84")

# Calais
x, y, azi, rk = proj.forward(lat0, lon0, 50.9, 1.8)
print(f"x={x:.1f} y={y:.1f} azi={azi:.5f} rk={rk:.8f}")

lat, lon, azi, rk = proj.reverse(lat0, lon0, -38e3, 230e3)
print(f"lat={lat:.6f} lon={lon:.6f}")

# Project a shapely geometry about its own centroid
route = LineString([(2.35, 48.85), (1.8, 50.9), (-0.13, 51.5)])
projector = GnomonicProjector.from_geom(route)
print(projector.to_local(route))
