"""Gnomonic projection built on geographiclib geodesics."""

from geoproj_lib.gnomonic.config import GnomonicConfig
from geoproj_lib.gnomonic.engine import DEFAULT_ELLPS, geodesic_from_ellps
from geoproj_lib.gnomonic.projection import GeodeticPoint, Gnomonic, GnomonicPoint
from geoproj_lib.gnomonic.projector import GnomonicProjector

__all__ = [
    "DEFAULT_ELLPS",
    "GeodeticPoint",
    "Gnomonic",
    "GnomonicConfig",
    "GnomonicPoint",
    "GnomonicProjector",
    "geodesic_from_ellps",
]
