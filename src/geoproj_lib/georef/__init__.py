"""World Geographic Reference System (GEOREF) codec."""

from geoproj_lib.georef.cells import cell_polygon
from geoproj_lib.georef.codec import GeorefCell, forward, precision, resolution, reverse

__all__ = [
    "GeorefCell",
    "forward",
    "reverse",
    "resolution",
    "precision",
    "cell_polygon",
]
