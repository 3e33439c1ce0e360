"""Core definitions for geoproj-lib.

This module contains the fixed alphabets and numeric constants of the World
Geographic Reference System (GEOREF) grid. None of these are ever mutated.

Constants:
    DIGITS: Decimal digits used for the minutes portion.
    LON_TILES: 24 letters naming the 15 degree longitude bands (no I or O).
    LAT_TILES: 12 letters naming the 15 degree latitude bands.
    DEGREES: 15 letters naming the 1 degree cells inside a tile.
"""

DIGITS = "0123456789"
LON_TILES = "ABCDEFGHJKLMNPQRSTUVWXYZ"
LAT_TILES = "ABCDEFGHJKLM"
DEGREES = "ABCDEFGHJKLMNPQ"

# Size of a tile in degrees
TILE = 15
# Latitudes at or above this fold into the last 1 degree band
MAX_LAT = 89
# Tile index of the -180 / -90 edges
LON_ORIGIN = -180 // TILE
LAT_ORIGIN = -90 // TILE
# Base for the decimal part of the minutes
BASE = 10
# Characters before the minutes digits
BASE_LEN = 4
# Roughly equivalent to MGRS at 1m
MAX_PRECISION = 5 + 6
MIN_PRECISION = -1
MINUTES_PER_DEGREE = 60

INVALID = "INVALID"
