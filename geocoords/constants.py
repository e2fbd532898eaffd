"""Ellipsoid, projection and encoding constants shared by the converters."""

import math

# WGS84 ellipsoid
EQUATORIAL_RADIUS = 6_378_137
FLATTENING = 1 / 298.257_223_563

# UTM grid
UTM_SCALE_FACTOR = 0.999_6
FALSE_EASTING = 500_000
FALSE_NORTHING = 10_000_000
ZONE_WIDTH_DEG = 6
MIN_ZONE = 1
MAX_ZONE = 60
MIN_UTM_LATITUDE = -80.0
MAX_UTM_LATITUDE = 84.0

# X is repeated so that 80°N to 84°N indexes into the table
LATITUDE_BANDS = "CDEFGHJKLMNPQRSTUVWXX"
# Bands C to M lie south of the equator
SOUTHERN_BAND_COUNT = 10

GEOHASH_ALPHABET = "0123456789bcdefghjkmnpqrstuvwxyz"
GEOHASH_MAX_LENGTH = 12
GEOHASH_BITS_PER_CHAR = 5


def to_radians(degrees: float) -> float:
    """Degrees to radians, evaluated as deg * pi / 180."""
    return degrees * math.pi / 180


def to_degrees(radians: float) -> float:
    """Radians to degrees, evaluated as (rad / pi) * 180."""
    return (radians / math.pi) * 180
