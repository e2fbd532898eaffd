"""Conversion between LatLng, DMS, DDM, UTM and geohash coordinates."""

from geocoords.coordinate import Coordinate, CoordinateFormat
from geocoords.errors import ConvergenceError, CoordinateError, DomainError, ParseError
from geocoords.models import DDM, DMS, UTM, GeoHash, LatLng

__version__ = "0.1.0"

__all__ = [
    "Coordinate",
    "CoordinateFormat",
    # Representations
    "LatLng",
    "DMS",
    "DDM",
    "UTM",
    "GeoHash",
    # Errors
    "CoordinateError",
    "DomainError",
    "ParseError",
    "ConvergenceError",
]
