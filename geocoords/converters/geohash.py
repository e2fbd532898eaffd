"""Geohash encoding and decoding by interleaved bisection.

Bits alternate between longitude and latitude, longitude first. Each output
character packs five bits, most significant first, into the base-32 alphabet.
"""

import math

import structlog

from geocoords.constants import GEOHASH_ALPHABET, GEOHASH_BITS_PER_CHAR, GEOHASH_MAX_LENGTH
from geocoords.errors import DomainError
from geocoords.models import GeoHash, LatLng
from geocoords.rounding import round_half_down

logger = structlog.get_logger()


def encode(latlng: LatLng, length: int = GEOHASH_MAX_LENGTH) -> GeoHash:
    """Encode a coordinate as a geohash.

    Args:
        latlng: Coordinate to encode.
        length: Number of characters to produce (1 to 12).

    Returns:
        GeoHash of exactly ``length`` characters.
    """
    if not 1 <= length <= GEOHASH_MAX_LENGTH:
        raise DomainError("length", length, f"must be within [1, {GEOHASH_MAX_LENGTH}]")

    lat_min, lat_max = -90.0, 90.0
    lng_min, lng_max = -180.0, 180.0
    chars = []
    index = 0
    bit = 0
    even = True

    while len(chars) < length:
        if even:
            mid = (lng_min + lng_max) / 2
            if latlng.longitude > mid:
                index = (index << 1) + 1
                lng_min = mid
            else:
                index <<= 1
                lng_max = mid
        else:
            mid = (lat_min + lat_max) / 2
            if latlng.latitude > mid:
                index = (index << 1) + 1
                lat_min = mid
            else:
                index <<= 1
                lat_max = mid

        even = not even
        bit += 1
        if bit == GEOHASH_BITS_PER_CHAR:
            chars.append(GEOHASH_ALPHABET[index])
            bit = 0
            index = 0

    return GeoHash("".join(chars))


def bounds(geohash: GeoHash) -> tuple[float, float, float, float]:
    """Return the cell a geohash denotes as (lat_min, lat_max, lng_min, lng_max)."""
    lat_min, lat_max = -90.0, 90.0
    lng_min, lng_max = -180.0, 180.0
    even = True

    for char in geohash.hash:
        value = GEOHASH_ALPHABET.index(char)
        for shift in range(GEOHASH_BITS_PER_CHAR - 1, -1, -1):
            is_set = value & (1 << shift)
            if even:
                mid = (lng_min + lng_max) / 2
                if is_set:
                    lng_min = mid
                else:
                    lng_max = mid
            else:
                mid = (lat_min + lat_max) / 2
                if is_set:
                    lat_min = mid
                else:
                    lat_max = mid
            even = not even

    return lat_min, lat_max, lng_min, lng_max


def decode(geohash: GeoHash) -> LatLng:
    """Decode a geohash to the centre of its cell.

    Each axis is rounded (half-down) to the number of decimals its cell width
    supports, so shorter hashes report fewer significant digits.
    """
    lat_min, lat_max, lng_min, lng_max = bounds(geohash)

    latitude = round_half_down((lat_min + lat_max) / 2, cell_precision(lat_max - lat_min))
    longitude = round_half_down((lng_min + lng_max) / 2, cell_precision(lng_max - lng_min))

    logger.debug("Decoded geohash", geohash=geohash.hash, latitude=latitude, longitude=longitude)
    return LatLng(latitude, longitude)


def cell_precision(width: float) -> int:
    """Decimal places justified by a cell of ``width`` degrees."""
    return math.floor((2 - math.log(width)) / math.log(10))
