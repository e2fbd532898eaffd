"""Conversions between LatLng and the other coordinate representations."""

from geocoords.converters.geohash import bounds, decode, encode
from geocoords.converters.sexagesimal import ddm_to_latlng, dms_to_latlng, latlng_to_ddm, latlng_to_dms
from geocoords.converters.utm import latlng_to_utm, utm_to_latlng, zone_for

__all__ = [
    # Geohash
    "encode",
    "decode",
    "bounds",
    # Sexagesimal
    "latlng_to_dms",
    "latlng_to_ddm",
    "dms_to_latlng",
    "ddm_to_latlng",
    # UTM
    "latlng_to_utm",
    "utm_to_latlng",
    "zone_for",
]
