"""Sexagesimal (DMS/DDM) decomposition and recomposition."""

import math

from geocoords.models import DDM, DMS, LatLng


def _split_dms(value: float) -> tuple[int, int, float]:
    magnitude = abs(value)
    degrees = math.floor(magnitude)
    minutes = math.floor((magnitude - degrees) * 60)
    seconds = (magnitude - degrees - minutes / 60) * 3_600
    # float noise can leave a tiny negative remainder
    return degrees, minutes, max(seconds, 0.0)


def _split_ddm(value: float) -> tuple[int, float]:
    magnitude = abs(value)
    degrees = math.floor(magnitude)
    minutes = (magnitude - degrees) * 60
    return degrees, minutes


def latlng_to_dms(latlng: LatLng) -> DMS:
    """Split each axis into whole degrees, whole minutes and decimal seconds."""
    degrees_lat, minutes_lat, seconds_lat = _split_dms(latlng.latitude)
    degrees_lng, minutes_lng, seconds_lng = _split_dms(latlng.longitude)
    return DMS(
        degrees_lat,
        minutes_lat,
        seconds_lat,
        latlng.hemisphere_latitude,
        degrees_lng,
        minutes_lng,
        seconds_lng,
        latlng.hemisphere_longitude,
    )


def latlng_to_ddm(latlng: LatLng) -> DDM:
    """Split each axis into whole degrees and decimal minutes."""
    degrees_lat, minutes_lat = _split_ddm(latlng.latitude)
    degrees_lng, minutes_lng = _split_ddm(latlng.longitude)
    return DDM(
        degrees_lat,
        minutes_lat,
        latlng.hemisphere_latitude,
        degrees_lng,
        minutes_lng,
        latlng.hemisphere_longitude,
    )


def dms_to_latlng(dms: DMS) -> LatLng:
    latitude = dms.degrees_lat + dms.minutes_lat / 60 + dms.seconds_lat / 3_600
    longitude = dms.degrees_lng + dms.minutes_lng / 60 + dms.seconds_lng / 3_600
    return LatLng(
        -latitude if dms.hemisphere_lat == "S" else latitude,
        -longitude if dms.hemisphere_lng == "W" else longitude,
    )


def ddm_to_latlng(ddm: DDM) -> LatLng:
    latitude = ddm.degrees_lat + ddm.minutes_lat / 60
    longitude = ddm.degrees_lng + ddm.minutes_lng / 60
    return LatLng(
        -latitude if ddm.hemisphere_lat == "S" else latitude,
        -longitude if ddm.hemisphere_lng == "W" else longitude,
    )
