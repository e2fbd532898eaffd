"""Immutable value types for each coordinate representation.

Each type validates its fields on construction, renders itself with
``to_string(precision)`` (``-1`` selects the configured default precision)
and parses the same template back with ``parse``.
"""

import math
import re
from dataclasses import dataclass, field
from typing import Any

from geocoords.config import get_config
from geocoords.constants import (
    GEOHASH_ALPHABET,
    GEOHASH_MAX_LENGTH,
    LATITUDE_BANDS,
    MAX_ZONE,
    MIN_ZONE,
    SOUTHERN_BAND_COUNT,
    ZONE_WIDTH_DEG,
)
from geocoords.errors import DomainError, ParseError
from geocoords.rounding import format_fixed, resolve_precision, round_half_down

_UNSIGNED = r"\d+(?:\.\d+)?"
_SIGNED = r"[-+]?\d+(?:\.\d+)?"

_LATLNG_HEMISPHERE_RE = re.compile(
    rf"^\s*({_UNSIGNED})\s*°\s*([NS])\s*,?\s*({_UNSIGNED})\s*°\s*([EW])\s*$", re.IGNORECASE
)
_LATLNG_SIGNED_RE = re.compile(rf"^\s*({_SIGNED})\s*[,\s]\s*({_SIGNED})\s*$")
_DMS_RE = re.compile(
    rf"^\s*(\d+)\s*°\s*(\d+)\s*'\s*({_UNSIGNED})\s*\"\s*([NS])\s*,?"
    rf"\s*(\d+)\s*°\s*(\d+)\s*'\s*({_UNSIGNED})\s*\"\s*([EW])\s*$",
    re.IGNORECASE,
)
_DDM_RE = re.compile(
    rf"^\s*(\d+)\s*°\s*({_UNSIGNED})\s*'\s*([NS])\s*,?"
    rf"\s*(\d+)\s*°\s*({_UNSIGNED})\s*'\s*([EW])\s*$",
    re.IGNORECASE,
)
_UTM_RE = re.compile(rf"^\s*(\d{{1,2}})\s*([A-Za-z])\s+({_SIGNED})\s+({_SIGNED})\s*$")


def _coerce_float(name: str, value: Any) -> float:
    if isinstance(value, bool):
        raise DomainError(name, value, "must be a number")
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise DomainError(name, value, "must be a number") from None
    if not math.isfinite(number):
        raise DomainError(name, value, "must be finite")
    return number


def _coerce_int(name: str, value: Any) -> int:
    if isinstance(value, bool):
        raise DomainError(name, value, "must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise DomainError(name, value, "must be an integer")


def _require_range(name: str, value: float, low: float, high: float) -> None:
    if not low <= value <= high:
        raise DomainError(name, value, f"must be within [{low}, {high}]")


def _require_below(name: str, value: float, low: float, high: float) -> None:
    if not low <= value < high:
        raise DomainError(name, value, f"must be within [{low}, {high})")


def _coerce_hemisphere(name: str, value: Any, choices: str) -> str:
    letter = value.upper() if isinstance(value, str) else value
    if letter not in tuple(choices):
        raise DomainError(name, value, f"must be one of {', '.join(choices)}")
    return letter


def _degree_width() -> int:
    return 3 if get_config().formatting.pad_longitude_degrees else 1


@dataclass(frozen=True)
class LatLng:
    """Signed decimal latitude/longitude in degrees."""

    latitude: float = 0.0
    longitude: float = 0.0

    def __post_init__(self) -> None:
        latitude = _coerce_float("latitude", self.latitude)
        longitude = _coerce_float("longitude", self.longitude)
        _require_range("latitude", latitude, -90.0, 90.0)
        _require_range("longitude", longitude, -180.0, 180.0)
        object.__setattr__(self, "latitude", latitude)
        object.__setattr__(self, "longitude", longitude)

    @property
    def hemisphere_latitude(self) -> str:
        return "N" if self.latitude >= 0 else "S"

    @property
    def hemisphere_longitude(self) -> str:
        return "E" if self.longitude >= 0 else "W"

    def to_string(self, precision: int = -1) -> str:
        """Render as ``52.516253° N 13.377625° E``."""
        precision = resolve_precision(precision, get_config().formatting.latlng_precision)
        return (
            f"{format_fixed(abs(self.latitude), precision)}° {self.hemisphere_latitude} "
            f"{format_fixed(abs(self.longitude), precision)}° {self.hemisphere_longitude}"
        )

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def parse(cls, text: str) -> "LatLng":
        """Parse ``52.5° N 13.3° E`` or signed ``52.5, 13.3``."""
        if match := _LATLNG_HEMISPHERE_RE.match(text):
            latitude, lat_hemi, longitude, lng_hemi = match.groups()
            return cls(
                float(latitude) * (-1 if lat_hemi.upper() == "S" else 1),
                float(longitude) * (-1 if lng_hemi.upper() == "W" else 1),
            )
        if match := _LATLNG_SIGNED_RE.match(text):
            return cls(float(match.group(1)), float(match.group(2)))
        raise ParseError("LatLng", text, "'52.516253° N 13.377625° E' or '52.516253, 13.377625'")


@dataclass(frozen=True)
class DMS:
    """Degrees, minutes and seconds with hemisphere letters.

    Degrees are magnitudes; the sign of each axis is carried by its hemisphere.
    """

    degrees_lat: int = 0
    minutes_lat: int = 0
    seconds_lat: float = 0.0
    hemisphere_lat: str = "N"
    degrees_lng: int = 0
    minutes_lng: int = 0
    seconds_lng: float = 0.0
    hemisphere_lng: str = "E"

    def __post_init__(self) -> None:
        for axis, max_degrees, hemispheres in (("lat", 90, "NS"), ("lng", 180, "EW")):
            degrees = _coerce_int(f"degrees_{axis}", getattr(self, f"degrees_{axis}"))
            minutes = _coerce_int(f"minutes_{axis}", getattr(self, f"minutes_{axis}"))
            seconds = _coerce_float(f"seconds_{axis}", getattr(self, f"seconds_{axis}"))
            hemisphere = _coerce_hemisphere(
                f"hemisphere_{axis}", getattr(self, f"hemisphere_{axis}"), hemispheres
            )
            _require_range(f"degrees_{axis}", degrees, 0, max_degrees)
            _require_range(f"minutes_{axis}", minutes, 0, 59)
            _require_below(f"seconds_{axis}", seconds, 0.0, 60.0)
            if degrees + minutes / 60 + seconds / 3600 > max_degrees:
                raise DomainError(f"degrees_{axis}", degrees, f"angle exceeds {max_degrees}°")
            object.__setattr__(self, f"degrees_{axis}", degrees)
            object.__setattr__(self, f"minutes_{axis}", minutes)
            object.__setattr__(self, f"seconds_{axis}", seconds)
            object.__setattr__(self, f"hemisphere_{axis}", hemisphere)

    def to_string(self, precision: int = -1) -> str:
        """Render as ``52°30'58.512252" N, 13°22'39.451372" E``."""
        precision = resolve_precision(precision, get_config().formatting.dms_precision)
        latitude = _dms_text(self.degrees_lat, self.minutes_lat, self.seconds_lat, precision, 1)
        longitude = _dms_text(
            self.degrees_lng, self.minutes_lng, self.seconds_lng, precision, _degree_width()
        )
        return f"{latitude} {self.hemisphere_lat}, {longitude} {self.hemisphere_lng}"

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def parse(cls, text: str) -> "DMS":
        match = _DMS_RE.match(text)
        if not match:
            raise ParseError("DMS", text, "'52°30'58.512252\" N, 13°22'39.451372\" E'")
        d_lat, m_lat, s_lat, h_lat, d_lng, m_lng, s_lng, h_lng = match.groups()
        return cls(
            int(d_lat), int(m_lat), float(s_lat), h_lat,
            int(d_lng), int(m_lng), float(s_lng), h_lng,
        )


@dataclass(frozen=True)
class DDM:
    """Degrees and decimal minutes with hemisphere letters."""

    degrees_lat: int = 0
    minutes_lat: float = 0.0
    hemisphere_lat: str = "N"
    degrees_lng: int = 0
    minutes_lng: float = 0.0
    hemisphere_lng: str = "E"

    def __post_init__(self) -> None:
        for axis, max_degrees, hemispheres in (("lat", 90, "NS"), ("lng", 180, "EW")):
            degrees = _coerce_int(f"degrees_{axis}", getattr(self, f"degrees_{axis}"))
            minutes = _coerce_float(f"minutes_{axis}", getattr(self, f"minutes_{axis}"))
            hemisphere = _coerce_hemisphere(
                f"hemisphere_{axis}", getattr(self, f"hemisphere_{axis}"), hemispheres
            )
            _require_range(f"degrees_{axis}", degrees, 0, max_degrees)
            _require_below(f"minutes_{axis}", minutes, 0.0, 60.0)
            if degrees + minutes / 60 > max_degrees:
                raise DomainError(f"degrees_{axis}", degrees, f"angle exceeds {max_degrees}°")
            object.__setattr__(self, f"degrees_{axis}", degrees)
            object.__setattr__(self, f"minutes_{axis}", minutes)
            object.__setattr__(self, f"hemisphere_{axis}", hemisphere)

    def to_string(self, precision: int = -1) -> str:
        """Render as ``52°30.975204' N, 13°22.657523' E``."""
        precision = resolve_precision(precision, get_config().formatting.ddm_precision)
        latitude = _ddm_text(self.degrees_lat, self.minutes_lat, precision, 1)
        longitude = _ddm_text(self.degrees_lng, self.minutes_lng, precision, _degree_width())
        return f"{latitude} {self.hemisphere_lat}, {longitude} {self.hemisphere_lng}"

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def parse(cls, text: str) -> "DDM":
        match = _DDM_RE.match(text)
        if not match:
            raise ParseError("DDM", text, "'52°30.975204' N, 13°22.657523' E'")
        d_lat, m_lat, h_lat, d_lng, m_lng, h_lng = match.groups()
        return cls(int(d_lat), float(m_lat), h_lat, int(d_lng), float(m_lng), h_lng)


@dataclass(frozen=True)
class UTM:
    """UTM grid reference.

    ``convergence`` (degrees) and ``scale`` are filled in by the forward
    projection and are ignored by equality.
    """

    zone: int
    latitude_band: str
    easting: float
    northing: float
    convergence: float | None = field(default=None, compare=False)
    scale: float | None = field(default=None, compare=False)

    def __post_init__(self) -> None:
        zone = _coerce_int("zone", self.zone)
        _require_range("zone", zone, MIN_ZONE, MAX_ZONE)
        band = self.latitude_band.upper() if isinstance(self.latitude_band, str) else self.latitude_band
        if not isinstance(band, str) or len(band) != 1 or band not in LATITUDE_BANDS:
            raise DomainError("latitude_band", self.latitude_band, f"must be one of {LATITUDE_BANDS[:-1]}")
        object.__setattr__(self, "zone", zone)
        object.__setattr__(self, "latitude_band", band)
        object.__setattr__(self, "easting", _coerce_float("easting", self.easting))
        object.__setattr__(self, "northing", _coerce_float("northing", self.northing))

    @property
    def is_southern(self) -> bool:
        return LATITUDE_BANDS.index(self.latitude_band) < SOUTHERN_BAND_COUNT

    @property
    def central_meridian(self) -> float:
        """Central meridian of the zone in degrees."""
        return (self.zone - 1) * ZONE_WIDTH_DEG - 180 + ZONE_WIDTH_DEG / 2

    def to_string(self, precision: int = -1) -> str:
        """Render as ``33U 389912.653201401 5819696.850323285``."""
        precision = resolve_precision(precision, get_config().formatting.utm_precision)
        return (
            f"{self.zone}{self.latitude_band} "
            f"{format_fixed(self.easting, precision)} {format_fixed(self.northing, precision)}"
        )

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def parse(cls, text: str) -> "UTM":
        """Parse ``{zone}{band} {easting} {northing}``."""
        match = _UTM_RE.match(text)
        if not match:
            raise ParseError("UTM", text, "'33U 389912.653 5819696.850'")
        zone, band, easting, northing = match.groups()
        return cls(int(zone), band, float(easting), float(northing))


@dataclass(frozen=True)
class GeoHash:
    """Base-32 geohash of up to 12 characters."""

    hash: str = ""

    def __post_init__(self) -> None:
        if not isinstance(self.hash, str):
            raise DomainError("geohash", self.hash, "must be a string")
        value = self.hash.lower()
        if len(value) > GEOHASH_MAX_LENGTH:
            raise DomainError("geohash", self.hash, f"must be at most {GEOHASH_MAX_LENGTH} characters")
        for position, char in enumerate(value):
            if char not in GEOHASH_ALPHABET:
                raise DomainError("geohash", self.hash, f"character {char!r} at {position} is not base-32")
        object.__setattr__(self, "hash", value)

    def to_string(self, precision: int = -1) -> str:
        """Return the first ``precision`` characters (default 12)."""
        length = resolve_precision(precision, get_config().formatting.geohash_length)
        return self.hash[:length]

    def __str__(self) -> str:
        return self.to_string()

    @classmethod
    def parse(cls, text: str) -> "GeoHash":
        return cls(text.strip())


def _dms_text(degrees: int, minutes: int, seconds: float, precision: int, width: int) -> str:
    seconds = round_half_down(seconds, precision)
    if seconds >= 60:
        seconds -= 60
        minutes += 1
    if minutes >= 60:
        minutes -= 60
        degrees += 1
    return f"{degrees:0{width}d}°{minutes:d}'{seconds:.{precision}f}\""


def _ddm_text(degrees: int, minutes: float, precision: int, width: int) -> str:
    minutes = round_half_down(minutes, precision)
    if minutes >= 60:
        minutes -= 60
        degrees += 1
    return f"{degrees:0{width}d}°{minutes:.{precision}f}'"
