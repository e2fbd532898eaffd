"""Coordinate value model dispatching between representations.

A ``Coordinate`` owns exactly one representation. Converting to another
representation goes through LatLng, so every pair of formats is supported.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from geocoords.converters import geohash, sexagesimal, utm
from geocoords.errors import DomainError
from geocoords.models import DDM, DMS, UTM, GeoHash, LatLng

Representation = LatLng | DMS | DDM | UTM | GeoHash


class CoordinateFormat(str, Enum):
    """Supported coordinate representations."""

    LATLNG = "LatLng"
    DMS = "DMS"
    DDM = "DDM"
    UTM = "UTM"
    GEOHASH = "GeoHash"

    @classmethod
    def values(cls) -> list[str]:
        return [member.value for member in cls]

    @classmethod
    def _missing_(cls, value: object) -> "CoordinateFormat | None":
        if isinstance(value, str):
            for member in cls:
                if member.value.lower() == value.lower():
                    return member
        return None

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    CoordinateFormat.LATLNG: "Latitude Longitude",
    CoordinateFormat.DMS: "Degrees Minutes Seconds",
    CoordinateFormat.DDM: "Degrees Decimal Minutes",
    CoordinateFormat.UTM: "Universal Transverse Mercator",
    CoordinateFormat.GEOHASH: "Geohash",
}

_TYPES: dict[CoordinateFormat, type] = {
    CoordinateFormat.LATLNG: LatLng,
    CoordinateFormat.DMS: DMS,
    CoordinateFormat.DDM: DDM,
    CoordinateFormat.UTM: UTM,
    CoordinateFormat.GEOHASH: GeoHash,
}

_TO_LATLNG: dict[type, Callable[[Representation], LatLng]] = {
    LatLng: lambda value: value,
    DMS: sexagesimal.dms_to_latlng,
    DDM: sexagesimal.ddm_to_latlng,
    UTM: utm.utm_to_latlng,
    GeoHash: geohash.decode,
}

_FROM_LATLNG: dict[CoordinateFormat, Callable[[LatLng], Representation]] = {
    CoordinateFormat.LATLNG: lambda value: value,
    CoordinateFormat.DMS: sexagesimal.latlng_to_dms,
    CoordinateFormat.DDM: sexagesimal.latlng_to_ddm,
    CoordinateFormat.UTM: utm.latlng_to_utm,
    CoordinateFormat.GEOHASH: geohash.encode,
}


@dataclass(frozen=True)
class Coordinate:
    """A coordinate held in one representation."""

    value: Representation

    def __post_init__(self) -> None:
        if type(self.value) not in _TO_LATLNG:
            raise DomainError("value", self.value, f"must be one of {', '.join(CoordinateFormat.values())}")

    @classmethod
    def from_latlng(cls, latitude: float = 0, longitude: float = 0) -> "Coordinate":
        return cls(LatLng(latitude, longitude))

    @classmethod
    def from_dms(
        cls,
        degrees_lat: int,
        minutes_lat: int,
        seconds_lat: float,
        hemisphere_lat: str,
        degrees_lng: int,
        minutes_lng: int,
        seconds_lng: float,
        hemisphere_lng: str,
    ) -> "Coordinate":
        return cls(
            DMS(
                degrees_lat, minutes_lat, seconds_lat, hemisphere_lat,
                degrees_lng, minutes_lng, seconds_lng, hemisphere_lng,
            )
        )

    @classmethod
    def from_ddm(
        cls,
        degrees_lat: int,
        minutes_lat: float,
        hemisphere_lat: str,
        degrees_lng: int,
        minutes_lng: float,
        hemisphere_lng: str,
    ) -> "Coordinate":
        return cls(DDM(degrees_lat, minutes_lat, hemisphere_lat, degrees_lng, minutes_lng, hemisphere_lng))

    @classmethod
    def from_utm(cls, zone: int, latitude_band: str, easting: float, northing: float) -> "Coordinate":
        return cls(UTM(zone, latitude_band, easting, northing))

    @classmethod
    def from_utm_string(cls, text: str) -> "Coordinate":
        """Build from ``"{zone}{band} {easting} {northing}"``."""
        return cls(UTM.parse(text))

    @classmethod
    def from_geohash(cls, geohash: str) -> "Coordinate":
        return cls(GeoHash(geohash))

    @classmethod
    def parse(cls, text: str, fmt: CoordinateFormat | str) -> "Coordinate":
        """Parse text written in the template of ``fmt``."""
        return cls(_TYPES[CoordinateFormat(fmt)].parse(text))

    @property
    def kind(self) -> CoordinateFormat:
        for fmt, value_type in _TYPES.items():
            if type(self.value) is value_type:
                return fmt
        raise AssertionError(f"unhandled representation {type(self.value).__name__}")

    @property
    def latitude(self) -> float:
        return self.to_latlng().latitude

    @property
    def longitude(self) -> float:
        return self.to_latlng().longitude

    def to_latlng(self) -> LatLng:
        return _TO_LATLNG[type(self.value)](self.value)

    def convert(self, target: CoordinateFormat | str) -> "Coordinate":
        """Return a new coordinate in ``target``; identity when already there."""
        target = CoordinateFormat(target)
        if target is self.kind:
            return self
        return Coordinate(_FROM_LATLNG[target](self.to_latlng()))

    def format(self, target: CoordinateFormat | str, precision: int = -1) -> str:
        """Convert to ``target`` and render at ``precision`` (-1 for the default)."""
        return self.convert(target).to_string(precision)

    def to_string(self, precision: int = -1) -> str:
        return self.value.to_string(precision)

    def __str__(self) -> str:
        return self.to_string()
