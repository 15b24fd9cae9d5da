"""
Data models for parsed coordinates.

This module defines the value types produced by the coordinate parsers:
a WGS84 location, the notation family it was written in, and the result
record returned to callers.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Tuple

from geocoord.core.errors import RangeError

MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0
MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0


class CoordinateFormat(str, Enum):
    """Notation family of a coordinate string."""

    UNKNOWN = "unknown"
    DECIMAL = "decimal"  # 19.856, 99.817
    DMS = "dms"  # 19°51'22"N 99°49'0"E
    MGRS = "mgrs"  # 47QME8598697460
    UTM = "utm"  # 47N 500000 2200000

    def __str__(self) -> str:
        return self.value


def validate_lat_lon(latitude: float, longitude: float) -> None:
    """
    Check that a latitude/longitude pair lies within WGS84 bounds.

    Args:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees

    Raises:
        RangeError: If either value is out of range
    """
    if not MIN_LATITUDE <= latitude <= MAX_LATITUDE:
        raise RangeError(
            f"Latitude out of range: {latitude}",
            field="latitude",
            value=latitude,
            limit=MAX_LATITUDE,
        )
    if not MIN_LONGITUDE <= longitude <= MAX_LONGITUDE:
        raise RangeError(
            f"Longitude out of range: {longitude}",
            field="longitude",
            value=longitude,
            limit=MAX_LONGITUDE,
        )


@dataclass(frozen=True)
class Location:
    """
    A WGS84 position in decimal degrees.

    Attributes:
        latitude: Latitude (-90 to 90)
        longitude: Longitude (-180 to 180)
    """

    latitude: float
    longitude: float

    def __post_init__(self) -> None:
        """Reject out-of-range values instead of clamping them."""
        validate_lat_lon(self.latitude, self.longitude)

    def as_tuple(self) -> Tuple[float, float]:
        """Return (latitude, longitude)."""
        return (self.latitude, self.longitude)

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {"latitude": self.latitude, "longitude": self.longitude}

    def __str__(self) -> str:
        lat_dir = "N" if self.latitude >= 0 else "S"
        lon_dir = "E" if self.longitude >= 0 else "W"
        return f"{abs(self.latitude):.6f}°{lat_dir}, {abs(self.longitude):.6f}°{lon_dir}"


@dataclass(frozen=True)
class ParseResult:
    """
    Outcome of a successful coordinate parse.

    Attributes:
        location: Converted WGS84 position
        format: Notation family the input was recognised as
        original: Input text as supplied, with surrounding whitespace removed
    """

    location: Location
    format: CoordinateFormat
    original: str

    @property
    def latitude(self) -> float:
        return self.location.latitude

    @property
    def longitude(self) -> float:
        return self.location.longitude

    def to_dict(self) -> dict:
        """Convert to dictionary representation."""
        return {
            "location": self.location.to_dict(),
            "format": self.format.value,
            "original": self.original,
        }
