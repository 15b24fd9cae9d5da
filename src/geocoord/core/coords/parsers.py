"""
Per-format coordinate parsers.

Each parser accepts a string in exactly one notation, validates its
fields and returns a ParseResult holding a WGS84 location. Pattern
mismatches raise NotRecognizedError; matched strings with unusable
fields raise MalformedFieldError or RangeError; failed geodetic
conversions raise ConversionError.
"""

import logging
import math

from geocoord.core.coords.detector import match_format
from geocoord.core.coords.grid import decode_mgrs
from geocoord.core.coords.utm import is_northern_band, utm_to_latlon
from geocoord.core.errors import (
    ConversionError,
    MalformedFieldError,
    NotRecognizedError,
    RangeError,
)
from geocoord.models.coords import CoordinateFormat, Location, ParseResult

logger = logging.getLogger(__name__)

MAX_DMS_MINUTES = 60
MAX_DMS_SECONDS = 60


def _to_float(value: str, field: str) -> float:
    try:
        number = float(value)
    except ValueError as e:
        raise MalformedFieldError(f"Invalid {field}: {value}", field=field, value=value) from e
    if not math.isfinite(number):
        raise MalformedFieldError(f"Invalid {field}: {value}", field=field, value=value)
    return number


def parse_decimal(text: str) -> ParseResult:
    """
    Parse a decimal degrees coordinate string.

    Examples:
        19.856, 99.816
        19.856 99.816
        -33.8688, 151.2093

    Args:
        text: "lat, lon" or "lat lon"

    Returns:
        ParseResult with format DECIMAL; values are not rounded

    Raises:
        NotRecognizedError: If the text is not decimal degrees
        RangeError: If latitude or longitude is out of range
    """
    text = text.strip()
    match = match_format(text, CoordinateFormat.DECIMAL)
    if match is None:
        raise NotRecognizedError(text, message=f"Invalid decimal format: {text!r}")

    latitude = _to_float(match.group(1), "latitude")
    longitude = _to_float(match.group(2), "longitude")

    if abs(latitude) > 90:
        raise RangeError(
            f"Latitude out of range: {latitude}", field="latitude", value=latitude, limit=90.0
        )
    if abs(longitude) > 180:
        raise RangeError(
            f"Longitude out of range: {longitude}", field="longitude", value=longitude, limit=180.0
        )

    return ParseResult(
        location=Location(latitude=latitude, longitude=longitude),
        format=CoordinateFormat.DECIMAL,
        original=text,
    )


def _dms_component(
    degrees: str,
    minutes: str,
    seconds: str,
    direction: str,
    field: str,
    max_degrees: int,
) -> float:
    """Validate one DMS group and convert it to signed decimal degrees."""
    if degrees.startswith("-"):
        # A sign and a hemisphere letter together are ambiguous
        raise MalformedFieldError(
            f"Conflicting sign and hemisphere in {field}: {degrees} {direction}",
            field=field,
            value=f"{degrees}{direction}",
        )

    deg = _to_float(degrees, f"{field} degrees")
    mins = _to_float(minutes, f"{field} minutes")
    secs = _to_float(seconds, f"{field} seconds")

    if deg > max_degrees:
        raise RangeError(
            f"Invalid {field} degrees: {deg}", field=field, value=deg, limit=float(max_degrees)
        )
    if not 0 <= mins < MAX_DMS_MINUTES:
        raise RangeError(
            f"Invalid {field} minutes: {mins}", field=field, value=mins, limit=float(MAX_DMS_MINUTES)
        )
    if not 0 <= secs < MAX_DMS_SECONDS:
        raise RangeError(
            f"Invalid {field} seconds: {secs}", field=field, value=secs, limit=float(MAX_DMS_SECONDS)
        )

    value = deg + mins / 60 + secs / 3600
    if direction.upper() in ("S", "W"):
        value = -value
    return value


def parse_dms(text: str) -> ParseResult:
    """
    Parse a degrees-minutes-seconds coordinate string.

    Examples:
        19°51'22"N 99°48'59"E
        19d51m22sN 99d48m59sE
        19 51 22 N 99 48 59 E

    Args:
        text: Latitude group ending in N/S, then longitude group ending in E/W

    Returns:
        ParseResult with format DMS

    Raises:
        NotRecognizedError: If the text is not DMS
        MalformedFieldError: If a degree field carries a sign
        RangeError: If degrees, minutes or seconds are out of range
    """
    text = text.strip()
    match = match_format(text, CoordinateFormat.DMS)
    if match is None:
        raise NotRecognizedError(text, message=f"Invalid DMS format: {text!r}")

    lat_deg, lat_min, lat_sec, lat_dir, lon_deg, lon_min, lon_sec, lon_dir = match.groups()

    latitude = _dms_component(lat_deg, lat_min, lat_sec, lat_dir, "latitude", 90)
    longitude = _dms_component(lon_deg, lon_min, lon_sec, lon_dir, "longitude", 180)

    # Location rejects e.g. 90°30'0"N, which passes the per-field checks
    return ParseResult(
        location=Location(latitude=latitude, longitude=longitude),
        format=CoordinateFormat.DMS,
        original=text,
    )


def parse_utm(text: str) -> ParseResult:
    """
    Parse a UTM coordinate string.

    Examples:
        47N 485986 2197460
        18T 234567 4567890

    Args:
        text: Zone and band letter, easting, northing

    Returns:
        ParseResult with format UTM

    Raises:
        NotRecognizedError: If the text is not UTM
        MalformedFieldError: If the zone is not 1-60 or a number is unusable
        ConversionError: If the projected position is out of range
    """
    text = text.strip()
    match = match_format(text, CoordinateFormat.UTM)
    if match is None:
        raise NotRecognizedError(text, message=f"Invalid UTM format: {text!r}")

    zone_text, band, easting_text, northing_text = match.groups()

    zone = int(zone_text)
    if not 1 <= zone <= 60:
        raise MalformedFieldError(f"Invalid UTM zone: {zone_text}", field="zone", value=zone_text)

    easting = _to_float(easting_text, "easting")
    northing = _to_float(northing_text, "northing")

    latitude, longitude = utm_to_latlon(zone, easting, northing, is_northern_band(band))

    if not (-90 <= latitude <= 90 and -180 <= longitude <= 180):
        raise ConversionError(
            "UTM conversion produced invalid coordinates: "
            f"lat={latitude}, lon={longitude}",
            source_format="utm",
            details={"latitude": latitude, "longitude": longitude},
        )

    logger.debug(f"UTM {text!r} -> ({latitude:.6f}, {longitude:.6f})")

    return ParseResult(
        location=Location(latitude=latitude, longitude=longitude),
        format=CoordinateFormat.UTM,
        original=text,
    )


def parse_mgrs(text: str) -> ParseResult:
    """
    Parse an MGRS coordinate string.

    The numeric part may hold 2 to 10 digits (10 km down to 1 m); the
    returned location is the south-west corner of the referenced cell.

    Examples:
        47QME8598697460 (1 m)
        18SUJ23370651 (10 m)
        4QFJ1234 (1 km)

    Raises:
        NotRecognizedError: If the text is not MGRS
        ConversionError: If the reference cannot be decoded
    """
    text = text.strip()
    if match_format(text, CoordinateFormat.MGRS) is None:
        raise NotRecognizedError(text, message=f"Invalid MGRS format: {text!r}")

    latitude, longitude = decode_mgrs(text.upper())

    logger.debug(f"MGRS {text!r} -> ({latitude:.6f}, {longitude:.6f})")

    return ParseResult(
        location=Location(latitude=latitude, longitude=longitude),
        format=CoordinateFormat.MGRS,
        original=text,
    )
