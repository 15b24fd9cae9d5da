"""
UTM zone utilities and the closed-form inverse projection.

This module converts Universal Transverse Mercator grid coordinates back
to WGS84 latitude/longitude without going through PROJ, using the
classic series expansion of the transverse Mercator inverse.
"""

import math
from typing import Tuple

from geocoord.core.errors import MalformedFieldError, RangeError

# WGS84 ellipsoid
SEMI_MAJOR_AXIS = 6378137.0  # a, meters
FLATTENING = 1 / 298.257223563  # f
SCALE_FACTOR = 0.9996  # k0 on the central meridian

FALSE_EASTING = 500000.0
FALSE_NORTHING_SOUTH = 10000000.0

# Latitude bands, south to north
BAND_LETTERS = "CDEFGHJKLMNPQRSTUVWX"
MIN_BAND_LATITUDE = -80.0
MAX_BAND_LATITUDE = 84.0

_B = SEMI_MAJOR_AXIS * (1 - FLATTENING)
_E2 = (SEMI_MAJOR_AXIS ** 2 - _B ** 2) / SEMI_MAJOR_AXIS ** 2  # first eccentricity squared
_EP2 = (SEMI_MAJOR_AXIS ** 2 - _B ** 2) / _B ** 2  # second eccentricity squared
_E1 = (1 - math.sqrt(1 - _E2)) / (1 + math.sqrt(1 - _E2))


def _check_zone(zone_number: int) -> None:
    if not 1 <= zone_number <= 60:
        raise MalformedFieldError(
            f"UTM zone must be between 1 and 60, got {zone_number}",
            field="zone",
            value=zone_number,
        )


def get_utm_epsg(zone_number: int, is_northern: bool) -> int:
    """
    Get EPSG code for UTM zone.

    Args:
        zone_number: UTM zone number (1-60)
        is_northern: True for northern hemisphere, False for southern

    Returns:
        EPSG code

    Raises:
        MalformedFieldError: If zone_number is out of valid range
    """
    _check_zone(zone_number)

    if is_northern:
        # Northern hemisphere: EPSG 32601 to 32660
        return 32600 + zone_number
    # Southern hemisphere: EPSG 32701 to 32760
    return 32700 + zone_number


def get_utm_zone_bounds(zone_number: int) -> Tuple[float, float]:
    """
    Get the longitude bounds for a UTM zone.

    Args:
        zone_number: UTM zone number (1-60)

    Returns:
        Tuple of (min_longitude, max_longitude)

    Raises:
        MalformedFieldError: If zone_number is out of valid range
    """
    _check_zone(zone_number)

    # Zone 1 starts at -180°, each zone is 6° wide
    min_lon = -180 + (zone_number - 1) * 6
    max_lon = min_lon + 6

    return (min_lon, max_lon)


def calculate_utm_central_meridian(zone_number: int) -> float:
    """
    Calculate the central meridian for a UTM zone.

    Args:
        zone_number: UTM zone number (1-60)

    Returns:
        Central meridian in decimal degrees

    Raises:
        MalformedFieldError: If zone_number is out of valid range
    """
    _check_zone(zone_number)

    return (zone_number - 1) * 6 - 180 + 3


def get_utm_letter_designator(latitude: float) -> str:
    """
    Get the latitude band letter for a latitude.

    Bands are 8 degrees tall from 80°S, lettered C to X without I and O;
    X stretches to 84°N.

    Args:
        latitude: Latitude in decimal degrees (-80 to 84)

    Returns:
        Band letter (C-X)

    Raises:
        RangeError: If latitude is outside the UTM band span
    """
    if not MIN_BAND_LATITUDE <= latitude <= MAX_BAND_LATITUDE:
        raise RangeError(
            f"UTM bands cover 80°S to 84°N, got {latitude}",
            field="latitude",
            value=latitude,
            limit=MAX_BAND_LATITUDE if latitude > 0 else MIN_BAND_LATITUDE,
        )

    if latitude >= 72:
        return "X"

    return BAND_LETTERS[int((latitude - MIN_BAND_LATITUDE) // 8)]


def is_northern_band(letter: str) -> bool:
    """
    Decide the hemisphere from a UTM band/hemisphere letter.

    Letters from 'N' onwards count as northern, everything before as
    southern. This treats a bare 'N'/'S' hemisphere marker and the
    C-X latitude bands the same way; 'S' therefore reads as the northern
    band S (32°N-40°N), not as "south".

    Args:
        letter: Single band letter, any case

    Returns:
        True for the northern hemisphere
    """
    return letter.upper() >= "N"


def utm_to_latlon(
    zone_number: int,
    easting: float,
    northing: float,
    is_northern: bool,
) -> Tuple[float, float]:
    """
    Convert UTM coordinates to WGS84 latitude/longitude.

    The result is not range-checked; callers validate it.

    Args:
        zone_number: UTM zone number (1-60)
        easting: Easting in meters, including the 500 km false easting
        northing: Northing in meters, including the false northing in the south
        is_northern: True for the northern hemisphere

    Returns:
        Tuple of (latitude, longitude) in decimal degrees

    Raises:
        MalformedFieldError: If zone_number is out of valid range
    """
    lon0 = math.radians(calculate_utm_central_meridian(zone_number))

    x = easting - FALSE_EASTING
    y = northing
    if not is_northern:
        y -= FALSE_NORTHING_SOUTH

    # Footpoint latitude from the rectifying latitude mu
    m = y / SCALE_FACTOR
    mu = m / (SEMI_MAJOR_AXIS * (1 - _E2 / 4 - 3 * _E2 * _E2 / 64 - 5 * _E2 * _E2 * _E2 / 256))

    e1 = _E1
    phi1 = (
        mu
        + (3 * e1 / 2 - 27 * e1 ** 3 / 32) * math.sin(2 * mu)
        + (21 * e1 ** 2 / 16 - 55 * e1 ** 4 / 32) * math.sin(4 * mu)
        + (151 * e1 ** 3 / 96) * math.sin(6 * mu)
        + (1097 * e1 ** 4 / 512) * math.sin(8 * mu)
    )

    sin_phi1 = math.sin(phi1)
    cos_phi1 = math.cos(phi1)
    tan_phi1 = math.tan(phi1)

    n1 = SEMI_MAJOR_AXIS / math.sqrt(1 - _E2 * sin_phi1 * sin_phi1)
    t1 = tan_phi1 * tan_phi1
    c1 = _EP2 * cos_phi1 * cos_phi1
    r1 = SEMI_MAJOR_AXIS * (1 - _E2) / (1 - _E2 * sin_phi1 * sin_phi1) ** 1.5

    # Plain products keep huge eastings at inf/nan instead of raising OverflowError
    d = x / (n1 * SCALE_FACTOR)
    d2 = d * d
    d3 = d2 * d
    d4 = d2 * d2
    d5 = d4 * d
    d6 = d4 * d2

    lat = phi1 - (n1 * tan_phi1 / r1) * (
        d2 / 2
        - (5 + 3 * t1 + 10 * c1 - 4 * c1 * c1 - 9 * _EP2) * d4 / 24
        + (61 + 90 * t1 + 298 * c1 + 45 * t1 * t1 - 252 * _EP2 - 3 * c1 * c1) * d6 / 720
    )

    lon = lon0 + (
        d
        - (1 + 2 * t1 + c1) * d3 / 6
        + (5 - 2 * c1 + 28 * t1 - 3 * c1 * c1 + 8 * _EP2 + 24 * t1 * t1) * d5 / 120
    ) / cos_phi1

    return math.degrees(lat), math.degrees(lon)
