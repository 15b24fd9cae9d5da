"""
MGRS grid encoding and decoding.

Thin wrapper around the ``mgrs`` library (GeoTrans-based) that maps its
failures onto the geocoord exception hierarchy and enforces WGS84 range
checks on both sides of the conversion.
"""

import logging
from typing import Dict, Optional, Tuple

import mgrs

from geocoord.core.config import get_settings
from geocoord.core.errors import ConversionError
from geocoord.models.coords import validate_lat_lon

logger = logging.getLogger(__name__)

# Precision level -> grid resolution in meters
MGRS_PRECISION_METERS: Dict[int, int] = {
    1: 10000,
    2: 1000,
    3: 100,
    4: 10,
    5: 1,
}

MAX_PRECISION = 5


def mgrs_precision_for(meters: float) -> int:
    """
    Pick the coarsest MGRS precision whose cell is no larger than ``meters``.

    Args:
        meters: Desired resolution in meters

    Returns:
        Precision level 1-5 (5 when even 1 m is too coarse)
    """
    for level in sorted(MGRS_PRECISION_METERS):
        if MGRS_PRECISION_METERS[level] <= meters:
            return level
    return MAX_PRECISION


def decode_mgrs(grid_reference: str) -> Tuple[float, float]:
    """
    Decode an MGRS string to the south-west corner of its grid cell.

    Args:
        grid_reference: Upper-case MGRS string without spaces

    Returns:
        Tuple of (latitude, longitude) in decimal degrees

    Raises:
        ConversionError: If the library rejects the reference or the
            decoded position is out of range
    """
    try:
        latitude, longitude = mgrs.MGRS().toLatLon(grid_reference)
    except Exception as e:
        raise ConversionError(
            f"MGRS conversion failed for {grid_reference!r}: {e}",
            source_format="mgrs",
        ) from e

    if not (-90 <= latitude <= 90 and -180 <= longitude <= 180):
        raise ConversionError(
            "MGRS conversion produced invalid coordinates: "
            f"lat={latitude}, lon={longitude}",
            source_format="mgrs",
            details={"latitude": latitude, "longitude": longitude},
        )

    return latitude, longitude


def to_mgrs(latitude: float, longitude: float, precision: Optional[int] = None) -> str:
    """
    Convert a WGS84 position to an MGRS string.

    Precision 1-5 selects a 10 km, 1 km, 100 m, 10 m or 1 m grid. Any other
    value, booleans included, falls back to 5 (1 m); None uses the
    configured default.

    Args:
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
        precision: Precision level 1-5

    Returns:
        MGRS string, e.g. "47QME8598697460"

    Raises:
        RangeError: If the position is out of range
        ConversionError: If encoding fails
    """
    if precision is None:
        precision = get_settings().default_mgrs_precision
    if isinstance(precision, bool) or precision not in MGRS_PRECISION_METERS:
        precision = MAX_PRECISION
    precision = int(precision)

    validate_lat_lon(latitude, longitude)

    try:
        result = mgrs.MGRS().toMGRS(latitude, longitude, MGRSPrecision=precision)
    except Exception as e:
        raise ConversionError(
            f"MGRS conversion failed for lat={latitude}, lon={longitude}: {e}",
            source_format="decimal",
        ) from e

    logger.debug(f"Encoded ({latitude}, {longitude}) at precision {precision} as {result}")
    return result
