"""
Coordinate parsing and conversion module.

This module provides:
- Format detection for decimal, DMS, UTM and MGRS notations
- Per-format parsers producing WGS84 locations
- The closed-form UTM inverse projection
- MGRS encoding and decoding
- A single parse() entry point trying every format in priority order
"""

from geocoord.core.coords.detector import (
    FORMAT_PRIORITY,
    detect_format,
    is_coordinate,
)
from geocoord.core.coords.grid import (
    MGRS_PRECISION_METERS,
    decode_mgrs,
    mgrs_precision_for,
    to_mgrs,
)
from geocoord.core.coords.normalizer import parse
from geocoord.core.coords.parsers import (
    parse_decimal,
    parse_dms,
    parse_mgrs,
    parse_utm,
)
from geocoord.core.coords.transformer import (
    TransformationError,
    compare_batch,
    reference_utm_to_wgs84,
    validate_utm_accuracy,
)
from geocoord.core.coords.utm import (
    calculate_utm_central_meridian,
    get_utm_epsg,
    get_utm_letter_designator,
    get_utm_zone_bounds,
    is_northern_band,
    utm_to_latlon,
)

__all__ = [
    # Detector
    "FORMAT_PRIORITY",
    "detect_format",
    "is_coordinate",
    # MGRS grid
    "MGRS_PRECISION_METERS",
    "decode_mgrs",
    "mgrs_precision_for",
    "to_mgrs",
    # Normalizer
    "parse",
    # Parsers
    "parse_decimal",
    "parse_dms",
    "parse_mgrs",
    "parse_utm",
    # PROJ reference
    "TransformationError",
    "compare_batch",
    "reference_utm_to_wgs84",
    "validate_utm_accuracy",
    # UTM utilities
    "calculate_utm_central_meridian",
    "get_utm_epsg",
    "get_utm_letter_designator",
    "get_utm_zone_bounds",
    "is_northern_band",
    "utm_to_latlon",
]
