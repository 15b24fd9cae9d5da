"""
Coordinate format detection.

This module classifies free-form text into one of the supported
coordinate notations by ordered pattern matching. The same compiled
patterns are used by the per-format parsers, so detection and parsing
can never disagree about which notation a string is written in.
"""

import re
from typing import Dict, Optional, Pattern

from geocoord.models.coords import CoordinateFormat

# Grid zone (1-60) + latitude band (C-X without I, O) + 100 km square id
# + an even number of digits, 2 to 10.
# Examples: 47QME8598697460, 18SUJ23370651, 4QFJ1234
MGRS_PATTERN: Pattern[str] = re.compile(
    r"^(\d{1,2})([C-HJ-NP-X])([A-HJ-NP-Z]{2})((?:\d{2}){1,5})$",
    re.IGNORECASE,
)

# Zone + band/hemisphere letter + easting + northing
# Examples: "47N 485986 2197460", "18T 234567 4567890"
UTM_PATTERN: Pattern[str] = re.compile(
    r"^(\d{1,2})([A-Z])\s+(\d+)\s+(\d+)$",
    re.IGNORECASE,
)

# Degrees, minutes, seconds and direction for latitude then longitude
# Examples: 19°51'22"N 99°48'59"E, 19d51m22sN 99d48m59sE, 19 51 22 N 99 48 59 E
DMS_PATTERN: Pattern[str] = re.compile(
    r"^(-?\d+)[°d\s]+(\d+)[′'m\s]+(\d+(?:\.\d+)?)[″\"s]?\s*([NS])"
    r"[\s,]+"
    r"(-?\d+)[°d\s]+(\d+)[′'m\s]+(\d+(?:\.\d+)?)[″\"s]?\s*([EW])$",
    re.IGNORECASE,
)

# Two signed numbers separated by a comma and/or whitespace
# Examples: "19.856, 99.816", "19.856 99.816", "-33.8688, 151.2093"
DECIMAL_PATTERN: Pattern[str] = re.compile(
    r"^(-?\d+\.?\d*)[,\s]+(-?\d+\.?\d*)$"
)

# Any letter disqualifies a string from being decimal degrees
LETTER_PATTERN: Pattern[str] = re.compile(r"[^\W\d_]")

# Most specific first; a looser grammar must not shadow a stricter one
FORMAT_PRIORITY = (
    CoordinateFormat.MGRS,
    CoordinateFormat.UTM,
    CoordinateFormat.DMS,
    CoordinateFormat.DECIMAL,
)

_PATTERNS: Dict[CoordinateFormat, Pattern[str]] = {
    CoordinateFormat.MGRS: MGRS_PATTERN,
    CoordinateFormat.UTM: UTM_PATTERN,
    CoordinateFormat.DMS: DMS_PATTERN,
    CoordinateFormat.DECIMAL: DECIMAL_PATTERN,
}


def match_format(text: str, coordinate_format: CoordinateFormat) -> Optional["re.Match[str]"]:
    """
    Match stripped text against the pattern of a single format.

    Args:
        text: Candidate coordinate string
        coordinate_format: Format whose pattern to apply

    Returns:
        The match object, or None if the text is not in that format
    """
    pattern = _PATTERNS.get(coordinate_format)
    if pattern is None:
        return None

    text = text.strip()
    if coordinate_format is CoordinateFormat.DECIMAL and LETTER_PATTERN.search(text):
        return None

    return pattern.match(text)


def detect_format(text: str) -> CoordinateFormat:
    """
    Detect the coordinate format of a string without converting it.

    Every input maps to exactly one format; UNKNOWN is returned for empty
    strings and for anything that is not a coordinate.

    Args:
        text: Candidate coordinate string

    Returns:
        Detected CoordinateFormat
    """
    text = text.strip()
    if not text:
        return CoordinateFormat.UNKNOWN

    for coordinate_format in FORMAT_PRIORITY:
        if match_format(text, coordinate_format):
            return coordinate_format

    return CoordinateFormat.UNKNOWN


def is_coordinate(text: str) -> bool:
    """
    Check whether a string looks like a coordinate in any supported format.

    Used to decide between treating an argument as a coordinate or handing
    it to a place-name geocoder.
    """
    return detect_format(text) is not CoordinateFormat.UNKNOWN
