"""
Coordinate normalization entry point.

parse() turns free-form coordinate text in any supported notation into a
WGS84 location by trying the per-format parsers in a fixed priority
order.
"""

import logging
from typing import Callable, Dict

from geocoord.core.coords.detector import FORMAT_PRIORITY
from geocoord.core.coords.parsers import parse_decimal, parse_dms, parse_mgrs, parse_utm
from geocoord.core.errors import CoordinateError, EmptyInputError, NotRecognizedError
from geocoord.models.coords import CoordinateFormat, ParseResult

logger = logging.getLogger(__name__)

PARSERS: Dict[CoordinateFormat, Callable[[str], ParseResult]] = {
    CoordinateFormat.MGRS: parse_mgrs,
    CoordinateFormat.UTM: parse_utm,
    CoordinateFormat.DMS: parse_dms,
    CoordinateFormat.DECIMAL: parse_decimal,
}


def parse(text: str) -> ParseResult:
    """
    Detect the coordinate format of ``text`` and convert it to decimal degrees.

    Formats are tried MGRS, UTM, DMS, then decimal; the first parser that
    both matches and validates wins. Individual parser failures are not
    surfaced; the caller gets a single NotRecognizedError instead.

    Args:
        text: Coordinate string in any supported notation

    Returns:
        ParseResult with the location, detected format and original text

    Raises:
        EmptyInputError: If ``text`` is empty or whitespace only
        NotRecognizedError: If no parser accepts ``text``
    """
    text = text.strip()
    if not text:
        raise EmptyInputError()

    for coordinate_format in FORMAT_PRIORITY:
        try:
            result = PARSERS[coordinate_format](text)
        except CoordinateError as e:
            logger.debug(f"{coordinate_format} parser rejected {text!r}: {e}")
            continue

        logger.debug(f"Parsed {text!r} as {coordinate_format}: {result.location}")
        return result

    logger.info(f"Unrecognized coordinate format: {text!r}")
    raise NotRecognizedError(text)
