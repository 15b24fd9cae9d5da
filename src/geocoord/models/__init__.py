"""
Data models and schemas.
"""

from .coords import (
    CoordinateFormat,
    Location,
    ParseResult,
    validate_lat_lon,
)
from .errors import ErrorResponse

__all__ = [
    "CoordinateFormat",
    "Location",
    "ParseResult",
    "validate_lat_lon",
    "ErrorResponse",
]
