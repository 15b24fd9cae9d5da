"""
Custom exception hierarchy for geocoord.

This module defines the exception hierarchy raised by the coordinate
parsers and converters. Every failure carries a machine-readable error
code and a human-readable message so that an outer tool layer can map it
to its own protocol-level failure.
"""

from typing import TYPE_CHECKING, Any, Dict, List, Optional

if TYPE_CHECKING:
    from geocoord.models.errors import ErrorResponse


class GeocoordException(Exception):
    """
    Base exception for all geocoord-specific errors.

    Attributes:
        error_code: String identifier for the error type
        message: User-friendly error message
        details: Technical details for logging/debugging
        suggestions: Optional list of resolution suggestions
    """

    def __init__(
        self,
        message: str,
        error_code: str,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize GeocoordException.

        Args:
            message: User-friendly error message
            error_code: String identifier for the error type
            details: Technical details for logging
            suggestions: List of suggestions for resolution
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.suggestions = suggestions or []

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert exception to dictionary.

        Returns:
            Dictionary representation of the error
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details,
            "suggestions": self.suggestions,
        }

    def to_response(self) -> "ErrorResponse":
        """Convert exception to a serializable error response model."""
        from geocoord.models.errors import ErrorResponse

        return ErrorResponse(**self.to_dict())

    def __str__(self) -> str:
        """String representation of the exception."""
        return f"{self.error_code}: {self.message}"

    def __repr__(self) -> str:
        """Detailed string representation for debugging."""
        return (
            f"{self.__class__.__name__}("
            f"error_code='{self.error_code}', "
            f"message='{self.message}')"
        )


class CoordinateError(GeocoordException):
    """
    Base class for coordinate parsing and conversion failures.

    Catch this to handle every failure raised by parse() and to_mgrs().
    """


class EmptyInputError(CoordinateError):
    """Raised when the input text is empty or whitespace only."""

    def __init__(self, message: str = "Empty coordinate string"):
        super().__init__(
            message=message,
            error_code="EMPTY_INPUT",
            suggestions=["Provide a coordinate such as '19.856, 99.817'"],
        )


class NotRecognizedError(CoordinateError):
    """
    Raised when the input matches none of the supported formats.

    The original input is kept in ``details["input"]`` so callers can fall
    back to a place-name lookup.
    """

    def __init__(self, text: str, message: Optional[str] = None):
        default_suggestions = [
            "Use decimal degrees, e.g. '19.856, 99.817'",
            "Use DMS, e.g. 19°51'22\"N 99°49'0\"E",
            "Use UTM, e.g. '47N 500000 2200000'",
            "Use MGRS, e.g. '47QME8598697460'",
        ]

        super().__init__(
            message=message or f"Unrecognized coordinate format: {text!r}",
            error_code="NOT_RECOGNIZED",
            details={"input": text},
            suggestions=default_suggestions,
        )
        self.input = text


class MalformedFieldError(CoordinateError):
    """
    Raised when a format matched but one of its fields is unusable.

    Used for zones outside 1-60, numeric groups that fail conversion and
    conflicting sign information.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        error_details = details or {}
        if field:
            error_details["field"] = field
        if value is not None:
            error_details["value"] = value

        super().__init__(
            message=message,
            error_code="MALFORMED_FIELD",
            details=error_details,
            suggestions=["Check each field of the coordinate and try again"],
        )


class RangeError(CoordinateError):
    """Raised when well-formed numbers fall outside geographic bounds."""

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[float] = None,
        limit: Optional[float] = None,
    ):
        error_details: Dict[str, Any] = {}
        if field:
            error_details["field"] = field
        if value is not None:
            error_details["value"] = value
        if limit is not None:
            error_details["limit"] = limit

        super().__init__(
            message=message,
            error_code="RANGE_ERROR",
            details=error_details,
            suggestions=[
                "Latitude must be between -90 and 90",
                "Longitude must be between -180 and 180",
            ],
        )


class ConversionError(CoordinateError):
    """
    Raised when geodetic conversion fails or yields an invalid location.

    Used for MGRS decode/encode failures and for UTM inverse projections
    that land outside the valid latitude/longitude range.
    """

    def __init__(
        self,
        message: str,
        source_format: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        error_details = details or {}
        if source_format:
            error_details["source_format"] = source_format

        super().__init__(
            message=message,
            error_code="CONVERSION_ERROR",
            details=error_details,
            suggestions=["Verify the grid zone and numeric location are valid"],
        )


class ConfigurationError(GeocoordException):
    """
    Raised when application configuration is invalid.

    Used for out-of-range settings such as an unsupported default MGRS
    precision.
    """

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        suggestions: Optional[List[str]] = None,
    ):
        """
        Initialize ConfigurationError.

        Args:
            message: User-friendly error message
            config_key: Configuration key that is invalid
            details: Technical details about the configuration error
            suggestions: List of suggestions for resolution
        """
        error_details = details or {}
        if config_key:
            error_details["config_key"] = config_key

        default_suggestions = [
            "Check GEOCOORD_* environment variables are set correctly",
            "Verify .env file syntax",
        ]

        super().__init__(
            message=message,
            error_code="CONFIGURATION_ERROR",
            details=error_details,
            suggestions=suggestions or default_suggestions,
        )
