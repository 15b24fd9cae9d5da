"""
Pydantic models for standardized error payloads.

An outer tool layer serializes these when it reports a coordinate
failure to its own clients.
"""

from typing import Any, Dict, List

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """
    Standardized error payload for coordinate failures.

    Attributes:
        error_code: Machine-readable error identifier (e.g., 'RANGE_ERROR')
        message: Human-readable error message
        details: Additional technical details
        suggestions: Actionable suggestions for resolution
    """

    error_code: str = Field(
        ...,
        description="Machine-readable error code",
        examples=["NOT_RECOGNIZED", "RANGE_ERROR", "CONVERSION_ERROR"],
    )
    message: str = Field(..., description="Human-readable error message")
    details: Dict[str, Any] = Field(
        default_factory=dict, description="Additional technical details"
    )
    suggestions: List[str] = Field(
        default_factory=list, description="Suggestions for resolving the error"
    )

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "error_code": "RANGE_ERROR",
                "message": "Latitude out of range: 91.0",
                "details": {"field": "latitude", "value": 91.0, "limit": 90.0},
                "suggestions": ["Latitude must be between -90 and 90"],
            }
        },
    )
