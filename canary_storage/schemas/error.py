"""
Pydantic schemas for error responses.
"""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """
    Standard error response format.

    Examples:
        400: {"error": "ambiguous_account", "message": "...", "details": {...}}
        404: {"error": "not_found", "message": "..."}
        503: {"error": "backend_unavailable", "message": "..."}
    """

    error: str = Field(
        ...,
        description="Error code string",
        examples=["unknown_account", "no_account_configured", "not_found"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] | None = Field(
        default=None,
        description="Optional additional error details",
    )
