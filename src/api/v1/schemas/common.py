"""Common Pydantic schemas shared across the API."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standardized error response."""

    error_code: str
    message: str
    details: Any | None = None


# OpenAPI ``responses`` entries reused by every route module
ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Business rule violation"},
    401: {"model": ErrorResponse, "description": "Missing or invalid bearer token"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}
