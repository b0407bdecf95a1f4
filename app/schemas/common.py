"""
Common response schemas for consistent API structure.
"""
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponseSchema(BaseModel):
    """Standard error response format."""
    model_config = ConfigDict(from_attributes=True)

    error: str = Field(..., description="Error message", json_schema_extra={"example": "Validation failed"})
    details: list[Any] | dict[str, Any] | str | None = Field(None, description="Additional error details", json_schema_extra={"example": [{"field": "name", "message": "Field required"}]})
    code: str | None = Field(None, description="Machine-readable error code", json_schema_extra={"example": "RECORD_NOT_FOUND"})
    correlationId: str | None = Field(None, description="Request correlation ID")
