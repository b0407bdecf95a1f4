"""Health check response schemas."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response body of the liveness and readiness probes."""

    status: str = Field(..., description="Probe status", json_schema_extra={"example": "ready"})
    ready: bool = Field(..., description="Whether the application can serve requests")
