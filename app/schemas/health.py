"""Health check API schemas."""

from datetime import datetime

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response for GET /health (liveness)."""

    status: str = Field(default="ok", description="Service status")
    timestamp: datetime = Field(..., description="Server time (UTC)")


class ReadinessResponse(BaseModel):
    """Response for GET /health/ready when ready."""

    status: str = Field(default="ready", description="Readiness status")
    database: str = Field(
        ..., description="'connected' or 'not-configured' (in-memory store)"
    )


class ReadinessErrorResponse(BaseModel):
    """Response for GET /health/ready when the database cannot be reached (503)."""

    status: str = Field(default="not_ready", description="Readiness status")
    message: str = Field(..., description="Reason (e.g. database unavailable)")
