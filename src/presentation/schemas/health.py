"""Health check response schema."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Schema for GET /api/health response body."""

    status: str = Field("healthy", examples=["healthy"])
    timestamp: str = Field(
        ...,
        description="Server time, ISO 8601",
        examples=["2024-01-15T10:30:00.000Z"],
    )
    version: str = Field(..., examples=["0.1.0"])
