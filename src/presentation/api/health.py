"""Health check endpoint for service monitoring."""

from fastapi import APIRouter

from src import __version__
from src.domain.entities import utcnow
from src.presentation.schemas import HealthResponse, format_timestamp

health_router = APIRouter()


@health_router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health Check",
    description="Returns the health status of the service.",
)
async def health_check() -> HealthResponse:
    return HealthResponse(
        status="healthy",
        timestamp=format_timestamp(utcnow()),
        version=__version__,
    )
