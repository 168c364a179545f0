"""
Kalos Sales Dashboard - Main Application Entry Point

Serves the transaction and analytics REST API and the WebSocket
channel that pushes new transactions to connected dashboards.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
import uvicorn
from fastapi import FastAPI, Response
from fastapi.middleware.cors import CORSMiddleware

from src import __version__
from src.core.config import Settings, get_settings
from src.core.logging import setup_logging
from src.core.metrics import get_metrics, get_metrics_content_type, record_analytics
from src.domain.entities import utcnow
from src.infrastructure.repositories import (
    InMemoryTransactionRepository,
    sample_transactions,
)
from src.presentation.api import api_router, realtime_router
from src.presentation.middleware import (
    LoggingMiddleware,
    RequestContextMiddleware,
    error_handler_middleware,
)
from src.presentation.realtime import ConnectionManager, RealtimeBroadcaster
from src.presentation.realtime.events import SERVER_DISCONNECTED
from src.presentation.schemas import format_timestamp


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Application lifespan manager.

    Handles startup and shutdown events:
    - Set up logging
    - Publish the seeded totals to metrics
    - Tell connected dashboards the server is going away
    """
    setup_logging(app.state.settings)

    logger = structlog.get_logger(__name__)
    analytics = await app.state.transaction_repository.compute_analytics()
    record_analytics(analytics)
    logger.info(
        "application_started",
        version=__version__,
        transaction_count=analytics.transaction_count,
    )

    yield

    await app.state.connection_manager.close_all(
        SERVER_DISCONNECTED,
        {"message": "Server shutting down"},
    )
    logger.info("application_stopped")


def create_app(settings: Settings | None = None) -> FastAPI:
    """
    Build an application with its own store and realtime channel.

    Args:
        settings: Overrides the environment-derived settings
    """
    settings = settings or get_settings()

    app = FastAPI(
        title="Kalos Sales Dashboard API",
        description="Sales transactions, revenue analytics and live updates",
        version=__version__,
        debug=settings.debug,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    seed = sample_transactions() if settings.seed_sample_data else []
    connection_manager = ConnectionManager()

    app.state.settings = settings
    app.state.transaction_repository = InMemoryTransactionRepository(seed)
    app.state.connection_manager = connection_manager
    app.state.event_publisher = RealtimeBroadcaster(connection_manager)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_middleware(LoggingMiddleware)
    app.add_middleware(RequestContextMiddleware)

    error_handler_middleware(app)

    app.include_router(api_router)
    app.include_router(realtime_router)

    if settings.metrics_enabled:
        @app.get("/metrics", include_in_schema=False)
        async def metrics() -> Response:
            """Prometheus metrics endpoint."""
            return Response(
                content=get_metrics(),
                media_type=get_metrics_content_type(),
            )

    @app.get("/", include_in_schema=False)
    async def root() -> dict:
        return {
            "message": "Kalos Sales Dashboard API",
            "status": "running",
            "timestamp": format_timestamp(utcnow()),
        }

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn using the configured host and port."""
    settings = get_settings()
    uvicorn.run(
        "src.main:app",
        host=settings.host,
        port=settings.port,
        log_config=None,
    )
