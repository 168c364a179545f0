"""
Fixtures for integration tests.

Provides:
- A fresh application (own store, own sockets) per test
- Async HTTP client over ASGITransport
- Sync TestClient for WebSocket tests
- Request bodies for common scenarios
"""

from typing import AsyncGenerator, Generator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient
from httpx import AsyncClient, ASGITransport

from src.core.config import Settings
from src.main import create_app


# =============================================================================
# App Fixtures
# =============================================================================

@pytest.fixture
def settings() -> Settings:
    """Settings with the sample data seeded."""
    return Settings(seed_sample_data=True, log_format="console", log_level="WARNING")


@pytest.fixture
def app(settings: Settings) -> FastAPI:
    """Create an isolated application instance."""
    return create_app(settings)


@pytest.fixture
def empty_app() -> FastAPI:
    """Create an application with an empty store."""
    return create_app(
        Settings(seed_sample_data=False, log_format="console", log_level="WARNING")
    )


# =============================================================================
# Client Fixtures
# =============================================================================

@pytest_asyncio.fixture
async def client(app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the seeded app."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def empty_client(empty_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the empty app."""
    transport = ASGITransport(app=empty_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def ws_client(app: FastAPI) -> Generator[TestClient, None, None]:
    """Sync client that runs the lifespan and supports WebSockets."""
    with TestClient(app) as test_client:
        yield test_client


# =============================================================================
# Helper Fixtures
# =============================================================================

@pytest.fixture
def ada_request() -> dict:
    """Valid request body for a USD sale."""
    return {
        "customerName": "Ada Lovelace",
        "amount": 150.5,
        "currency": "USD",
    }


@pytest.fixture
def empty_name_request() -> dict:
    """Request body with an empty customer name."""
    return {
        "customerName": "",
        "amount": 10,
        "currency": "USD",
    }


@pytest.fixture
def unsupported_currency_request() -> dict:
    """Request body with a currency outside the supported set."""
    return {
        "customerName": "Ada Lovelace",
        "amount": 10,
        "currency": "JPY",
    }
