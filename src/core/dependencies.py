"""Dependency injection for FastAPI."""

from typing import Annotated

from fastapi import Depends, Request, WebSocket

from src.domain.interfaces import EventPublisher, TransactionRepository
from src.application.services import TransactionService
from src.presentation.realtime import ConnectionManager


# State dependencies. Each app instance owns its store and sockets.
def get_transaction_repository(request: Request) -> TransactionRepository:
    """Get the app's TransactionRepository."""
    return request.app.state.transaction_repository


def get_event_publisher(request: Request) -> EventPublisher:
    """Get the app's EventPublisher."""
    return request.app.state.event_publisher


def get_connection_manager(websocket: WebSocket) -> ConnectionManager:
    """Get the app's realtime ConnectionManager."""
    return websocket.app.state.connection_manager


# Service dependencies
def get_transaction_service(
    transaction_repo: Annotated[TransactionRepository, Depends(get_transaction_repository)],
    event_publisher: Annotated[EventPublisher, Depends(get_event_publisher)],
) -> TransactionService:
    """Get a TransactionService instance with all dependencies."""
    return TransactionService(
        transaction_repository=transaction_repo,
        event_publisher=event_publisher,
    )
