"""WebSocket endpoint for dashboard clients."""

import json
from typing import Annotated

import structlog
from fastapi import APIRouter, Depends, WebSocket

from src.core.dependencies import get_connection_manager
from src.presentation.realtime import ConnectionManager
from src.presentation.realtime.events import (
    CLIENT_JOIN,
    CLIENT_LEAVE,
    SERVER_CONNECTED,
    SERVER_ERROR,
)
from src.presentation.schemas import ErrorResponseSchema

logger = structlog.get_logger(__name__)

realtime_router = APIRouter()


def _error(message: str) -> dict:
    return ErrorResponseSchema(
        error="INVALID_EVENT",
        message=message,
        status_code=400,
    ).to_payload()


def _parse_event(raw: str | None) -> str | None:
    if raw is None:
        return None
    try:
        message = json.loads(raw)
    except json.JSONDecodeError:
        return None
    if not isinstance(message, dict) or not isinstance(message.get("event"), str):
        return None
    return message["event"]


@realtime_router.websocket("/ws")
async def dashboard_socket(
    websocket: WebSocket,
    manager: Annotated[ConnectionManager, Depends(get_connection_manager)],
):
    client_id = await manager.connect(websocket)
    try:
        await manager.send(
            client_id,
            SERVER_CONNECTED,
            {"message": "Connected to Kalos Sales Dashboard"},
        )
        while True:
            message = await websocket.receive()
            if message["type"] == "websocket.disconnect":
                break
            # Binary frames carry no "text" and count as malformed
            event = _parse_event(message.get("text"))

            if event == CLIENT_JOIN:
                manager.join(client_id)
            elif event == CLIENT_LEAVE:
                manager.leave(client_id)
            elif event is None:
                await manager.send(client_id, SERVER_ERROR, _error("Malformed message"))
            else:
                logger.info("unknown_client_event", client_id=client_id, client_event=event)
                await manager.send(
                    client_id,
                    SERVER_ERROR,
                    _error(f"Unknown event: {event}"),
                )
    finally:
        manager.disconnect(client_id)
