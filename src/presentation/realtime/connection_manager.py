"""Connection manager for dashboard WebSocket clients."""

from typing import Any, Dict, Set
from uuid import uuid4

import structlog
from fastapi import WebSocket

from src.core.metrics import (
    record_realtime_event,
    record_realtime_failure,
    set_realtime_connections,
)
from .events import envelope

logger = structlog.get_logger(__name__)


class ConnectionManager:
    """
    Tracks open sockets and the broadcast group.

    A client joins the group when it connects and may leave and rejoin
    without disconnecting. No per-client state is kept beyond that.
    """

    def __init__(self) -> None:
        self.connections: Dict[str, WebSocket] = {}
        self.group: Set[str] = set()

    async def connect(self, websocket: WebSocket) -> str:
        await websocket.accept()
        client_id = str(uuid4())
        self.connections[client_id] = websocket
        self.group.add(client_id)
        set_realtime_connections(len(self.connections))
        logger.info("client_connected", client_id=client_id)
        return client_id

    def join(self, client_id: str) -> None:
        if client_id in self.connections:
            self.group.add(client_id)
            logger.info("client_joined", client_id=client_id)

    def leave(self, client_id: str) -> None:
        self.group.discard(client_id)
        logger.info("client_left", client_id=client_id)

    def disconnect(self, client_id: str) -> None:
        if self.connections.pop(client_id, None) is None:
            return
        self.group.discard(client_id)
        set_realtime_connections(len(self.connections))
        logger.info("client_disconnected", client_id=client_id)

    async def send(self, client_id: str, event: str, data: Any) -> bool:
        websocket = self.connections.get(client_id)
        if websocket is None:
            return False
        try:
            await websocket.send_json(envelope(event, data))
        except Exception as e:
            # A broken socket is dropped; the other clients are unaffected
            logger.warning(
                "client_send_failed",
                client_id=client_id,
                event=event,
                error=str(e),
            )
            record_realtime_failure()
            self.disconnect(client_id)
            return False
        record_realtime_event(event)
        return True

    async def broadcast(self, event: str, data: Any) -> int:
        """Send an event to every group member, returning how many got it."""
        delivered = 0
        for client_id in list(self.group):
            if await self.send(client_id, event, data):
                delivered += 1
        return delivered

    async def close_all(self, event: str, data: Any) -> None:
        """Notify every open socket, then close it."""
        for client_id in list(self.connections):
            websocket = self.connections[client_id]
            await self.send(client_id, event, data)
            try:
                await websocket.close()
            except Exception as e:
                logger.debug("client_close_failed", client_id=client_id, error=str(e))
            self.disconnect(client_id)
