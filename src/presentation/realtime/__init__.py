"""Realtime (WebSocket) delivery of dashboard events."""

from .broadcaster import RealtimeBroadcaster
from .connection_manager import ConnectionManager

__all__ = [
    "ConnectionManager",
    "RealtimeBroadcaster",
]
