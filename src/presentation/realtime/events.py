"""Realtime channel event names."""

# Client -> server
CLIENT_JOIN = "client:join"
CLIENT_LEAVE = "client:leave"

# Server -> client
SERVER_CONNECTED = "server:connected"
SERVER_DISCONNECTED = "server:disconnected"
SERVER_TRANSACTION_ADDED = "server:transaction-added"
SERVER_ANALYTICS_UPDATED = "server:analytics-updated"
SERVER_ERROR = "server:error"


def envelope(event: str, data) -> dict:
    """Wrap a payload in the frame format sent over the socket."""
    return {"event": event, "data": data}
