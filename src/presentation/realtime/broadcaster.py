"""Realtime implementation of EventPublisher."""

import asyncio

import structlog

from src.domain.entities import TransactionCreated
from src.domain.interfaces import EventPublisher
from src.presentation.schemas import AnalyticsSchema, TransactionSchema
from .connection_manager import ConnectionManager
from .events import SERVER_ANALYTICS_UPDATED, SERVER_TRANSACTION_ADDED

logger = structlog.get_logger(__name__)


class RealtimeBroadcaster(EventPublisher):
    """
    Pushes committed transactions to every connected dashboard.

    Each creation fans out two events: the new record, then the
    analytics snapshot taken right after it was stored. Fan-outs run
    one at a time, so every client sees creations in commit order with
    each record directly followed by its own snapshot. Delivery is
    best-effort with no replay.
    """

    def __init__(self, manager: ConnectionManager):
        self._manager = manager
        self._fanout_lock = asyncio.Lock()

    async def publish_transaction_created(self, event: TransactionCreated) -> None:
        transaction = TransactionSchema.from_entity(event.transaction).to_payload()
        analytics = AnalyticsSchema.from_entity(event.analytics).to_payload()

        async with self._fanout_lock:
            delivered = await self._manager.broadcast(SERVER_TRANSACTION_ADDED, transaction)
            await self._manager.broadcast(SERVER_ANALYTICS_UPDATED, analytics)

        logger.info(
            "transaction_broadcast",
            transaction_id=event.transaction.id,
            recipients=delivered,
        )
