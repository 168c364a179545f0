"""Event publisher interfaces."""

from abc import ABC, abstractmethod

from src.domain.entities import TransactionCreated


class EventPublisher(ABC):
    """
    Abstract sink for domain events.

    Publishing happens after the write is committed; delivery is
    best-effort and never undoes the write.
    """

    @abstractmethod
    async def publish_transaction_created(self, event: TransactionCreated) -> None:
        """
        Deliver a transaction created event to subscribers.

        Args:
            event: The committed transaction and the analytics snapshot
        """
        ...
