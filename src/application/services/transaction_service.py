"""Transaction service - handles transaction and analytics use cases."""

from typing import Any, List

import structlog

from src.core.metrics import (
    record_transaction_created,
    record_validation_failure,
)
from src.domain.entities import Analytics, Transaction, TransactionCreated
from src.domain.exceptions import InvalidTransactionException
from src.domain.interfaces import EventPublisher, TransactionRepository
from src.application.dto import CreateTransactionRequest

logger = structlog.get_logger(__name__)


class TransactionService:
    """
    Application service for sales transaction use cases.

    Writes go to the repository first; the resulting event is published
    only after the write has been committed.
    """

    def __init__(
        self,
        transaction_repository: TransactionRepository,
        event_publisher: EventPublisher,
    ):
        self._transaction_repo = transaction_repository
        self._publisher = event_publisher

    async def list_transactions(self) -> List[Transaction]:
        """
        List every stored transaction.

        Returns:
            Transactions ordered by date, newest first
        """
        transactions = await self._transaction_repo.list()
        logger.debug("transactions_listed", count=len(transactions))
        return transactions

    async def create_transaction(self, payload: Any) -> Transaction:
        """
        Validate a raw payload, store the transaction and broadcast it.

        Args:
            payload: Decoded request body

        Returns:
            The created transaction

        Raises:
            InvalidTransactionException: If the payload is invalid. The
                store is left untouched and nothing is published.
        """
        try:
            request = CreateTransactionRequest.from_payload(payload)
        except InvalidTransactionException as exc:
            record_validation_failure()
            logger.info("transaction_rejected", errors=exc.errors)
            raise

        transaction = await self._transaction_repo.create(
            customer_name=request.customer_name,
            amount=request.amount,
            currency=request.currency,
        )
        analytics = await self._transaction_repo.compute_analytics()

        log = logger.bind(transaction_id=transaction.id)
        log.info(
            "transaction_created",
            amount=str(transaction.amount),
            currency=transaction.currency.value,
            transaction_count=analytics.transaction_count,
        )
        record_transaction_created(transaction.currency.value, analytics)

        # Delivery problems must not fail a committed write
        try:
            await self._publisher.publish_transaction_created(
                TransactionCreated(transaction=transaction, analytics=analytics)
            )
        except Exception as e:
            log.error(
                "event_publish_failed",
                error=str(e),
                error_type=type(e).__name__,
            )

        return transaction

    async def get_analytics(self) -> Analytics:
        """
        Compute revenue analytics over all stored transactions.

        Returns:
            Analytics with total revenue and transaction count
        """
        analytics = await self._transaction_repo.compute_analytics()
        logger.debug(
            "analytics_computed",
            total_revenue=str(analytics.total_revenue),
            transaction_count=analytics.transaction_count,
        )
        return analytics
