"""Repository interfaces for transaction storage."""

from abc import ABC, abstractmethod
from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from src.domain.entities import Analytics, Currency, Transaction


class TransactionRepository(ABC):
    """
    Abstract repository for Transaction storage.

    Implementations may keep records in memory, in PostgreSQL, etc.
    Transactions are append-only: there is no update or delete.
    """

    @abstractmethod
    async def create(
        self,
        customer_name: str,
        amount: Decimal,
        currency: Currency,
        date: Optional[datetime] = None,
    ) -> Transaction:
        """
        Store a new transaction.

        Args:
            customer_name: Already trimmed customer name
            amount: Already rounded amount
            currency: Sale currency
            date: Sale time, defaults to now

        Returns:
            The stored transaction with its generated id
        """
        ...

    @abstractmethod
    async def list(self) -> List[Transaction]:
        """
        Retrieve every stored transaction.

        Returns:
            List of transactions, ordered by date descending
        """
        ...

    @abstractmethod
    async def compute_analytics(self) -> Analytics:
        """
        Aggregate revenue over every stored transaction.

        Returns:
            Analytics with total revenue and transaction count
        """
        ...
