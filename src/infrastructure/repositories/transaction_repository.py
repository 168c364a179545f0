"""In-memory repository implementation for transactions."""

from datetime import datetime
from decimal import Decimal
from typing import Dict, Iterable, List, Optional
from uuid import uuid4

from src.domain.entities import Analytics, Currency, Transaction, utcnow
from src.domain.interfaces import TransactionRepository


class InMemoryTransactionRepository(TransactionRepository):
    """
    Process-local transaction repository.

    Keeps an ordered list for listing plus an id map for uniqueness.
    Nothing survives a restart.
    """

    def __init__(self, transactions: Optional[Iterable[Transaction]] = None):
        self._transactions: List[Transaction] = []
        self._by_id: Dict[str, Transaction] = {}

        for transaction in transactions or ():
            self._append(transaction)
        self._sort()

    async def create(
        self,
        customer_name: str,
        amount: Decimal,
        currency: Currency,
        date: Optional[datetime] = None,
    ) -> Transaction:
        transaction = Transaction(
            id=self._new_id(),
            date=date or utcnow(),
            customer_name=customer_name,
            amount=amount,
            currency=currency,
        )

        self._append(transaction)
        self._sort()

        return transaction

    async def list(self) -> List[Transaction]:
        return list(self._transactions)

    async def compute_analytics(self) -> Analytics:
        total = sum((t.amount for t in self._transactions), Decimal("0"))

        return Analytics(
            total_revenue=total.quantize(Decimal("0.01")),
            transaction_count=len(self._transactions),
        )

    def _new_id(self) -> str:
        transaction_id = str(uuid4())
        while transaction_id in self._by_id:
            transaction_id = str(uuid4())
        return transaction_id

    def _append(self, transaction: Transaction) -> None:
        if transaction.id in self._by_id:
            raise ValueError(f"Duplicate transaction id: {transaction.id}")
        self._transactions.append(transaction)
        self._by_id[transaction.id] = transaction

    def _sort(self) -> None:
        # Stable sort: equal dates keep insertion order.
        self._transactions.sort(key=lambda t: t.date, reverse=True)
