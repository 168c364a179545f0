"""Domain events emitted after a successful write."""

from dataclasses import dataclass

from .analytics import Analytics
from .transaction import Transaction


@dataclass(frozen=True)
class TransactionCreated:
    """
    Published once a transaction has been committed to the store.

    The analytics snapshot is taken right after the mutation, so it
    always includes the new transaction.
    """

    transaction: Transaction
    analytics: Analytics
