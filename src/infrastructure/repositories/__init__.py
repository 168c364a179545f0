"""Repository implementations."""

from .sample_data import sample_transactions
from .transaction_repository import InMemoryTransactionRepository

__all__ = [
    "InMemoryTransactionRepository",
    "sample_transactions",
]
