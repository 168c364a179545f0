"""Domain Entities - Core business objects."""

from .analytics import Analytics, ANALYTICS_CURRENCY
from .events import TransactionCreated
from .transaction import Currency, Transaction, utcnow

__all__ = [
    "Analytics",
    "ANALYTICS_CURRENCY",
    "Currency",
    "Transaction",
    "TransactionCreated",
    "utcnow",
]
