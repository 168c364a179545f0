"""Transaction entity representing a single sale."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum
from uuid import uuid4


class Currency(str, Enum):
    """Currencies accepted for a sale."""

    USD = "USD"
    EUR = "EUR"
    GBP = "GBP"
    CAD = "CAD"
    AUD = "AUD"


def utcnow() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Transaction:
    """
    Immutable record of a single sale.

    Attributes:
        customer_name: Trimmed, non-empty customer name
        amount: Sale amount, already rounded to cents
        currency: Currency the sale was made in
        id: Opaque unique identifier
        date: When the sale happened (UTC)
    """

    customer_name: str
    amount: Decimal
    currency: Currency
    id: str = field(default_factory=lambda: str(uuid4()))
    date: datetime = field(default_factory=utcnow)
