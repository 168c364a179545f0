"""Sample transactions loaded into a fresh store at startup."""

from datetime import datetime, timezone
from decimal import Decimal
from typing import List

from src.domain.entities import Currency, Transaction


def sample_transactions() -> List[Transaction]:
    """Build the demo records shown on an empty dashboard."""
    return [
        Transaction(
            id="txn_001",
            date=datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc),
            customer_name="John Smith",
            amount=Decimal("1250.00"),
            currency=Currency.USD,
        ),
        Transaction(
            id="txn_002",
            date=datetime(2024, 1, 14, 14, 22, tzinfo=timezone.utc),
            customer_name="Sarah Johnson",
            amount=Decimal("875.50"),
            currency=Currency.USD,
        ),
        Transaction(
            id="txn_003",
            date=datetime(2024, 1, 13, 9, 15, tzinfo=timezone.utc),
            customer_name="Michael Brown",
            amount=Decimal("2100.75"),
            currency=Currency.EUR,
        ),
        Transaction(
            id="txn_004",
            date=datetime(2024, 1, 12, 16, 45, tzinfo=timezone.utc),
            customer_name="Emily Davis",
            amount=Decimal("450.25"),
            currency=Currency.GBP,
        ),
        Transaction(
            id="txn_005",
            date=datetime(2024, 1, 11, 11, 0, tzinfo=timezone.utc),
            customer_name="David Wilson",
            amount=Decimal("3200.00"),
            currency=Currency.CAD,
        ),
    ]
