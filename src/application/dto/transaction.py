"""Data transfer objects for transaction operations."""

import math
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP
from numbers import Real
from typing import Any, List

from src.domain.entities import Currency
from src.domain.exceptions import InvalidTransactionException

CENTS = Decimal("0.01")
# Keeps rounding and totals well inside the default decimal precision
MAX_AMOUNT = 1_000_000_000
SUPPORTED_CURRENCIES = ", ".join(c.value for c in Currency)


def round_to_cents(amount: float) -> Decimal:
    """Round half-up on the decimal form, so 19.995 becomes 20.00."""
    return Decimal(str(amount)).quantize(CENTS, rounding=ROUND_HALF_UP)


@dataclass(frozen=True)
class CreateTransactionRequest:
    """Normalized input for creating a transaction."""
    customer_name: str
    amount: Decimal
    currency: Currency

    @classmethod
    def from_payload(cls, payload: Any) -> "CreateTransactionRequest":
        """
        Validate an untyped request body and normalize it.

        Args:
            payload: Decoded JSON body, of any shape

        Returns:
            CreateTransactionRequest with a trimmed name and an amount
            rounded to cents

        Raises:
            InvalidTransactionException: If any field is missing or invalid
        """
        if not isinstance(payload, dict):
            raise InvalidTransactionException(["request body must be a JSON object"])

        errors = cls.validate(payload)
        if errors:
            raise InvalidTransactionException(errors)

        return cls(
            customer_name=payload["customerName"].strip(),
            amount=round_to_cents(payload["amount"]),
            currency=Currency(payload["currency"]),
        )

    @staticmethod
    def validate(payload: dict) -> List[str]:
        errors = []

        name = payload.get("customerName")
        if not isinstance(name, str) or not name.strip():
            errors.append("customerName is required")

        amount = payload.get("amount")
        if isinstance(amount, bool) or not isinstance(amount, Real):
            errors.append("amount must be a number")
        elif isinstance(amount, float) and not math.isfinite(amount):
            errors.append("amount must be finite")
        elif amount <= 0:
            errors.append("amount must be positive")
        elif amount > MAX_AMOUNT:
            errors.append(f"amount must not exceed {MAX_AMOUNT}")
        elif round_to_cents(amount) <= 0:
            errors.append("amount must be at least 0.01")

        currency = payload.get("currency")
        if not isinstance(currency, str) or currency not in Currency.__members__:
            errors.append(f"currency must be one of {SUPPORTED_CURRENCIES}")

        return errors
