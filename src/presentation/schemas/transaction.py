"""Transaction-related Pydantic schemas."""

from typing import List

from pydantic import Field

from src.domain.entities import Transaction
from .base import CamelModel, format_timestamp


class TransactionSchema(CamelModel):
    """A stored transaction."""

    id: str = Field(..., description="Unique transaction identifier")
    date: str = Field(
        ...,
        description="ISO 8601 timestamp of the sale",
        examples=["2024-01-15T10:30:00.000Z"],
    )
    customer_name: str = Field(..., examples=["Ada Lovelace"])
    amount: float = Field(..., gt=0, examples=[150.5])
    currency: str = Field(..., examples=["USD"])

    @classmethod
    def from_entity(cls, transaction: Transaction) -> "TransactionSchema":
        return cls(
            id=transaction.id,
            date=format_timestamp(transaction.date),
            customer_name=transaction.customer_name,
            amount=float(transaction.amount),
            currency=transaction.currency.value,
        )


class TransactionListResponseSchema(CamelModel):
    """Schema for GET /api/transactions response body."""

    transactions: List[TransactionSchema]
    total: int = Field(..., ge=0, description="Number of transactions returned")
