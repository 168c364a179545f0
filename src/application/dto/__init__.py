"""Data Transfer Objects for application layer."""

from .transaction import CreateTransactionRequest, MAX_AMOUNT, round_to_cents

__all__ = [
    "CreateTransactionRequest",
    "MAX_AMOUNT",
    "round_to_cents",
]
