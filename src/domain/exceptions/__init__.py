"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException
from .transaction import InvalidTransactionException

__all__ = [
    "DomainException",
    "InvalidTransactionException",
]
