"""Transaction-related domain exceptions."""

from typing import List

from .base import DomainException


class InvalidTransactionException(DomainException):
    """Raised when a transaction creation payload fails validation."""

    def __init__(self, errors: List[str]):
        super().__init__(
            message="Invalid transaction data: " + "; ".join(errors),
            code="VALIDATION_ERROR",
        )
        self.errors = errors
