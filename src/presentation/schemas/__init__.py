"""Pydantic schemas for API request/response validation."""

from .base import CamelModel, format_timestamp
from .analytics import AnalyticsSchema, AnalyticsResponseSchema
from .transaction import (
    TransactionSchema,
    TransactionListResponseSchema,
)
from .error import ErrorResponseSchema
from .health import HealthResponse

__all__ = [
    "CamelModel",
    "format_timestamp",
    "AnalyticsSchema",
    "AnalyticsResponseSchema",
    "TransactionSchema",
    "TransactionListResponseSchema",
    "ErrorResponseSchema",
    "HealthResponse",
]
