"""
Domain Interfaces (Ports)
"""

from .repositories import TransactionRepository
from .publishers import EventPublisher

__all__ = [
    "TransactionRepository",
    "EventPublisher",
]
