"""Transaction API endpoints."""

from typing import Annotated, Any

from fastapi import APIRouter, Body, Depends

from src.application.services import TransactionService
from src.core.dependencies import get_transaction_service
from src.presentation.schemas import (
    ErrorResponseSchema,
    TransactionSchema,
    TransactionListResponseSchema,
)

transaction_router = APIRouter(prefix="/transactions")


@transaction_router.get(
    "",
    response_model=TransactionListResponseSchema,
    summary="List Transactions",
    description="""
    Retrieve every stored transaction, newest first.

    There is no pagination or server-side filtering.
    """,
)
async def list_transactions(
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> TransactionListResponseSchema:
    transactions = await transaction_service.list_transactions()

    return TransactionListResponseSchema(
        transactions=[TransactionSchema.from_entity(t) for t in transactions],
        total=len(transactions),
    )


@transaction_router.post(
    "",
    response_model=TransactionSchema,
    status_code=201,
    summary="Create Transaction",
    description="""Record a sale and push it to connected dashboards""",
    responses={
        201: {"description": "Transaction created"},
        400: {"model": ErrorResponseSchema, "description": "Invalid transaction data"},
    },
)
async def create_transaction(
    payload: Annotated[
        Any,
        Body(
            examples=[
                {
                    "customerName": "Ada Lovelace",
                    "amount": 150.5,
                    "currency": "USD",
                }
            ],
        ),
    ],
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> TransactionSchema:
    """
    Create a transaction.

    The body is validated by the service so every failure answers 400.
    """
    transaction = await transaction_service.create_transaction(payload)

    return TransactionSchema.from_entity(transaction)
