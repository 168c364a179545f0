"""Analytics API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from src.application.services import TransactionService
from src.core.dependencies import get_transaction_service
from src.presentation.schemas import AnalyticsSchema, AnalyticsResponseSchema

analytics_router = APIRouter(prefix="/analytics")


@analytics_router.get(
    "",
    response_model=AnalyticsResponseSchema,
    summary="Get Analytics",
    description="Total revenue and transaction count across all transactions.",
)
async def get_analytics(
    transaction_service: Annotated[TransactionService, Depends(get_transaction_service)],
) -> AnalyticsResponseSchema:
    analytics = await transaction_service.get_analytics()

    return AnalyticsResponseSchema(analytics=AnalyticsSchema.from_entity(analytics))
