"""Analytics-related Pydantic schemas."""

from pydantic import Field

from src.domain.entities import Analytics
from .base import CamelModel


class AnalyticsSchema(CamelModel):
    """Revenue totals across every stored transaction."""

    total_revenue: float = Field(
        ...,
        ge=0,
        description="Sum of all amounts, without currency conversion",
        examples=[7876.5],
    )
    transaction_count: int = Field(..., ge=0, examples=[5])
    currency: str = Field(..., examples=["USD"])

    @classmethod
    def from_entity(cls, analytics: Analytics) -> "AnalyticsSchema":
        return cls(
            total_revenue=float(analytics.total_revenue),
            transaction_count=analytics.transaction_count,
            currency=analytics.currency,
        )


class AnalyticsResponseSchema(CamelModel):
    """Schema for GET /api/analytics response body."""

    analytics: AnalyticsSchema
