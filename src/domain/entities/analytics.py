"""Analytics aggregate derived from the stored transactions."""

from dataclasses import dataclass
from decimal import Decimal

# Revenue is summed across currencies without conversion.
ANALYTICS_CURRENCY = "USD"


@dataclass(frozen=True)
class Analytics:
    """Revenue totals recomputed from every stored transaction."""

    total_revenue: Decimal
    transaction_count: int
    currency: str = ANALYTICS_CURRENCY
