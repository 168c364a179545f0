"""Prometheus metrics for the Sales Dashboard service.

Metrics are organized into two categories:

Business Metrics (for Product/Finance):
- sales_transactions_created_total: Transactions created by currency
- sales_total_revenue: Revenue across all stored transactions
- sales_transaction_count: Number of stored transactions

Technical Metrics (for Engineering/SRE):
- sales_transaction_validation_failures_total: Rejected creation payloads
- sales_realtime_connections: Open WebSocket connections
- sales_realtime_events_total: Realtime events sent, by event name
- sales_realtime_delivery_failures_total: Failed WebSocket sends
- sales_http_requests_total: HTTP requests by endpoint/status
- sales_http_request_latency_seconds: HTTP latency by endpoint
"""

from prometheus_client import Counter, Histogram, Gauge, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST

from src.domain.entities import Analytics


# =============================================================================
# Business Metrics (Product/Finance dashboards)
# =============================================================================

transactions_created_total = Counter(
    "sales_transactions_created_total",
    "Total number of transactions created",
    ["currency"],
)

total_revenue_gauge = Gauge(
    "sales_total_revenue",
    "Sum of all stored transaction amounts (no currency conversion)",
)

transaction_count_gauge = Gauge(
    "sales_transaction_count",
    "Number of stored transactions",
)


# =============================================================================
# Technical Metrics (Engineering/SRE dashboards)
# =============================================================================

validation_failures_total = Counter(
    "sales_transaction_validation_failures_total",
    "Total number of rejected transaction payloads",
)

realtime_connections = Gauge(
    "sales_realtime_connections",
    "Current number of open realtime connections",
)

realtime_events_total = Counter(
    "sales_realtime_events_total",
    "Total number of realtime events delivered to clients",
    ["event"],
)

realtime_delivery_failures = Counter(
    "sales_realtime_delivery_failures_total",
    "Total number of failed realtime sends",
)

http_requests_total = Counter(
    "sales_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "sales_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_transaction_created(currency: str, analytics: Analytics) -> None:
    """Record a created transaction and the resulting totals."""
    transactions_created_total.labels(currency=currency).inc()
    record_analytics(analytics)


def record_analytics(analytics: Analytics) -> None:
    """Update the revenue gauges from an analytics snapshot."""
    total_revenue_gauge.set(float(analytics.total_revenue))
    transaction_count_gauge.set(analytics.transaction_count)


def record_validation_failure() -> None:
    """Record a rejected creation payload."""
    validation_failures_total.inc()


def record_realtime_event(event: str) -> None:
    """Record one event delivered to one client."""
    realtime_events_total.labels(event=event).inc()


def record_realtime_failure() -> None:
    """Record a failed send to a realtime client."""
    realtime_delivery_failures.inc()


def set_realtime_connections(count: int) -> None:
    """Set the number of open realtime connections."""
    realtime_connections.set(count)


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
