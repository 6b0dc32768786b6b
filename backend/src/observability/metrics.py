"""Prometheus metrics for order validation.

Defines operational metrics for monitoring validation outcomes and gateway links.
"""

from prometheus_client import Counter, Histogram

# Validation metrics
validation_runs_total = Counter(
    "ordercheck_validation_runs_total",
    "Total validation pipeline runs",
    ["result"]  # result: valid|invalid
)

validation_issues_total = Counter(
    "ordercheck_validation_issues_total",
    "Total validation issues detected",
    ["issue_type", "severity"]  # issue_type: OUT_OF_STOCK|DELIVERY_WINDOW_EXCEEDED|PRICE_MISMATCH
)

validation_duration_seconds = Histogram(
    "ordercheck_validation_duration_seconds",
    "Time spent in the validation pipeline in seconds",
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0]
)

# Payment gateway metrics
gateway_connections_total = Counter(
    "ordercheck_gateway_connections_total",
    "Customer gateway connection attempts",
    ["status"]  # status: linked|unlinked
)
