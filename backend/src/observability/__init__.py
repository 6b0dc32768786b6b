"""Observability module.

Provides structured logging, correlation IDs and Prometheus metrics.
"""

from .logging_config import configure_logging, configure_logging_from_settings, get_logger
from .metrics import (
    validation_runs_total,
    validation_issues_total,
    validation_duration_seconds,
    gateway_connections_total,
)
from .correlation import (
    correlation_id_var,
    get_correlation_id,
    set_correlation_id,
    generate_correlation_id,
)

__all__ = [
    # Logging
    "configure_logging",
    "configure_logging_from_settings",
    "get_logger",
    # Metrics
    "validation_runs_total",
    "validation_issues_total",
    "validation_duration_seconds",
    "gateway_connections_total",
    # Correlation ID
    "correlation_id_var",
    "get_correlation_id",
    "set_correlation_id",
    "generate_correlation_id",
]
