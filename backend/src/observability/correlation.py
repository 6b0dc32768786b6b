"""Correlation ID management for validation runs.

Each validate() run gets its own ID so every log line it produces can be
grouped, including lines written from concurrently awaited lookups.
"""

import uuid
from contextvars import ContextVar
from typing import Optional

# Context variable for correlation_id (async-safe)
correlation_id_var: ContextVar[Optional[str]] = ContextVar("correlation_id", default=None)


def generate_correlation_id() -> str:
    """Generate a new unique correlation ID.

    Returns:
        str: UUID v4 correlation ID
    """
    return str(uuid.uuid4())


def get_correlation_id() -> str:
    """Get current correlation ID from context.

    Returns:
        str: Current correlation ID or "no-correlation-id" if not set
    """
    return correlation_id_var.get() or "no-correlation-id"


def set_correlation_id(correlation_id: str) -> None:
    """Set correlation ID in current context."""
    correlation_id_var.set(correlation_id)
