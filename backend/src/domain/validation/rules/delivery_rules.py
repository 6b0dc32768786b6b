"""Delivery window rules"""

from ..models import (
    ValidationIssue,
    ValidationIssueType,
    ValidationIssueSeverity,
    ValidationContext
)


def validate_delivery_rules(context: ValidationContext) -> list[ValidationIssue]:
    """Check that the feasible delivery window ends within the horizon.

    The routing collaborator computes the window for the current item set.
    The order is invalid if the window ends after checked_at + horizon
    (two weeks by default). Ending exactly on the deadline is accepted.

    Args:
        context: Validation context with items, routing and checked_at

    Returns:
        List with one DELIVERY_WINDOW_EXCEEDED issue, or empty
    """
    window = context.routing.check_delivery_window(list(context.items))
    deadline = context.delivery_deadline

    if window.end <= deadline:
        return []

    return [ValidationIssue(
        type=ValidationIssueType.DELIVERY_WINDOW_EXCEEDED,
        severity=ValidationIssueSeverity.ERROR,
        message=(
            f"Delivery window ends {window.end.isoformat()}, "
            f"after deadline {deadline.isoformat()}"
        ),
        order_id=context.order_id,
        details={
            "window_start": window.start.isoformat(),
            "window_end": window.end.isoformat(),
            "deadline": deadline.isoformat(),
            "horizon_days": context.delivery_horizon.days
        }
    )]
