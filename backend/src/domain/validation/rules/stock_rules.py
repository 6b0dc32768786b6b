"""Stock availability rules"""

from ..models import (
    ValidationIssue,
    ValidationIssueType,
    ValidationIssueSeverity,
    ValidationContext
)


def validate_stock_rules(context: ValidationContext) -> list[ValidationIssue]:
    """Check that every item in the order is in stock.

    Each item is evaluated independently; one issue is produced per
    out-of-stock item.

    Args:
        context: Validation context with items

    Returns:
        List of OUT_OF_STOCK issues
    """
    issues = []

    for position, item in enumerate(context.items, start=1):
        if not item.in_stock:
            issues.append(ValidationIssue(
                type=ValidationIssueType.OUT_OF_STOCK,
                severity=ValidationIssueSeverity.ERROR,
                message=f"Item {position}: '{item.id}' is out of stock",
                order_id=context.order_id,
                item_id=item.id,
                details={"position": position}
            ))

    return issues
