"""Price reconciliation rules"""

import asyncio
from decimal import Decimal

from ..models import (
    ValidationIssue,
    ValidationIssueType,
    ValidationIssueSeverity,
    ValidationContext
)


async def validate_price_rules(context: ValidationContext) -> list[ValidationIssue]:
    """Reconcile the order total against authoritative current prices.

    Prices may have changed since items were added, so every item's price
    is fetched from the price store. Lookups are read-only and
    order-independent, so they run concurrently and are all awaited.
    The comparison is exact: any nonzero difference is a mismatch.

    Args:
        context: Validation context with items, total and pricing

    Returns:
        List with one PRICE_MISMATCH issue, or empty
    """
    prices = await asyncio.gather(
        *(context.pricing.get_price(item.id) for item in context.items)
    )
    expected_total = sum((Decimal(str(price)) for price in prices), Decimal("0"))

    if expected_total == context.total:
        return []

    difference = context.total - expected_total
    return [ValidationIssue(
        type=ValidationIssueType.PRICE_MISMATCH,
        severity=ValidationIssueSeverity.ERROR,
        message=(
            f"Order total {context.total} does not match current prices "
            f"{expected_total} (difference {difference})"
        ),
        order_id=context.order_id,
        details={
            "order_total": str(context.total),
            "expected_total": str(expected_total),
            "difference": str(difference),
            "current_prices": {
                item.id: str(price) for item, price in zip(context.items, prices)
            }
        }
    )]
