"""Domain error hierarchy for the order validation core.

Validation failures (out of stock, late delivery, price drift) are NOT
errors; they are reported as ValidationIssue objects and events. The
exceptions below signal operations that cannot proceed.
"""

from typing import Any


class OrderCoreError(Exception):
    """Base exception for order validation core errors."""
    pass


class ItemNotFoundError(OrderCoreError):
    """Raised when an update targets an item id absent from the order."""

    def __init__(self, order_id: str, item_id: Any):
        self.order_id = order_id
        self.item_id = item_id
        super().__init__(f"Order {order_id} has no item with id {item_id}")


class UnlinkedPaymentMethodError(OrderCoreError):
    """Raised when a customer has no default payment source at the gateway."""

    def __init__(self, customer_id: str):
        self.customer_id = customer_id
        super().__init__(
            "Customer unable to connect to our payment gateway service "
            f"(using customer Id: {customer_id})"
        )


class GatewayError(OrderCoreError):
    """Raised by bundled gateway adapters when the gateway call fails."""
    pass


class PriceNotFoundError(OrderCoreError):
    """Raised by bundled price stores when an item has no current price."""

    def __init__(self, item_id: str):
        self.item_id = item_id
        super().__init__(f"No current price for item {item_id}")
