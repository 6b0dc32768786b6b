"""Order item and delivery window domain models"""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from typing import Any, Iterable


@dataclass
class OrderItem:
    """A unit of purchase within an order.

    Items are identified by ``id`` within an order's collection. The
    ``delivery`` mapping is opaque to the core and only handed to the
    routing collaborator.
    """
    id: str
    price: Decimal
    in_stock: bool = True
    delivery: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self):
        if not isinstance(self.price, Decimal):
            self.price = Decimal(str(self.price))


@dataclass(frozen=True)
class DeliveryWindow:
    """Feasible start/end range for fulfilling an order's items."""
    start: datetime
    end: datetime


def sum_item_prices(items: Iterable[OrderItem]) -> Decimal:
    """Sum the prices of the given items (Decimal, exact)."""
    return sum((item.price for item in items), Decimal("0"))
