"""Routing and pricing ports (Hexagonal Architecture)

The validation pipeline depends only on these interfaces. Concrete
routing calculators and price stores live outside the core.
"""

from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Sequence

from .models import OrderItem, DeliveryWindow


class RoutingPort(ABC):
    """Port interface for the delivery-routing calculator."""

    @abstractmethod
    def check_delivery_window(self, items: Sequence[OrderItem]) -> DeliveryWindow:
        """Compute the feasible delivery window for a set of items.

        Synchronous and pure with respect to the item list.

        Args:
            items: Current order items

        Returns:
            DeliveryWindow with tz-aware start and end
        """
        pass


class PricingPort(ABC):
    """Port interface for the authoritative price-lookup store."""

    @abstractmethod
    async def get_price(self, item_id: str) -> Decimal:
        """Fetch the current authoritative unit price of an item.

        Args:
            item_id: Order item identifier

        Returns:
            Current price as Decimal

        Raises:
            Any store-specific exception; the core propagates it unchanged.
        """
        pass
