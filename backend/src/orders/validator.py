"""Order validator service.

Owns one order's mutable item collection and total, and runs the
pre-charge validation pipeline against it.

Total maintenance: every mutator recomputes ``total`` as the exact sum of
the current item prices, so after any add/remove/update
``total == sum(item.price for item in items)``.

Event payloads are built before any state change, so an item that cannot
be serialized leaves the order untouched.
"""

import logging
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from typing import Callable, Iterable, Optional

from config import Settings, get_settings
from domain.errors import ItemNotFoundError
from domain.events.ports import (
    EventTrackerPort,
    ORDER_ITEM_ADDED,
    ORDER_ITEM_REMOVED,
    ORDER_ITEM_UPDATED,
)
from domain.orders.models import OrderItem, sum_item_prices
from domain.orders.ports import PricingPort, RoutingPort
from domain.validation.engine import ValidationEngine
from domain.validation.models import ValidationContext, ValidationResult

from .schemas import order_item_event_payload


logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class OrderValidator:
    """Validator for a single in-progress order.

    Not safe for concurrent mutation: callers must serialize edits on the
    same instance.

    Args:
        order_id: Immutable order identifier
        items: Initial order items (copied)
        total: Initial order total, taken as given until the first mutation
        pricing: Authoritative price store
        routing: Delivery-routing calculator
        tracker: Event sink for item and validation events
        settings: Settings override (default: get_settings())
        clock: Returns the current tz-aware time (default: UTC now)
    """

    def __init__(
        self,
        order_id: str,
        items: Iterable[OrderItem],
        total: Decimal,
        *,
        pricing: PricingPort,
        routing: RoutingPort,
        tracker: EventTrackerPort,
        settings: Optional[Settings] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._order_id = order_id
        self._items = list(items)
        self._total = Decimal(str(total))
        self.pricing = pricing
        self.routing = routing
        self.tracker = tracker
        self.settings = settings or get_settings()
        self.clock = clock or _utcnow
        self.engine = ValidationEngine(
            tracker,
            emit_aggregate_verdict=self.settings.EMIT_AGGREGATE_VERDICT
        )

    @property
    def order_id(self) -> str:
        return self._order_id

    @property
    def items(self) -> list[OrderItem]:
        return list(self._items)

    @property
    def total(self) -> Decimal:
        return self._total

    def _recalculate_total(self) -> None:
        self._total = sum_item_prices(self._items)

    async def add_order_item(self, order_item: OrderItem) -> list[OrderItem]:
        """Append an item to the order and track ``orderItemAdded``.

        No duplicate detection is performed; callers must not double-add.

        Returns:
            Updated item list
        """
        payload = order_item_event_payload(self._order_id, order_item)
        self._items.append(order_item)
        self._recalculate_total()

        logger.debug(
            f"Added item {order_item.id} to order {self._order_id}, total={self._total}",
            extra={"order_id": self._order_id}
        )
        await self.tracker.track(ORDER_ITEM_ADDED, payload)
        return self.items

    async def remove_order_item(self, order_item: OrderItem) -> list[OrderItem]:
        """Remove every item whose id matches and track ``orderItemRemoved``.

        Removing an id that is not present leaves the collection unchanged;
        the event is still tracked.

        Returns:
            Updated item list
        """
        payload = order_item_event_payload(self._order_id, order_item)
        remaining = [item for item in self._items if item.id != order_item.id]
        removed_count = len(self._items) - len(remaining)
        self._items = remaining
        self._recalculate_total()

        logger.debug(
            f"Removed {removed_count} item(s) with id {order_item.id} from order {self._order_id}, "
            f"total={self._total}",
            extra={"order_id": self._order_id}
        )
        await self.tracker.track(ORDER_ITEM_REMOVED, payload)
        return self.items

    async def update_order_item(self, order_item: OrderItem) -> list[OrderItem]:
        """Replace the first item with a matching id and track ``orderItemUpdated``.

        Raises:
            ItemNotFoundError: If no item has the given id. Nothing is
                changed and no event is tracked.

        Returns:
            Updated item list
        """
        item_index = next(
            (index for index, item in enumerate(self._items) if item.id == order_item.id),
            None
        )
        if item_index is None:
            raise ItemNotFoundError(self._order_id, order_item.id)

        payload = order_item_event_payload(self._order_id, order_item)
        self._items[item_index] = order_item
        # Price may have changed
        self._recalculate_total()

        logger.debug(
            f"Updated item {order_item.id} in order {self._order_id}, total={self._total}",
            extra={"order_id": self._order_id}
        )
        await self.tracker.track(ORDER_ITEM_UPDATED, payload)
        return self.items

    async def validate(self) -> ValidationResult:
        """Run the stock, delivery window and price reconciliation checks.

        Does not mutate the order. Every check runs even if an earlier one
        failed. Failed checks are tracked as ``orderValidation`` events with
        ``valid: False``, followed by a final ``orderValidation`` event.

        The returned ValidationResult is the authoritative verdict; the
        final event reports ``valid: True`` unless EMIT_AGGREGATE_VERDICT
        is enabled.

        Raises:
            Any exception from the routing, pricing or tracking
            collaborators, unchanged.
        """
        context = ValidationContext(
            order_id=self._order_id,
            items=tuple(self._items),
            total=self._total,
            routing=self.routing,
            pricing=self.pricing,
            checked_at=self.clock(),
            delivery_horizon=timedelta(days=self.settings.DELIVERY_HORIZON_DAYS),
        )
        return await self.engine.run(context)
