"""Lead-time based delivery window calculator.

Computes a delivery window from each item's ``lead_time_days`` delivery
attribute: the window opens after the shortest lead time and closes after
the longest. Items without the attribute use the default lead time.
"""

from datetime import datetime, timedelta, timezone
from typing import Callable, Optional, Sequence

from domain.orders.models import DeliveryWindow, OrderItem
from domain.orders.ports import RoutingPort


class LeadTimeRoutingService(RoutingPort):
    """RoutingPort adapter for development and tests.

    Args:
        default_lead_time_days: Lead time for items lacking the attribute
        clock: Returns the current tz-aware time (default: UTC now)
    """

    def __init__(
        self,
        default_lead_time_days: int = 3,
        clock: Optional[Callable[[], datetime]] = None
    ):
        self.default_lead_time_days = default_lead_time_days
        self.clock = clock or (lambda: datetime.now(timezone.utc))

    def check_delivery_window(self, items: Sequence[OrderItem]) -> DeliveryWindow:
        now = self.clock()
        lead_times = [
            int(item.delivery.get("lead_time_days", self.default_lead_time_days))
            for item in items
        ] or [0]

        return DeliveryWindow(
            start=now + timedelta(days=min(lead_times)),
            end=now + timedelta(days=max(lead_times))
        )
