"""EventTrackerPort interface for the event-logging sink."""

from abc import ABC, abstractmethod
from typing import Any

ORDER_ITEM_ADDED = "orderItemAdded"
ORDER_ITEM_REMOVED = "orderItemRemoved"
ORDER_ITEM_UPDATED = "orderItemUpdated"
ORDER_VALIDATION = "orderValidation"


class EventTrackerPort(ABC):
    """Port interface for tracking order events.

    Tracking is used for observability, not control flow. A failing
    tracker call is still awaited by the core and its exception
    propagates to the caller.
    """

    @abstractmethod
    async def track(self, event_name: str, payload: dict[str, Any]) -> None:
        """Record an event.

        Args:
            event_name: Event name, e.g. "orderItemAdded"
            payload: JSON-serializable event payload
        """
        pass
