"""
In-memory event tracker for testing and development

Records tracked events in call order without any external sink.
"""

from typing import Any, Optional

from domain.events.ports import EventTrackerPort


class InMemoryEventTracker(EventTrackerPort):
    """
    Event tracker that keeps ``(event_name, payload)`` tuples in a list.

    Usage:
        tracker = InMemoryEventTracker()
        await tracker.track("orderItemAdded", {"orderId": "o-1"})
        assert tracker.names() == ["orderItemAdded"]
    """

    def __init__(self):
        self.events: list[tuple[str, dict[str, Any]]] = []

    async def track(self, event_name: str, payload: dict[str, Any]) -> None:
        self.events.append((event_name, dict(payload)))

    def names(self) -> list[str]:
        return [name for name, _ in self.events]

    def payloads(self, event_name: Optional[str] = None) -> list[dict[str, Any]]:
        """Payloads in tracking order, optionally filtered by event name"""
        return [
            payload for name, payload in self.events
            if event_name is None or name == event_name
        ]

    def clear(self) -> None:
        self.events.clear()
