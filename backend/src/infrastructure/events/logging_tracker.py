"""Event tracker that writes events to the structured log.

Each tracked event becomes one INFO record on the ``ordercheck.events``
logger with ``event_name``, ``order_id`` and ``payload`` extras, which the
JSON formatter emits as fields.
"""

import logging
from typing import Any, Optional

from domain.events.ports import EventTrackerPort


class LoggingEventTracker(EventTrackerPort):
    """EventTrackerPort adapter backed by stdlib logging."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("ordercheck.events")

    async def track(self, event_name: str, payload: dict[str, Any]) -> None:
        extra = {"event_name": event_name, "payload": payload}
        if "orderId" in payload:
            extra["order_id"] = payload["orderId"]
        self.logger.info(f"Event {event_name}", extra=extra)
