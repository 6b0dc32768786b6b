"""Events domain module - event tracker port and event names."""

from .ports import (
    EventTrackerPort,
    ORDER_ITEM_ADDED,
    ORDER_ITEM_REMOVED,
    ORDER_ITEM_UPDATED,
    ORDER_VALIDATION,
)

__all__ = [
    "EventTrackerPort",
    "ORDER_ITEM_ADDED",
    "ORDER_ITEM_REMOVED",
    "ORDER_ITEM_UPDATED",
    "ORDER_VALIDATION",
]
