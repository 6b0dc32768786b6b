"""Event tracker adapters"""

from .logging_tracker import LoggingEventTracker
from .memory_tracker import InMemoryEventTracker

__all__ = ["LoggingEventTracker", "InMemoryEventTracker"]
