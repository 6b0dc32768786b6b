"""Delivery routing adapters"""

from .lead_time import LeadTimeRoutingService

__all__ = ["LeadTimeRoutingService"]
