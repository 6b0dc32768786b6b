"""Orders domain module - order items, delivery windows and collaborator ports."""

from .models import OrderItem, DeliveryWindow, sum_item_prices
from .ports import PricingPort, RoutingPort

__all__ = [
    "OrderItem",
    "DeliveryWindow",
    "sum_item_prices",
    "PricingPort",
    "RoutingPort",
]
