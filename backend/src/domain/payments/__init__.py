"""Payments domain module - gateway connection model and port."""

from .ports import GatewayConnection, PaymentGatewayPort

__all__ = ["GatewayConnection", "PaymentGatewayPort"]
