"""Payment gateway linking for order customers."""

from .gateway_link import CustomerGatewayLink
from .implementations import MockPaymentGateway

__all__ = ["CustomerGatewayLink", "MockPaymentGateway"]
