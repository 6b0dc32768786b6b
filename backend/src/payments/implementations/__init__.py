"""Payment gateway implementations"""

from .mock_gateway import MockPaymentGateway

__all__ = ["MockPaymentGateway"]
