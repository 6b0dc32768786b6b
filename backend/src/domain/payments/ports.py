"""Payment Gateway Port - Domain interface for customer gateway linking.

This port defines the contract the core consumes from the payment-gateway
SDK. Charging mechanics stay behind the adapter; the core only needs to
resolve a customer to a connection and read the gateway configuration.

Architecture: Hexagonal - Port interface in domain layer
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass
class GatewayConnection:
    """Result of linking a customer identity to the payment gateway.

    Attributes:
        customer_id: Customer the connection was resolved for
        default_source: Reference to the customer's default payment source.
            None means the customer cannot be charged.
        provider_fields: Provider-specific data, opaque to the core
    """
    customer_id: str
    default_source: Optional[str] = None
    provider_fields: dict[str, Any] = field(default_factory=dict)


class PaymentGatewayPort(ABC):
    """Port interface for the payment gateway.

    Implementations:
    - MockPaymentGateway: In-memory gateway for tests and development
    - Provider SDK adapters supplied by the host application
    """

    @abstractmethod
    async def connect(self, customer_id: str) -> GatewayConnection:
        """Resolve a gateway connection for a customer.

        Args:
            customer_id: Customer identifier known to the gateway

        Returns:
            GatewayConnection (default_source may be None)

        Raises:
            Transport or provider errors; propagated unchanged by the core.
        """
        pass

    @property
    @abstractmethod
    def config(self) -> dict[str, Any]:
        """Current gateway configuration."""
        pass
