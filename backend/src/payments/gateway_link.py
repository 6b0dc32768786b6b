"""Customer gateway link.

Resolves a customer to a chargeable payment-gateway connection. This is
the gate a charge attempt must pass downstream: a customer without a
default payment source cannot be charged.
"""

import logging
from typing import Any

from domain.errors import UnlinkedPaymentMethodError
from domain.payments.ports import GatewayConnection, PaymentGatewayPort
from observability.metrics import gateway_connections_total


logger = logging.getLogger(__name__)


class CustomerGatewayLink:
    """Stateless helper around an injected payment gateway.

    No retry and no caching: each call is one request to the gateway.
    """

    def __init__(self, gateway: PaymentGatewayPort):
        self.gateway = gateway

    def get_config(self) -> dict[str, Any]:
        """Return the payment gateway's current configuration."""
        return self.gateway.config

    async def connect_customer(self, customer_id: str) -> GatewayConnection:
        """Connect a customer to the payment gateway.

        Args:
            customer_id: Customer identifier known to the gateway

        Returns:
            The gateway connection, unchanged

        Raises:
            UnlinkedPaymentMethodError: If the connection has no default
                payment source
            Gateway transport errors, unchanged
        """
        connection = await self.gateway.connect(customer_id)

        if not connection.default_source:
            gateway_connections_total.labels(status="unlinked").inc()
            logger.warning(
                f"Customer {customer_id} has no default payment source",
                extra={"customer_id": customer_id}
            )
            raise UnlinkedPaymentMethodError(customer_id)

        gateway_connections_total.labels(status="linked").inc()
        logger.info(
            f"Customer {customer_id} linked to payment gateway",
            extra={"customer_id": customer_id}
        )
        return connection
