"""
Mock Payment Gateway - In-memory gateway for testing

Provides a gateway implementation that resolves customers from a fixed
mapping without contacting a payment provider. Used for unit tests and
development.
"""

import asyncio
import logging
from typing import Any, Dict, Optional

from domain.errors import GatewayError
from domain.payments.ports import GatewayConnection, PaymentGatewayPort


logger = logging.getLogger(__name__)


class MockPaymentGateway(PaymentGatewayPort):
    """
    Mock payment gateway for testing and development.

    Customers are resolved from ``default_sources`` (customer_id -> source
    reference). Unknown customers resolve to a connection without a
    default source.

    Configuration:
        - mode: "success" | "failure" | "timeout" (default: "success")
        - simulate_delay_ms: Delay in milliseconds to simulate network latency (default: 0)
        - error_message: Custom error message when mode="failure"

    Usage:
        gateway = MockPaymentGateway({"cus_1": "card_1"})
        connection = await gateway.connect("cus_1")
        assert connection.default_source == "card_1"

        gateway = MockPaymentGateway({}, {"mode": "failure"})
        await gateway.connect("cus_1")
        # Raises GatewayError
    """

    def __init__(
        self,
        default_sources: Optional[Dict[str, Optional[str]]] = None,
        config: Optional[Dict[str, Any]] = None,
    ):
        self.default_sources = dict(default_sources or {})
        self._config = {"provider": "mock", "mode": "success", **(config or {})}
        self.connect_calls: list[str] = []

    @property
    def config(self) -> Dict[str, Any]:
        return self._config

    async def connect(self, customer_id: str) -> GatewayConnection:
        """
        Simulate resolving a customer connection.

        Raises:
            GatewayError: If mode="failure" or mode="timeout"
        """
        self.connect_calls.append(customer_id)
        mode = self._config.get("mode", "success")
        simulate_delay_ms = self._config.get("simulate_delay_ms", 0)

        if simulate_delay_ms > 0:
            await asyncio.sleep(simulate_delay_ms / 1000.0)

        if mode == "failure":
            logger.info("MockPaymentGateway: Simulating connect failure")
            raise GatewayError(self._config.get("error_message", "Mock gateway simulated failure"))

        if mode == "timeout":
            logger.info("MockPaymentGateway: Simulating timeout")
            raise GatewayError("Connection timeout")

        return GatewayConnection(
            customer_id=customer_id,
            default_source=self.default_sources.get(customer_id),
            provider_fields={"provider": "mock", "livemode": False}
        )
