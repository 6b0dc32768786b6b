"""Unit tests for MockPaymentGateway."""

import pytest

from domain.errors import GatewayError
from payments.implementations.mock_gateway import MockPaymentGateway


class TestMockPaymentGateway:

    @pytest.mark.asyncio
    async def test_known_customer(self):
        connection = await MockPaymentGateway({"cus_1": "card_1"}).connect("cus_1")

        assert connection.customer_id == "cus_1"
        assert connection.default_source == "card_1"
        assert connection.provider_fields["provider"] == "mock"

    @pytest.mark.asyncio
    async def test_unknown_customer_has_no_default_source(self):
        connection = await MockPaymentGateway().connect("cus_x")

        assert connection.default_source is None

    @pytest.mark.asyncio
    async def test_timeout_mode(self):
        gateway = MockPaymentGateway(config={"mode": "timeout"})

        with pytest.raises(GatewayError, match="timeout"):
            await gateway.connect("cus_1")

    @pytest.mark.asyncio
    async def test_simulated_delay(self):
        gateway = MockPaymentGateway({"cus_1": "card_1"}, {"simulate_delay_ms": 1})

        connection = await gateway.connect("cus_1")

        assert connection.default_source == "card_1"
