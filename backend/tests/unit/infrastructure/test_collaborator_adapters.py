"""Unit tests for the static price store and lead-time routing adapters."""

import pytest
from datetime import timedelta
from decimal import Decimal

from domain.errors import PriceNotFoundError
from domain.orders.models import OrderItem
from infrastructure.pricing import StaticPriceStore
from infrastructure.routing import LeadTimeRoutingService


class TestStaticPriceStore:

    @pytest.mark.asyncio
    async def test_prices_are_decimal(self):
        store = StaticPriceStore({"A": "1.10", "B": 2})

        assert await store.get_price("A") == Decimal("1.10")
        assert await store.get_price("B") == Decimal("2")
        assert store.lookups == ["A", "B"]

    @pytest.mark.asyncio
    async def test_unknown_item_raises(self):
        with pytest.raises(PriceNotFoundError) as exc_info:
            await StaticPriceStore({}).get_price("Z")

        assert exc_info.value.item_id == "Z"


class TestLeadTimeRoutingService:

    def test_window_spans_min_to_max_lead_time(self, clock, now):
        routing = LeadTimeRoutingService(default_lead_time_days=4, clock=clock)
        items = [
            OrderItem(id="A", price=Decimal("1"), delivery={"lead_time_days": 2}),
            OrderItem(id="B", price=Decimal("1"), delivery={"lead_time_days": 10}),
            OrderItem(id="C", price=Decimal("1")),
        ]

        window = routing.check_delivery_window(items)

        assert window.start == now + timedelta(days=2)
        assert window.end == now + timedelta(days=10)

    def test_empty_order_window_is_now(self, clock, now):
        window = LeadTimeRoutingService(clock=clock).check_delivery_window([])

        assert window.start == window.end == now
