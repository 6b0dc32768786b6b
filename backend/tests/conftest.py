"""Pytest fixtures for order validation testing.

Provides reusable test fixtures for:
- Order items with deterministic prices
- A fixed clock for delivery window checks
- In-memory collaborators (price store, routing, event tracker, gateway)
- A ready-to-use OrderValidator

Usage:
    @pytest.mark.asyncio
    async def test_validate(order_validator, tracker):
        result = await order_validator.validate()
        assert result.valid
"""

import sys
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from pathlib import Path
from unittest.mock import Mock

import pytest

backend_src = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(backend_src))

from config import Settings
from domain.orders.models import DeliveryWindow, OrderItem
from domain.orders.ports import RoutingPort
from infrastructure.events import InMemoryEventTracker
from infrastructure.pricing import StaticPriceStore
from orders.validator import OrderValidator


FIXED_NOW = datetime(2025, 12, 1, 12, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def now():
    """Fixed validation time."""
    return FIXED_NOW


@pytest.fixture
def clock(now):
    return lambda: now


@pytest.fixture
def settings():
    """Settings isolated from the environment and .env files."""
    return Settings(_env_file=None)


@pytest.fixture
def items():
    """Three in-stock items totalling 35.50."""
    return [
        OrderItem(id="SKU-001", price=Decimal("10.00")),
        OrderItem(id="SKU-002", price=Decimal("20.50")),
        OrderItem(id="SKU-003", price=Decimal("5.00")),
    ]


@pytest.fixture
def price_store(items):
    """Price store agreeing with the item prices."""
    return StaticPriceStore({item.id: item.price for item in items})


@pytest.fixture
def routing(now):
    """Routing mock returning a window that ends in 5 days."""
    routing = Mock(spec=RoutingPort)
    routing.check_delivery_window.return_value = DeliveryWindow(
        start=now + timedelta(days=2),
        end=now + timedelta(days=5)
    )
    return routing


@pytest.fixture
def tracker():
    return InMemoryEventTracker()


@pytest.fixture
def order_validator(items, price_store, routing, tracker, settings, clock):
    """OrderValidator whose total matches its items and prices."""
    return OrderValidator(
        "order-1",
        items,
        Decimal("35.50"),
        pricing=price_store,
        routing=routing,
        tracker=tracker,
        settings=settings,
        clock=clock,
    )
