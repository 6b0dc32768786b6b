"""Dict-backed price store.

Serves authoritative prices from an in-memory mapping. Suitable for
development, fixtures and tests; production hosts inject their own
PricingPort implementation.
"""

import logging
from decimal import Decimal
from typing import Mapping, Union

from domain.errors import PriceNotFoundError
from domain.orders.ports import PricingPort


logger = logging.getLogger(__name__)


class StaticPriceStore(PricingPort):
    """PricingPort adapter over a ``{item_id: price}`` mapping"""

    def __init__(self, prices: Mapping[str, Union[Decimal, str, int]]):
        self.prices = {item_id: Decimal(str(price)) for item_id, price in prices.items()}
        self.lookups: list[str] = []

    def set_price(self, item_id: str, price: Union[Decimal, str, int]) -> None:
        self.prices[item_id] = Decimal(str(price))

    async def get_price(self, item_id: str) -> Decimal:
        """Return the current price of an item.

        Raises:
            PriceNotFoundError: If the item has no price in the store
        """
        self.lookups.append(item_id)
        try:
            return self.prices[item_id]
        except KeyError:
            logger.warning(f"No price for item {item_id}")
            raise PriceNotFoundError(item_id) from None
