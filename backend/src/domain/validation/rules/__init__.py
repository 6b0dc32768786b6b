"""Validation rules implementations.

Each rule module contains one check that returns ValidationIssue objects
when violations are detected. Price rules are async because they consult
the price store.
"""

from .stock_rules import validate_stock_rules
from .delivery_rules import validate_delivery_rules
from .price_rules import validate_price_rules

__all__ = [
    "validate_stock_rules",
    "validate_delivery_rules",
    "validate_price_rules",
]
