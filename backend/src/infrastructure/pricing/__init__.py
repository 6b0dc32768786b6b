"""Price store adapters"""

from .static_store import StaticPriceStore

__all__ = ["StaticPriceStore"]
