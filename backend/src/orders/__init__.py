"""Order editing and pre-charge validation."""

from .validator import OrderValidator

__all__ = ["OrderValidator"]
