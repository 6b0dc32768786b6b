"""Validation models and enums"""

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from decimal import Decimal
from enum import Enum
from typing import Any, Optional, Sequence

from domain.orders.models import OrderItem
from domain.orders.ports import PricingPort, RoutingPort


class ValidationIssueSeverity(str, Enum):
    """Validation issue severity levels"""
    ERROR = "ERROR"


class ValidationIssueType(str, Enum):
    """Validation issue types, one per pipeline check"""
    OUT_OF_STOCK = "OUT_OF_STOCK"
    DELIVERY_WINDOW_EXCEEDED = "DELIVERY_WINDOW_EXCEEDED"
    PRICE_MISMATCH = "PRICE_MISMATCH"


@dataclass
class ValidationIssue:
    """Represents a single failed check.

    Issues are values, not exceptions: a failed check never interrupts
    the pipeline.
    """
    type: ValidationIssueType
    severity: ValidationIssueSeverity
    message: str
    order_id: Optional[str] = None
    item_id: Optional[str] = None
    details: dict[str, Any] = field(default_factory=dict)


@dataclass
class ValidationResult:
    """Aggregate verdict of one validation run.

    ``valid`` is False if any issue was recorded.
    ``reasons`` lists the issue types that made the order invalid.
    """
    valid: bool
    reasons: list[str] = field(default_factory=list)
    issues: list[ValidationIssue] = field(default_factory=list)
    checked_at: str = field(default_factory=lambda: datetime.now(timezone.utc).isoformat())

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dictionary"""
        return {
            "valid": self.valid,
            "reasons": self.reasons,
            "checked_at": self.checked_at,
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ValidationResult":
        """Create from a dictionary produced by to_dict()"""
        return cls(
            valid=data.get("valid", False),
            reasons=data.get("reasons", []),
            checked_at=data.get("checked_at", datetime.now(timezone.utc).isoformat())
        )


@dataclass
class ValidationContext:
    """Context object passed to validation rules.

    Snapshot of the order state plus the collaborators the rules consult.
    Rules read from it and never mutate the items.
    """
    order_id: str
    items: Sequence[OrderItem]
    total: Decimal
    routing: RoutingPort
    pricing: PricingPort
    checked_at: datetime
    delivery_horizon: timedelta = timedelta(days=14)

    @property
    def delivery_deadline(self) -> datetime:
        """Latest acceptable delivery end for this run"""
        return self.checked_at + self.delivery_horizon
