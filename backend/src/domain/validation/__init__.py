"""Validation domain module.

Implements the validation engine that checks an order before it is charged:
stock availability, delivery window and price reconciliation.
"""

from .models import (
    ValidationIssueSeverity,
    ValidationIssueType,
    ValidationIssue,
    ValidationResult,
    ValidationContext
)
from .port import ValidatorPort
from .engine import ValidationEngine

__all__ = [
    "ValidationIssueSeverity",
    "ValidationIssueType",
    "ValidationIssue",
    "ValidationResult",
    "ValidationContext",
    "ValidatorPort",
    "ValidationEngine",
]
