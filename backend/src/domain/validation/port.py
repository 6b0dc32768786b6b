"""ValidatorPort interface (Hexagonal Architecture)"""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from .models import ValidationIssue, ValidationResult, ValidationContext


class ValidatorPort(ABC):
    """Port interface for validation services.

    Defines the contract for validation engines. This allows different
    validation implementations while keeping domain logic isolated.
    """

    @abstractmethod
    async def validate(self, context: ValidationContext) -> list[ValidationIssue]:
        """Run every check against the order snapshot and return issues.

        Args:
            context: Validation context with items, total and collaborators

        Returns:
            List of ValidationIssue objects, empty if all checks pass
        """
        pass

    @abstractmethod
    def compute_result(
        self,
        issues: list[ValidationIssue],
        checked_at: Optional[datetime] = None
    ) -> ValidationResult:
        """Compute the aggregate verdict from issues.

        Args:
            issues: Issues collected by validate()
            checked_at: Validation time of the run (default: now)

        Returns:
            ValidationResult indicating if the order may be charged
        """
        pass
