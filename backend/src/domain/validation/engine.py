"""ValidationEngine - orchestrates validation rules and emits outcome events"""

import asyncio
import inspect
import logging
import time
from datetime import datetime
from typing import Optional

from domain.events.ports import EventTrackerPort, ORDER_VALIDATION
from observability.correlation import correlation_id_var, generate_correlation_id
from observability.metrics import (
    validation_runs_total,
    validation_issues_total,
    validation_duration_seconds,
)

from .models import (
    ValidationIssue,
    ValidationResult,
    ValidationContext
)
from .port import ValidatorPort
from .rules import (
    validate_stock_rules,
    validate_delivery_rules,
    validate_price_rules
)


logger = logging.getLogger(__name__)


class ValidationEngine(ValidatorPort):
    """Concrete implementation of ValidatorPort.

    Runs the stock, delivery window and price reconciliation checks in
    sequence. The pipeline never short-circuits: every check runs and
    its issues are collected. For every issue an ``orderValidation``
    event with ``valid: False`` is tracked; a final aggregate
    ``orderValidation`` event is always tracked last.

    Args:
        tracker: Event sink for validation outcome events
        emit_aggregate_verdict: If False (default) the final event always
            reports ``valid: True`` to mark completion of the run. If True
            it reports the computed verdict.
    """

    def __init__(self, tracker: EventTrackerPort, emit_aggregate_verdict: bool = False):
        self.tracker = tracker
        self.emit_aggregate_verdict = emit_aggregate_verdict

    async def validate(self, context: ValidationContext) -> list[ValidationIssue]:
        """Run all validation rules on an order snapshot.

        Collaborator exceptions are logged and re-raised unchanged.

        Args:
            context: Validation context with items, total and collaborators

        Returns:
            List of all ValidationIssue objects found
        """
        all_issues = []

        rule_functions = [
            ("stock_rules", validate_stock_rules),
            ("delivery_rules", validate_delivery_rules),
            ("price_rules", validate_price_rules),
        ]

        for rule_name, rule_func in rule_functions:
            try:
                issues = rule_func(context)
                if inspect.isawaitable(issues):
                    issues = await issues
            except Exception as e:
                logger.error(
                    f"Validation rule '{rule_name}' failed for order {context.order_id}: {e}",
                    exc_info=True,
                    extra={"order_id": context.order_id}
                )
                raise

            logger.debug(
                f"Validation rule '{rule_name}' found {len(issues)} issues for order {context.order_id}"
            )

            await self._track_failures(context.order_id, len(issues))
            all_issues.extend(issues)

        logger.info(
            f"Validation completed for order {context.order_id}: {len(all_issues)} total issues",
            extra={"order_id": context.order_id}
        )

        return all_issues

    async def _track_failures(self, order_id: str, count: int) -> None:
        """Track ``count`` invalid events concurrently.

        Every track call runs to completion before the first failure, if
        any, is re-raised.
        """
        results = await asyncio.gather(
            *(
                self.tracker.track(ORDER_VALIDATION, {"orderId": order_id, "valid": False})
                for _ in range(count)
            ),
            return_exceptions=True
        )
        errors = [result for result in results if isinstance(result, BaseException)]
        if errors:
            logger.error(
                f"{len(errors)} of {count} validation events failed to track for order {order_id}",
                extra={"order_id": order_id}
            )
            raise errors[0]

    def compute_result(
        self,
        issues: list[ValidationIssue],
        checked_at: Optional[datetime] = None
    ) -> ValidationResult:
        """Compute the aggregate verdict from validation issues.

        - valid = True if no issues were recorded
        - reasons = issue types in detection order
        - checked_at = validation time of the run

        Args:
            issues: Issues collected by validate()
            checked_at: Validation time of the run (default: now)

        Returns:
            ValidationResult with valid boolean and reasons
        """
        result = ValidationResult(
            valid=len(issues) == 0,
            reasons=[issue.type.value for issue in issues],
            issues=list(issues)
        )
        if checked_at is not None:
            result.checked_at = checked_at.isoformat()
        return result

    async def run(self, context: ValidationContext) -> ValidationResult:
        """Validate, compute the verdict and track the final event.

        Each run gets its own correlation ID for log grouping; the caller's
        correlation ID is restored when the run ends.

        Args:
            context: Validation context

        Returns:
            ValidationResult for this run
        """
        token = correlation_id_var.set(generate_correlation_id())
        try:
            return await self._run(context)
        finally:
            correlation_id_var.reset(token)

    async def _run(self, context: ValidationContext) -> ValidationResult:
        started = time.perf_counter()

        issues = await self.validate(context)
        result = self.compute_result(issues, checked_at=context.checked_at)

        validation_duration_seconds.observe(time.perf_counter() - started)
        validation_runs_total.labels(result="valid" if result.valid else "invalid").inc()
        for issue in issues:
            validation_issues_total.labels(
                issue_type=issue.type.value,
                severity=issue.severity.value
            ).inc()

        final_valid = result.valid if self.emit_aggregate_verdict else True
        await self.tracker.track(ORDER_VALIDATION, {"orderId": context.order_id, "valid": final_valid})

        logger.info(
            f"Validation verdict for order {context.order_id}: valid={result.valid}, "
            f"reasons={result.reasons}",
            extra={"order_id": context.order_id}
        )

        return result
