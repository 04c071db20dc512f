# raise_planner/engines/validation.py
"""
Validate a raise percentage against the employee's country policy.

Kept independent of the recommendation engine so a manually edited raise
can be re-checked. All checks run; a single call may produce an error and
several warnings at once.
"""

import logging
from dataclasses import dataclass, field
from typing import Optional, Tuple

from raise_planner.constraints import DEFAULT_CONSTRAINT_TABLE, ConstraintTable
from raise_planner.roster import Employee

logger = logging.getLogger(__name__)

LOW_RAISE_FACTOR = 0.5
HIGH_RAISE_FACTOR = 1.5


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool = True
    errors: Tuple[str, ...] = field(default_factory=tuple)
    warnings: Tuple[str, ...] = field(default_factory=tuple)
    requires_approval: bool = False


def _pct(value: float) -> str:
    return f"{value * 100:.1f}%"


def validate_raise(
    employee: Employee,
    percentage: float,
    table: Optional[ConstraintTable] = None,
) -> ValidationResult:
    """
    Check a raise against max, approval threshold and the typical range.

    Args:
        employee: Roster record whose country selects the policy
        percentage: Candidate raise (fraction)
        table: Constraint table; the built-in table if None

    Returns:
        ValidationResult; never raises for policy violations
    """
    table = table or DEFAULT_CONSTRAINT_TABLE
    constraints = table.lookup(employee.country)
    country = employee.country or constraints.country
    rng = constraints.typical_range
    typical = f"typical range: {_pct(rng.min)}-{_pct(rng.max)}"

    errors = []
    warnings = []
    requires_approval = False

    if percentage > constraints.max_raise_pct:
        errors.append(
            f"Raise of {_pct(percentage)} exceeds maximum of "
            f"{_pct(constraints.max_raise_pct)} for {country}"
        )

    if percentage > constraints.approval_threshold_pct:
        requires_approval = True
        warnings.append(
            f"Raise of {_pct(percentage)} requires VP approval "
            f"(threshold: {_pct(constraints.approval_threshold_pct)})"
        )

    if percentage < rng.min * LOW_RAISE_FACTOR:
        warnings.append(f"Raise of {_pct(percentage)} is unusually low for {country} ({typical})")

    if rng.max * HIGH_RAISE_FACTOR < percentage <= constraints.max_raise_pct:
        warnings.append(f"Raise of {_pct(percentage)} is unusually high for {country} ({typical})")

    if errors:
        logger.info(f"[VALIDATE] {employee.employee_id}: {errors[0]}")

    return ValidationResult(
        is_valid=not errors,
        errors=tuple(errors),
        warnings=tuple(warnings),
        requires_approval=requires_approval,
    )
