# raise_planner/roster/models.py

import logging
import math
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, List, Optional, Sequence, Tuple

from raise_planner.exceptions import RosterValidationError
from raise_planner.schema import RiskIndicator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Employee:
    """A roster record as delivered by the ingestion layer.

    Args:
        employee_id: Unique identifier
        current_salary: Annual salary in `currency`, non-negative
        country: Country code used to resolve raise constraints
        currency: ISO currency code of `current_salary`
        performance_rating: Integer 1-5, or None when unrated
        risk_indicators: Flags from the RiskIndicator vocabulary, in the order supplied
        tenure_years: Optional tenure
        name: Display name
        title: Job title
        comparatio: Salary relative to band midpoint, used by budget optimisation
    """
    employee_id: str
    current_salary: float
    country: Optional[str] = None
    currency: str = "USD"
    performance_rating: Optional[int] = None
    risk_indicators: Tuple[str, ...] = field(default_factory=tuple)
    tenure_years: Optional[float] = None
    name: str = ""
    title: Optional[str] = None
    comparatio: Optional[float] = None

    def __post_init__(self):
        # accept any iterable of flags but store an immutable tuple
        if isinstance(self.risk_indicators, str):
            object.__setattr__(self, "risk_indicators", (self.risk_indicators,))
        elif not isinstance(self.risk_indicators, tuple):
            object.__setattr__(self, "risk_indicators", tuple(self.risk_indicators or ()))

    def has_risk(self, indicator: RiskIndicator) -> bool:
        return any(RiskIndicator.parse(flag) is indicator for flag in self.risk_indicators)

    @property
    def display_name(self) -> str:
        return self.name or str(self.employee_id)


def _is_finite_number(value: Any) -> bool:
    return isinstance(value, Real) and not isinstance(value, bool) and math.isfinite(value)


def roster_problems(employees: Sequence[Any]) -> List[str]:
    """Collect every precondition violation in a roster without raising."""
    problems: List[str] = []
    for idx, emp in enumerate(employees):
        if not isinstance(emp, Employee):
            problems.append(f"record {idx}: expected Employee, got {type(emp).__name__}")
            continue
        label = f"record {idx} ({emp.employee_id})"
        if not _is_finite_number(emp.current_salary):
            problems.append(f"{label}: current_salary {emp.current_salary!r} is not a finite number")
        elif emp.current_salary < 0:
            problems.append(f"{label}: current_salary {emp.current_salary} is negative")
        if emp.tenure_years is not None and not _is_finite_number(emp.tenure_years):
            problems.append(f"{label}: tenure_years {emp.tenure_years!r} is not a finite number")
    return problems


def validate_roster(employees: Sequence[Any], budget_cap: Optional[float] = None) -> None:
    """
    Reject malformed input before any per-employee computation begins.

    Raises:
        RosterValidationError: listing every offending record (and the budget
            cap, when it is not a finite positive number).
    """
    if employees is None or isinstance(employees, (str, bytes)):
        raise RosterValidationError("Roster must be a sequence of Employee records")
    problems = roster_problems(list(employees))
    if budget_cap is not None and (not _is_finite_number(budget_cap) or budget_cap <= 0):
        problems.append(f"budget cap {budget_cap!r} must be a finite positive number")
    if problems:
        logger.error(f"[ROSTER] {len(problems)} precondition violation(s): {problems}")
        raise RosterValidationError(
            f"Roster failed validation with {len(problems)} problem(s): " + "; ".join(problems),
            problems,
        )
