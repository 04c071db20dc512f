# raise_planner/engines/team.py
"""
Run the recommend -> impact -> validate pipeline over a roster and account
for the result against an optional budget cap.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple

from raise_planner.constraints import DEFAULT_CONSTRAINT_TABLE, ConstraintTable, CountryConstraint
from raise_planner.roster import Employee, validate_roster
from raise_planner.schema import Severity

from .impact import SalaryImpact, calculate_impact
from .recommendation import RaiseRecommendation, RaiseWeights, recommend
from .validation import ValidationResult, validate_raise

logger = logging.getLogger(__name__)

# Utilization above this (but within budget) triggers a warning advisory
BUDGET_WARNING_UTILIZATION = 0.9


@dataclass(frozen=True)
class EmployeeRaiseResult:
    employee: Employee
    constraints: CountryConstraint
    recommendation: RaiseRecommendation
    impact: SalaryImpact
    validation: ValidationResult

    @property
    def employee_id(self) -> str:
        return self.employee.employee_id


@dataclass(frozen=True)
class Advisory:
    type: str
    message: str
    severity: Severity


@dataclass(frozen=True)
class TeamRaiseResult:
    employees: Tuple[EmployeeRaiseResult, ...]
    total_current_cost: float
    total_new_cost: float
    total_budget_increase: float
    budget_cap: Optional[float] = None
    budget_utilization: Optional[float] = None
    approval_required: Tuple[EmployeeRaiseResult, ...] = field(default_factory=tuple)
    budget_exceeded: bool = False
    recommendations: Tuple[Advisory, ...] = field(default_factory=tuple)

    @property
    def invalid(self) -> Tuple[EmployeeRaiseResult, ...]:
        return tuple(r for r in self.employees if not r.validation.is_valid)


def evaluate_employee(
    employee: Employee,
    table: ConstraintTable,
    weights: Optional[RaiseWeights] = None,
) -> EmployeeRaiseResult:
    """Resolve constraints, recommend, compute impact and validate one employee."""
    constraints = table.lookup(employee.country)
    recommendation = recommend(employee, constraints, weights)
    impact = calculate_impact(employee.current_salary, recommendation.percentage, employee.currency)
    validation = validate_raise(employee, recommendation.percentage, table)
    return EmployeeRaiseResult(employee, constraints, recommendation, impact, validation)


def budget_advisories(total_budget_increase: float, budget_cap: Optional[float]):
    """
    Return (utilization, exceeded, advisories) for a total increase against a cap.

    Without a cap, utilization is None and nothing is flagged.
    """
    if budget_cap is None:
        return None, False, ()
    utilization = total_budget_increase / budget_cap
    exceeded = total_budget_increase > budget_cap
    advisories: List[Advisory] = []
    if exceeded:
        advisories.append(Advisory(
            type="budget_exceeded",
            message=(
                f"Total budget increase of {total_budget_increase:,.2f} exceeds "
                f"maximum of {budget_cap:,.2f}"
            ),
            severity=Severity.ERROR,
        ))
    elif utilization > BUDGET_WARNING_UTILIZATION:
        advisories.append(Advisory(
            type="budget_warning",
            message=f"Budget utilization is {utilization * 100:.1f}% - consider reviewing high raises",
            severity=Severity.WARNING,
        ))
    return utilization, exceeded, tuple(advisories)


def summarize_team(
    results: Sequence[EmployeeRaiseResult],
    budget_cap: Optional[float] = None,
) -> TeamRaiseResult:
    """Sum per-employee impacts and evaluate them against the budget cap."""
    total_current_cost = math.fsum(r.impact.current_total_cost for r in results)
    total_new_cost = math.fsum(r.impact.new_total_cost for r in results)
    total_budget_increase = total_new_cost - total_current_cost

    utilization, exceeded, advisories = budget_advisories(total_budget_increase, budget_cap)
    if exceeded:
        logger.warning(
            f"[TEAM] Budget exceeded: increase {total_budget_increase:,.2f} > cap {budget_cap:,.2f}"
        )

    return TeamRaiseResult(
        employees=tuple(results),
        total_current_cost=total_current_cost,
        total_new_cost=total_new_cost,
        total_budget_increase=total_budget_increase,
        budget_cap=budget_cap,
        budget_utilization=utilization,
        approval_required=tuple(r for r in results if r.validation.requires_approval),
        budget_exceeded=exceeded,
        recommendations=advisories,
    )


def aggregate_team(
    employees: Sequence[Employee],
    budget_cap: Optional[float] = None,
    table: Optional[ConstraintTable] = None,
    weights: Optional[RaiseWeights] = None,
) -> TeamRaiseResult:
    """
    Compute raise recommendations for a whole roster.

    Args:
        employees: Roster records, in display order
        budget_cap: Optional maximum total-cost increase
        table: Constraint table; the built-in table if None
        weights: Raise weights; defaults if None

    Returns:
        TeamRaiseResult; complete even when the budget is exceeded

    Raises:
        RosterValidationError: if any record or the cap is malformed
    """
    employees = list(employees) if employees is not None else None
    validate_roster(employees, budget_cap)
    table = table or DEFAULT_CONSTRAINT_TABLE

    logger.info(f"[TEAM] Computing raises for {len(employees)} employees (cap={budget_cap})")
    results = [evaluate_employee(emp, table, weights) for emp in employees]
    team = summarize_team(results, budget_cap)
    logger.info(
        f"[TEAM] Total increase {team.total_budget_increase:,.2f}; "
        f"{len(team.approval_required)} require approval"
    )
    return team
