# raise_planner/engines/scenarios.py
"""
What-if budget scenarios built by uniformly scaling recommended raises.

The baseline pipeline runs once. Each scenario scales every employee's
recommended percentage, re-validates the scaled intention against the
country policy, re-clamps the stored percentage into [0, max_raise_pct]
and recomputes impact and team totals from the scaled records.
"""

import logging
from dataclasses import dataclass, replace
from typing import Dict, Iterator, Mapping, Optional, Sequence, Tuple

from raise_planner.constraints import DEFAULT_CONSTRAINT_TABLE, ConstraintTable
from raise_planner.roster import Employee, validate_roster

from .impact import calculate_impact
from .recommendation import RaiseWeights, clamp_to_constraints
from .team import EmployeeRaiseResult, TeamRaiseResult, evaluate_employee, summarize_team
from .validation import validate_raise

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ScenarioDefinition:
    key: str
    name: str
    multiplier: float


DEFAULT_SCENARIOS: Tuple[ScenarioDefinition, ...] = (
    ScenarioDefinition("conservative", "Conservative (80% of recommended)", 0.8),
    ScenarioDefinition("recommended", "Recommended (100% of recommended)", 1.0),
    ScenarioDefinition("aggressive", "Aggressive (120% of recommended)", 1.2),
)


@dataclass(frozen=True)
class Scenario:
    key: str
    name: str
    multiplier: float
    result: TeamRaiseResult


class ScenarioSet(Mapping[str, Scenario]):
    """Read-only, ordered mapping of scenario key -> Scenario."""

    def __init__(self, scenarios: Sequence[Scenario]):
        self._scenarios: Dict[str, Scenario] = {s.key: s for s in scenarios}

    def __getitem__(self, key: str) -> Scenario:
        return self._scenarios[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._scenarios)

    def __len__(self) -> int:
        return len(self._scenarios)

    def __repr__(self) -> str:
        return f"ScenarioSet({list(self._scenarios)})"


def scale_result(
    baseline: EmployeeRaiseResult,
    multiplier: float,
    table: ConstraintTable,
) -> EmployeeRaiseResult:
    """
    Scale one employee's baseline raise and rebuild its derived records.

    The recommendation and impact describe the scaled raise clamped into
    [0, max]; the validation describes the unclamped scaled intention. The
    two approval flags can therefore disagree: a US intention of 13% stores
    a 12% recommendation that needs no approval, while its validation does.
    Team approval lists follow `validation.requires_approval`.
    """
    constraints = baseline.constraints
    employee = baseline.employee
    intended = baseline.recommendation.percentage * multiplier
    scaled = clamp_to_constraints(intended, constraints)

    recommendation = replace(
        baseline.recommendation,
        percentage=scaled,
        within_constraints=intended <= constraints.max_raise_pct,
        requires_approval=scaled > constraints.approval_threshold_pct,
    )
    return EmployeeRaiseResult(
        employee=employee,
        constraints=constraints,
        recommendation=recommendation,
        impact=calculate_impact(employee.current_salary, scaled, employee.currency),
        validation=validate_raise(employee, intended, table),
    )


def generate_scenarios(
    employees: Sequence[Employee],
    budget_amount: Optional[float] = None,
    table: Optional[ConstraintTable] = None,
    weights: Optional[RaiseWeights] = None,
    scenarios: Sequence[ScenarioDefinition] = DEFAULT_SCENARIOS,
) -> ScenarioSet:
    """
    Build one TeamRaiseResult per scenario definition.

    Args:
        employees: Roster records
        budget_amount: Budget cap applied to every scenario (optional)
        table: Constraint table; the built-in table if None
        weights: Raise weights; defaults if None
        scenarios: Scenario definitions, in output order

    Returns:
        ScenarioSet keyed by scenario key
    """
    employees = list(employees) if employees is not None else None
    validate_roster(employees, budget_amount)
    table = table or DEFAULT_CONSTRAINT_TABLE

    baseline = [evaluate_employee(emp, table, weights) for emp in employees]
    logger.info(f"[SCENARIO] Baseline computed for {len(baseline)} employees")

    built = []
    for definition in scenarios:
        scaled = [scale_result(r, definition.multiplier, table) for r in baseline]
        result = summarize_team(scaled, budget_amount)
        flagged = sum(1 for r in scaled if not r.validation.is_valid)
        if flagged:
            logger.warning(
                f"[SCENARIO] {definition.key}: {flagged} scaled raise(s) exceed country maximum "
                f"and were clamped"
            )
        logger.info(
            f"[SCENARIO] {definition.key} (x{definition.multiplier}): "
            f"increase {result.total_budget_increase:,.2f}"
        )
        built.append(Scenario(definition.key, definition.name, definition.multiplier, result))
    return ScenarioSet(built)
