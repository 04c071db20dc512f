# raise_planner/planning/optimizer.py
"""
Greedy budget allocation under different prioritisation strategies.

Each strategy orders the roster by its own priority, proposes a raise from
a 5% base scaled by a strategy multiplier, and funds employees in priority
order while the loaded raise cost still fits in the remaining budget.
Unrated employees are treated as meeting expectations (rating 3).
QuickStart: `compare_strategies(roster, budget)`.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from raise_planner.constraints import DEFAULT_CONSTRAINT_TABLE, ConstraintTable
from raise_planner.engines.impact import BENEFITS_LOADING_FACTOR
from raise_planner.exceptions import RaisePlannerError
from raise_planner.roster import Employee, validate_roster
from raise_planner.schema import PerformanceRating, RiskIndicator

logger = logging.getLogger(__name__)

STRATEGIES = ("retention", "performance", "equity", "balanced")

BASE_OPTIMIZED_RAISE = 0.05
UNDERPAID_COMPARATIO = 0.9
NEUTRAL_RATING = int(PerformanceRating.MEETS)


@dataclass(frozen=True)
class OptimizerOptions:
    min_raise: float = 0.02
    max_raise: float = 0.15
    respect_country_limits: bool = True


@dataclass(frozen=True)
class Allocation:
    employee: Employee
    raise_pct: float
    raise_cost: float
    new_salary: float
    priority_reason: str
    impact_score: float


@dataclass(frozen=True)
class StrategyMetrics:
    retention_score: float = 0.0
    performance_score: float = 0.0
    equity_score: float = 0.0
    overall_score: float = 0.0


@dataclass(frozen=True)
class OptimizationResult:
    strategy: str
    budget: float
    allocations: Tuple[Allocation, ...] = field(default_factory=tuple)
    total_budget_used: float = 0.0
    budget_utilization: float = 0.0
    metrics: StrategyMetrics = field(default_factory=StrategyMetrics)


def _rating(emp: Employee) -> int:
    parsed = PerformanceRating.parse(emp.performance_rating)
    return int(parsed) if parsed is not None else NEUTRAL_RATING


def _comparatio(emp: Employee) -> float:
    return emp.comparatio if emp.comparatio else 1.0


def _is_underpaid(emp: Employee) -> bool:
    return bool(emp.comparatio) and emp.comparatio < UNDERPAID_COMPARATIO


def balanced_score(emp: Employee) -> float:
    """Composite 0-100 score: performance 40, flight risk 30, pay equity 30."""
    score = _rating(emp) / 5 * 40
    if emp.has_risk(RiskIndicator.FLIGHT_RISK):
        score += 30
    comparatio = _comparatio(emp)
    if comparatio < UNDERPAID_COMPARATIO:
        score += 30 * (UNDERPAID_COMPARATIO - comparatio) / 0.2
    return score


def _retention_order(employees: Sequence[Employee]) -> List[Employee]:
    return sorted(
        employees,
        key=lambda e: (not e.has_risk(RiskIndicator.FLIGHT_RISK), -_rating(e)),
    )


def _performance_order(employees: Sequence[Employee]) -> List[Employee]:
    return sorted(employees, key=lambda e: (-_rating(e), e.current_salary))


def _equity_order(employees: Sequence[Employee]) -> List[Employee]:
    # comparatios within 0.1 of each other count as ties, broken by rating;
    # bucket first so the key stays a total order
    return sorted(employees, key=lambda e: (round(_comparatio(e) / 0.1), -_rating(e)))


def _balanced_order(employees: Sequence[Employee]) -> List[Employee]:
    return sorted(employees, key=lambda e: -balanced_score(e))


_ORDERINGS: Dict[str, Callable[[Sequence[Employee]], List[Employee]]] = {
    "retention": _retention_order,
    "performance": _performance_order,
    "equity": _equity_order,
    "balanced": _balanced_order,
}


def strategy_raise(emp: Employee, strategy: str) -> float:
    """Unclamped raise a strategy proposes for one employee."""
    multiplier = 1.0
    rating = _rating(emp)
    if strategy == "retention":
        if emp.has_risk(RiskIndicator.FLIGHT_RISK):
            multiplier = 1.5
        multiplier *= rating / 5 * 0.8 + 0.6
    elif strategy == "performance":
        multiplier = rating / 3
    elif strategy == "equity":
        comparatio = _comparatio(emp)
        if comparatio < UNDERPAID_COMPARATIO:
            multiplier = 1.5 * (UNDERPAID_COMPARATIO - comparatio) / 0.2 + 1.0
        multiplier *= rating / 5 * 0.5 + 0.5
    elif strategy == "balanced":
        multiplier = balanced_score(emp) / 50
    return BASE_OPTIMIZED_RAISE * multiplier


def priority_reason(emp: Employee) -> str:
    reasons = []
    if _rating(emp) >= PerformanceRating.EXCEEDS:
        reasons.append("High performer")
    if emp.has_risk(RiskIndicator.FLIGHT_RISK):
        reasons.append("Flight risk")
    if _is_underpaid(emp):
        reasons.append("Below market")
    if emp.has_risk(RiskIndicator.PROMOTION_READY):
        reasons.append("Promotion ready")
    return ", ".join(reasons) if reasons else "Standard adjustment"


def impact_score(emp: Employee, raise_pct: float) -> float:
    score = raise_pct / 0.1 * 20
    score += _rating(emp) * 10
    if emp.has_risk(RiskIndicator.FLIGHT_RISK):
        score += 30
    if _is_underpaid(emp):
        score += 25
    return min(score, 100.0)


def _coverage(funded: Sequence[Employee], roster: Sequence[Employee], predicate) -> float:
    total = sum(1 for e in roster if predicate(e))
    if total == 0:
        return 100.0
    return sum(1 for e in funded if predicate(e)) / total * 100


def strategy_metrics(funded: Sequence[Employee], roster: Sequence[Employee]) -> StrategyMetrics:
    """Share of flight risks, high performers and underpaid employees that got funded."""
    if not funded:
        return StrategyMetrics()
    retention = _coverage(funded, roster, lambda e: e.has_risk(RiskIndicator.FLIGHT_RISK))
    performance = _coverage(funded, roster, lambda e: _rating(e) >= PerformanceRating.EXCEEDS)
    equity = _coverage(funded, roster, _is_underpaid)
    return StrategyMetrics(
        retention_score=retention,
        performance_score=performance,
        equity_score=equity,
        overall_score=retention * 0.4 + performance * 0.4 + equity * 0.2,
    )


def optimize_budget(
    employees: Sequence[Employee],
    budget: float,
    goal: str = "balanced",
    options: Optional[OptimizerOptions] = None,
    table: Optional[ConstraintTable] = None,
) -> OptimizationResult:
    """
    Allocate `budget` (a total-cost amount) across the roster for one strategy.

    Args:
        employees: Roster records
        budget: Budget available for loaded raise costs, positive
        goal: One of STRATEGIES
        options: Raise bounds and whether to honour country maximums
        table: Constraint table used for country maximums

    Returns:
        OptimizationResult with funded allocations in priority order
    """
    if goal not in _ORDERINGS:
        raise RaisePlannerError(f"Unknown optimization goal '{goal}'; expected one of {STRATEGIES}")
    employees = list(employees) if employees is not None else None
    validate_roster(employees, budget)
    options = options or OptimizerOptions()
    table = table or DEFAULT_CONSTRAINT_TABLE

    remaining = budget
    allocations: List[Allocation] = []
    for emp in _ORDERINGS[goal](employees):
        if remaining <= 0:
            break
        raise_pct = min(max(strategy_raise(emp, goal), options.min_raise), options.max_raise)
        if options.respect_country_limits:
            raise_pct = min(raise_pct, table.lookup(emp.country).max_raise_pct)
        cost = emp.current_salary * raise_pct * BENEFITS_LOADING_FACTOR
        if cost > remaining:
            continue
        allocations.append(Allocation(
            employee=emp,
            raise_pct=raise_pct,
            raise_cost=cost,
            new_salary=emp.current_salary * (1 + raise_pct),
            priority_reason=priority_reason(emp),
            impact_score=impact_score(emp, raise_pct),
        ))
        remaining -= cost

    used = math.fsum(a.raise_cost for a in allocations)
    logger.info(
        f"[OPTIMIZE] {goal}: funded {len(allocations)}/{len(employees)} employees, "
        f"used {used:,.2f} of {budget:,.2f}"
    )
    return OptimizationResult(
        strategy=goal,
        budget=budget,
        allocations=tuple(allocations),
        total_budget_used=used,
        budget_utilization=used / budget,
        metrics=strategy_metrics([a.employee for a in allocations], employees),
    )


def compare_strategies(
    employees: Sequence[Employee],
    budget: float,
    options: Optional[OptimizerOptions] = None,
    table: Optional[ConstraintTable] = None,
) -> Dict[str, OptimizationResult]:
    """Run every strategy over the same roster and budget."""
    return {s: optimize_budget(employees, budget, s, options, table) for s in STRATEGIES}


def best_strategy(results: Dict[str, OptimizationResult]) -> Optional[OptimizationResult]:
    """Strategy with the highest overall score (first wins ties)."""
    if not results:
        return None
    return max(results.values(), key=lambda r: r.metrics.overall_score)
