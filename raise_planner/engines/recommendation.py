# raise_planner/engines/recommendation.py
"""
Engine for computing a single employee's recommended raise.

The recommendation starts at the midpoint of the country's typical range,
is scaled by a performance multiplier and by any risk-indicator factors,
and is clamped into [0, max_raise_pct].
"""

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import List, Mapping, Optional, Tuple

from raise_planner.constraints import CountryConstraint
from raise_planner.roster import Employee
from raise_planner.schema import PerformanceRating, RiskIndicator

logger = logging.getLogger(__name__)

DEFAULT_PERFORMANCE_MULTIPLIER = 1.0

PERFORMANCE_MULTIPLIERS: Mapping[PerformanceRating, float] = MappingProxyType({
    PerformanceRating.BELOW: 0.5,
    PerformanceRating.PARTIAL: 0.75,
    PerformanceRating.MEETS: 1.0,
    PerformanceRating.EXCEEDS: 1.3,
    PerformanceRating.FAR_EXCEEDS: 1.6,
})

RISK_FACTORS: Mapping[RiskIndicator, float] = MappingProxyType({
    RiskIndicator.FLIGHT_RISK: 1.20,
    RiskIndicator.PROMOTION_READY: 1.15,
    RiskIndicator.NEW_HIRE: 0.80,
    RiskIndicator.RECENT_RAISE: 0.70,
})


@dataclass(frozen=True)
class RaiseWeights:
    """Configurable performance multipliers and risk factors."""

    performance_multipliers: Mapping[PerformanceRating, float] = field(
        default_factory=lambda: PERFORMANCE_MULTIPLIERS
    )
    risk_factors: Mapping[RiskIndicator, float] = field(default_factory=lambda: RISK_FACTORS)
    default_performance_multiplier: float = DEFAULT_PERFORMANCE_MULTIPLIER

    def __post_init__(self):
        missing = [r for r in PerformanceRating if r not in self.performance_multipliers]
        if missing:
            raise ValueError(f"performance_multipliers missing ratings: {[int(r) for r in missing]}")
        object.__setattr__(
            self, "performance_multipliers", MappingProxyType(dict(self.performance_multipliers))
        )
        object.__setattr__(self, "risk_factors", MappingProxyType(dict(self.risk_factors)))

    def performance_multiplier(self, rating) -> float:
        """Multiplier for a rating; unrated or out-of-range ratings get the default."""
        parsed = PerformanceRating.parse(rating)
        if parsed is None:
            return self.default_performance_multiplier
        return self.performance_multipliers[parsed]


DEFAULT_WEIGHTS = RaiseWeights()


@dataclass(frozen=True)
class RaiseRecommendation:
    percentage: float
    base_raise: float
    performance_multiplier: float
    applied_risk_factors: Tuple[RiskIndicator, ...]
    within_constraints: bool
    requires_approval: bool


def clamp_to_constraints(raise_pct: float, constraints: CountryConstraint) -> float:
    """Clamp a raise into [0, max_raise_pct]."""
    return max(min(raise_pct, constraints.max_raise_pct), 0.0)


def _resolve_risk_factors(
    flags, weights: RaiseWeights, employee_id
) -> List[Tuple[RiskIndicator, float]]:
    applied: List[Tuple[RiskIndicator, float]] = []
    seen = set()
    for flag in flags:
        indicator = RiskIndicator.parse(flag)
        if indicator is None or indicator not in weights.risk_factors:
            logger.debug(f"[RECOMMEND] {employee_id}: ignoring unknown risk indicator {flag!r}")
            continue
        if indicator in seen:
            continue
        seen.add(indicator)
        applied.append((indicator, weights.risk_factors[indicator]))
    return applied


def recommend(
    employee: Employee,
    constraints: CountryConstraint,
    weights: Optional[RaiseWeights] = None,
) -> RaiseRecommendation:
    """
    Compute the recommended raise for one employee.

    Args:
        employee: Roster record (not modified)
        constraints: Policy for the employee's country
        weights: Performance multipliers and risk factors; defaults if None

    Returns:
        RaiseRecommendation with the clamped percentage
    """
    weights = weights or DEFAULT_WEIGHTS

    base_raise = constraints.typical_range.midpoint
    performance_multiplier = weights.performance_multiplier(employee.performance_rating)
    raise_pct = base_raise * performance_multiplier

    applied = _resolve_risk_factors(employee.risk_indicators, weights, employee.employee_id)
    for _, factor in applied:
        raise_pct *= factor

    clamped = clamp_to_constraints(raise_pct, constraints)
    if clamped != raise_pct:
        logger.debug(
            f"[RECOMMEND] {employee.employee_id}: clamped {raise_pct:.4f} to {clamped:.4f} "
            f"({constraints.country} max {constraints.max_raise_pct:.2%})"
        )

    return RaiseRecommendation(
        percentage=clamped,
        base_raise=base_raise,
        performance_multiplier=performance_multiplier,
        applied_risk_factors=tuple(indicator for indicator, _ in applied),
        within_constraints=clamped <= constraints.max_raise_pct,
        requires_approval=clamped > constraints.approval_threshold_pct,
    )
