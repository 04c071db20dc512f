# raise_planner/planning/suggestions.py
"""
Budget-planning suggestions layered on top of a team's own advisories.
"""

import logging
from typing import List

from raise_planner.engines.team import Advisory, TeamRaiseResult
from raise_planner.schema import PerformanceRating, Severity

logger = logging.getLogger(__name__)

HIGH_PERFORMER_RATING = PerformanceRating.EXCEEDS
UNDERVALUED_RAISE_PCT = 0.05


def budget_suggestions(result: TeamRaiseResult) -> List[Advisory]:
    """
    Return the team advisories followed by actionable planning suggestions.

    Adds `reduce_raises` when over budget, `approval_workflow` when any raise
    needs sign-off, and `undervalued_performers` when high performers are
    recommended less than 5%.
    """
    suggestions: List[Advisory] = list(result.recommendations)

    if result.budget_utilization is not None and result.budget_utilization > 1.0:
        overage = result.total_budget_increase - result.budget_cap
        suggestions.append(Advisory(
            type="reduce_raises",
            message=f"Consider reducing raises by {overage:,.2f} to stay within budget",
            severity=Severity.ERROR,
        ))

    if result.approval_required:
        suggestions.append(Advisory(
            type="approval_workflow",
            message=f"{len(result.approval_required)} employees require VP approval for their raises",
            severity=Severity.WARNING,
        ))

    undervalued = [
        r for r in result.employees
        if (PerformanceRating.parse(r.employee.performance_rating) or 0) >= HIGH_PERFORMER_RATING
        and r.recommendation.percentage < UNDERVALUED_RAISE_PCT
    ]
    if undervalued:
        suggestions.append(Advisory(
            type="undervalued_performers",
            message=(
                f"{len(undervalued)} high performers have raises below "
                f"{UNDERVALUED_RAISE_PCT:.0%} - consider increasing to retain talent"
            ),
            severity=Severity.INFO,
        ))

    logger.debug(f"[SUGGEST] {len(suggestions)} suggestion(s) for team of {len(result.employees)}")
    return suggestions
