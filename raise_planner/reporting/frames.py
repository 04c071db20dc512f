# raise_planner/reporting/frames.py
"""
Functions to flatten team and scenario results into pandas DataFrames.
"""

import logging

import numpy as np
import pandas as pd

from raise_planner.engines.scenarios import ScenarioSet
from raise_planner.engines.team import TeamRaiseResult
from raise_planner.schema import ResultColumns as RC
from raise_planner.schema import ScenarioColumns as SC

logger = logging.getLogger(__name__)

RESULT_COLS = [c.value for c in RC]
SCENARIO_COLS = [c.value for c in SC]


def team_result_frame(result: TeamRaiseResult) -> pd.DataFrame:
    """One row per employee, in roster order."""
    rows = []
    for r in result.employees:
        emp, rec, imp, val = r.employee, r.recommendation, r.impact, r.validation
        rows.append({
            RC.EMP_ID.value: emp.employee_id,
            RC.EMP_NAME.value: emp.display_name,
            RC.EMP_COUNTRY.value: r.constraints.country,
            RC.EMP_CURRENCY.value: imp.currency,
            RC.EMP_PERFORMANCE.value: emp.performance_rating,
            RC.CURRENT_SALARY.value: imp.current_salary,
            RC.BASE_RAISE.value: rec.base_raise,
            RC.PERFORMANCE_MULTIPLIER.value: rec.performance_multiplier,
            RC.RAISE_PCT.value: rec.percentage,
            RC.RAISE_AMOUNT.value: imp.raise_amount,
            RC.NEW_SALARY.value: imp.new_salary,
            RC.CURRENT_TOTAL_COST.value: imp.current_total_cost,
            RC.NEW_TOTAL_COST.value: imp.new_total_cost,
            RC.TOTAL_COST_INCREASE.value: imp.total_cost_increase,
            RC.APPLIED_RISK_FACTORS.value: ",".join(f.value for f in rec.applied_risk_factors),
            RC.IS_VALID.value: val.is_valid,
            RC.REQUIRES_APPROVAL.value: val.requires_approval,
            RC.WARNING_COUNT.value: len(val.warnings),
            RC.ERROR_COUNT.value: len(val.errors),
        })
    return pd.DataFrame(rows, columns=RESULT_COLS)


def scenario_comparison_frame(scenarios: ScenarioSet) -> pd.DataFrame:
    """One row per scenario, in scenario order. Utilization is NaN without a budget."""
    rows = []
    for key, scenario in scenarios.items():
        res = scenario.result
        rows.append({
            SC.SCENARIO.value: key,
            SC.NAME.value: scenario.name,
            SC.MULTIPLIER.value: scenario.multiplier,
            SC.TOTAL_CURRENT_COST.value: res.total_current_cost,
            SC.TOTAL_NEW_COST.value: res.total_new_cost,
            SC.TOTAL_BUDGET_INCREASE.value: res.total_budget_increase,
            SC.BUDGET_UTILIZATION.value: (
                np.nan if res.budget_utilization is None else res.budget_utilization
            ),
            SC.BUDGET_EXCEEDED.value: res.budget_exceeded,
            SC.APPROVAL_COUNT.value: len(res.approval_required),
            SC.INVALID_COUNT.value: len(res.invalid),
            SC.EMPLOYEE_COUNT.value: len(res.employees),
        })
    return pd.DataFrame(rows, columns=SCENARIO_COLS).set_index(SC.SCENARIO.value)


def country_breakdown_frame(result: TeamRaiseResult) -> pd.DataFrame:
    """Headcount, average raise and summed costs per resolved country."""
    df = team_result_frame(result)
    if df.empty:
        logger.warning("Team result is empty. Returning empty country breakdown.")
        return pd.DataFrame()
    grouped = df.groupby(RC.EMP_COUNTRY.value, sort=True)
    return grouped.agg(
        headcount=(RC.EMP_ID.value, "count"),
        avg_raise_pct=(RC.RAISE_PCT.value, "mean"),
        total_raise_amount=(RC.RAISE_AMOUNT.value, "sum"),
        total_cost_increase=(RC.TOTAL_COST_INCREASE.value, "sum"),
        approval_count=(RC.REQUIRES_APPROVAL.value, "sum"),
    )
