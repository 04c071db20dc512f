"""
Centralized column definitions for roster and result frames.

Roster columns are what `roster_from_frame` reads; result and scenario
columns are what the reporting module writes.
"""

from enum import Enum
from typing import List


class RosterColumns(str, Enum):
    """Column definitions for roster input frames."""

    EMP_ID = "employee_id"
    EMP_NAME = "name"
    EMP_TITLE = "title"
    EMP_COUNTRY = "country"
    EMP_CURRENCY = "currency"
    EMP_SALARY = "current_salary"
    EMP_PERFORMANCE = "performance_rating"
    EMP_TENURE = "tenure_years"
    EMP_RISK = "risk_indicators"
    EMP_COMPARATIO = "comparatio"

    @classmethod
    def required(cls) -> List[str]:
        return [cls.EMP_ID.value, cls.EMP_SALARY.value, cls.EMP_COUNTRY.value]


class ResultColumns(str, Enum):
    """Column definitions for per-employee result frames."""

    EMP_ID = "employee_id"
    EMP_NAME = "name"
    EMP_COUNTRY = "country"
    EMP_CURRENCY = "currency"
    EMP_PERFORMANCE = "performance_rating"
    CURRENT_SALARY = "current_salary"
    BASE_RAISE = "base_raise"
    PERFORMANCE_MULTIPLIER = "performance_multiplier"
    RAISE_PCT = "raise_pct"
    RAISE_AMOUNT = "raise_amount"
    NEW_SALARY = "new_salary"
    CURRENT_TOTAL_COST = "current_total_cost"
    NEW_TOTAL_COST = "new_total_cost"
    TOTAL_COST_INCREASE = "total_cost_increase"
    APPLIED_RISK_FACTORS = "applied_risk_factors"
    IS_VALID = "is_valid"
    REQUIRES_APPROVAL = "requires_approval"
    WARNING_COUNT = "warning_count"
    ERROR_COUNT = "error_count"


class ScenarioColumns(str, Enum):
    """Column definitions for scenario comparison frames."""

    SCENARIO = "scenario"
    NAME = "name"
    MULTIPLIER = "multiplier"
    TOTAL_CURRENT_COST = "total_current_cost"
    TOTAL_NEW_COST = "total_new_cost"
    TOTAL_BUDGET_INCREASE = "total_budget_increase"
    BUDGET_UTILIZATION = "budget_utilization"
    BUDGET_EXCEEDED = "budget_exceeded"
    APPROVAL_COUNT = "approval_count"
    INVALID_COUNT = "invalid_count"
    EMPLOYEE_COUNT = "employee_count"


__all__ = ["RosterColumns", "ResultColumns", "ScenarioColumns"]
