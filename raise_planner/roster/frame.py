# raise_planner/roster/frame.py
"""
Build Employee records from a pandas DataFrame.

Conversions are explicit: NaN becomes None, integral float ratings become
int, and delimited risk-indicator strings become tuples. Anything else is
passed through untouched so the engine's own defaulting rules apply.
"""

import logging
import re
from typing import Any, List, Optional, Tuple

import pandas as pd

from raise_planner.exceptions import RosterValidationError
from raise_planner.schema import RosterColumns

from .models import Employee

logger = logging.getLogger(__name__)

_RISK_SPLIT = re.compile(r"[;,|]")


def _none_if_missing(value: Any) -> Any:
    if value is None:
        return None
    if isinstance(value, (list, tuple)):
        return value
    return None if pd.isna(value) else value


def _to_rating(value: Any) -> Any:
    value = _none_if_missing(value)
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def _to_risk_tuple(value: Any) -> Tuple[str, ...]:
    value = _none_if_missing(value)
    if value is None:
        return ()
    if isinstance(value, str):
        return tuple(part.strip() for part in _RISK_SPLIT.split(value) if part.strip())
    return tuple(value)


def _optional_float(value: Any) -> Optional[float]:
    value = _none_if_missing(value)
    return None if value is None else float(value)


def roster_from_frame(df: pd.DataFrame, default_currency: str = "USD") -> List[Employee]:
    """
    Convert roster rows into Employee records, preserving row order.

    Args:
        df: Roster frame using RosterColumns names
        default_currency: Currency for rows with no currency column/value

    Returns:
        List of Employee records
    """
    missing = [col for col in RosterColumns.required() if col not in df.columns]
    if missing:
        raise RosterValidationError(f"Roster frame missing required columns: {missing}", missing)

    def col(row, name: RosterColumns, default=None):
        return row[name.value] if name.value in row.index else default

    employees: List[Employee] = []
    for _, row in df.iterrows():
        emp_id = row[RosterColumns.EMP_ID.value]
        currency = _none_if_missing(col(row, RosterColumns.EMP_CURRENCY)) or default_currency
        employees.append(
            Employee(
                employee_id=str(emp_id),
                current_salary=float(row[RosterColumns.EMP_SALARY.value]),
                country=_none_if_missing(row[RosterColumns.EMP_COUNTRY.value]),
                currency=currency,
                performance_rating=_to_rating(col(row, RosterColumns.EMP_PERFORMANCE)),
                risk_indicators=_to_risk_tuple(col(row, RosterColumns.EMP_RISK)),
                tenure_years=_optional_float(col(row, RosterColumns.EMP_TENURE)),
                name=_none_if_missing(col(row, RosterColumns.EMP_NAME)) or "",
                title=_none_if_missing(col(row, RosterColumns.EMP_TITLE)),
                comparatio=_optional_float(col(row, RosterColumns.EMP_COMPARATIO)),
            )
        )
    logger.info(f"[ROSTER] Loaded {len(employees)} employees from frame")
    return employees
