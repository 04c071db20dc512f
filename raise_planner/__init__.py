"""
Raise planner: country-constrained raise recommendations, team budget
accounting and what-if scenarios.
"""

from .constraints import DEFAULT_CONSTRAINT_TABLE, ConstraintTable, CountryConstraint, TypicalRange
from .engines import (
    RaiseWeights,
    aggregate_team,
    calculate_impact,
    generate_scenarios,
    recommend,
    validate_raise,
)
from .exceptions import (
    ConfigLoadError,
    ConstraintConfigError,
    RaisePlannerError,
    RosterValidationError,
)
from .roster import Employee, roster_from_frame

__version__ = "0.1.0"

__all__ = [
    "DEFAULT_CONSTRAINT_TABLE",
    "ConstraintTable",
    "CountryConstraint",
    "TypicalRange",
    "RaiseWeights",
    "aggregate_team",
    "calculate_impact",
    "generate_scenarios",
    "recommend",
    "validate_raise",
    "ConfigLoadError",
    "ConstraintConfigError",
    "RaisePlannerError",
    "RosterValidationError",
    "Employee",
    "roster_from_frame",
]
