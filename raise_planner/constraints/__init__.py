"""
Country raise-policy reference data.
"""

from .models import CountryConstraint, TypicalRange
from .defaults import DEFAULT_CONSTRAINTS, DEFAULT_COUNTRY
from .table import ConstraintTable, DEFAULT_CONSTRAINT_TABLE, merge_constraint_overrides

__all__ = [
    "CountryConstraint",
    "TypicalRange",
    "ConstraintTable",
    "DEFAULT_CONSTRAINTS",
    "DEFAULT_COUNTRY",
    "DEFAULT_CONSTRAINT_TABLE",
    "merge_constraint_overrides",
]
