"""
Shared enumerations and column names for the raise planner.

Example Usage:
    >>> from raise_planner.schema import PerformanceRating, RiskIndicator
    >>> PerformanceRating.parse(4)
    <PerformanceRating.EXCEEDS: 4>
    >>> RiskIndicator.parse("flight_risk")
    <RiskIndicator.FLIGHT_RISK: 'flight_risk'>
"""

from .enums import PerformanceRating, RiskIndicator, Severity, Urgency
from .columns import RosterColumns, ResultColumns, ScenarioColumns

__all__ = [
    "PerformanceRating",
    "RiskIndicator",
    "Severity",
    "Urgency",
    "RosterColumns",
    "ResultColumns",
    "ScenarioColumns",
]
