"""
Engines package for the raise planner.

This package contains the per-employee engines (recommendation, impact,
validation) and the roster-level team and scenario engines built on them.
"""

from .impact import BENEFITS_LOADING_FACTOR, SalaryImpact, calculate_impact
from .recommendation import (
    DEFAULT_WEIGHTS,
    PERFORMANCE_MULTIPLIERS,
    RISK_FACTORS,
    RaiseRecommendation,
    RaiseWeights,
    recommend,
)
from .validation import ValidationResult, validate_raise
from .team import Advisory, EmployeeRaiseResult, TeamRaiseResult, aggregate_team
from .scenarios import DEFAULT_SCENARIOS, Scenario, ScenarioDefinition, ScenarioSet, generate_scenarios

__all__ = [
    "BENEFITS_LOADING_FACTOR",
    "SalaryImpact",
    "calculate_impact",
    "DEFAULT_WEIGHTS",
    "PERFORMANCE_MULTIPLIERS",
    "RISK_FACTORS",
    "RaiseRecommendation",
    "RaiseWeights",
    "recommend",
    "ValidationResult",
    "validate_raise",
    "Advisory",
    "EmployeeRaiseResult",
    "TeamRaiseResult",
    "aggregate_team",
    "DEFAULT_SCENARIOS",
    "Scenario",
    "ScenarioDefinition",
    "ScenarioSet",
    "generate_scenarios",
]
