from .loaders import (
    build_constraint_table,
    build_scenarios,
    build_weights,
    load_planner_config,
    load_yaml_config,
    parse_planner_config,
)
from .models import PlannerConfig

__all__ = [
    "PlannerConfig",
    "build_constraint_table",
    "build_scenarios",
    "build_weights",
    "load_planner_config",
    "load_yaml_config",
    "parse_planner_config",
]
