# raise_planner/config/loaders.py

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import yaml
from cerberus import Validator
from pydantic import ValidationError

from raise_planner.constraints import (
    DEFAULT_CONSTRAINT_TABLE,
    ConstraintTable,
    merge_constraint_overrides,
)
from raise_planner.engines.recommendation import DEFAULT_WEIGHTS, RaiseWeights
from raise_planner.engines.scenarios import DEFAULT_SCENARIOS, ScenarioDefinition
from raise_planner.exceptions import ConfigLoadError, ConstraintConfigError
from raise_planner.schema import PerformanceRating, RiskIndicator

from .models import PlannerConfig

logger = logging.getLogger(__name__)

_RANGE_SCHEMA = {
    "type": "dict",
    "schema": {
        "min": {"type": "number", "required": False},
        "max": {"type": "number", "required": False},
    },
}

CONFIG_SCHEMA = {
    "default_country": {"type": "string", "required": False},
    "replace_defaults": {"type": "boolean", "required": False},
    "budget_cap": {"type": "number", "required": False, "nullable": True},
    "countries": {
        "type": "dict",
        "required": False,
        "keysrules": {"type": "string"},
        "valuesrules": {
            "type": "dict",
            "schema": {
                "max_raise_pct": {"type": "number", "required": False},
                "approval_threshold_pct": {"type": "number", "required": False},
                "typical_range": _RANGE_SCHEMA,
                "currency": {"type": "string", "required": False},
                "budget_cycle": {"type": "string", "required": False},
            },
        },
    },
    "weights": {
        "type": "dict",
        "required": False,
        "schema": {
            "performance_multipliers": {
                "type": "dict",
                "keysrules": {"type": "integer"},
                "valuesrules": {"type": "number"},
            },
            "risk_factors": {
                "type": "dict",
                "keysrules": {"type": "string", "allowed": [r.value for r in RiskIndicator]},
                "valuesrules": {"type": "number"},
            },
            "default_performance_multiplier": {"type": "number"},
        },
    },
    "scenarios": {
        "type": "list",
        "required": False,
        "schema": {
            "type": "dict",
            "schema": {
                "key": {"type": "string", "required": True},
                "name": {"type": "string", "required": False},
                "multiplier": {"type": "number", "required": True},
            },
        },
    },
}


def load_yaml_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Loads configuration data from a YAML file.

    Args:
        config_path: Path to the YAML configuration file.

    Returns:
        A dictionary containing the loaded configuration.

    Raises:
        ConfigLoadError: If the file cannot be found or parsed.
    """
    config_path = Path(config_path)
    logger.info(f"Attempting to load configuration from: {config_path}")

    if not config_path.is_file():
        logger.error(f"Configuration file not found at path: {config_path}")
        raise ConfigLoadError(f"Configuration file not found: {config_path}")

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            config_data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        logger.exception(f"Error parsing YAML configuration file {config_path}: {e}")
        raise ConfigLoadError(f"Error parsing YAML file {config_path}") from e
    except OSError as e:
        raise ConfigLoadError(f"Could not read configuration file {config_path}: {e}") from e

    if config_data is None:
        config_data = {}
    if not isinstance(config_data, dict):
        logger.error(f"Configuration file {config_path} did not parse into a dictionary.")
        raise ConfigLoadError(
            f"Invalid configuration format in {config_path}: Expected a dictionary."
        )

    logger.info(f"Successfully loaded configuration from {config_path}")
    return config_data


def parse_planner_config(config_data: Dict[str, Any]) -> PlannerConfig:
    """Schema-check raw config data, then validate it into a PlannerConfig."""
    v = Validator(CONFIG_SCHEMA)
    if not v.validate(config_data):
        raise ConfigLoadError(f"Config validation failed: {v.errors}")
    try:
        return PlannerConfig(**config_data)
    except ValidationError as e:
        raise ConfigLoadError(f"Invalid raise policy config: {e}") from e


def load_planner_config(config_path: Union[str, Path]) -> PlannerConfig:
    return parse_planner_config(load_yaml_config(config_path))


def build_constraint_table(
    config: PlannerConfig,
    base: Optional[ConstraintTable] = None,
) -> ConstraintTable:
    """
    Merge configured country overrides into a constraint table.

    With `replace_defaults`, the configured countries form the whole table
    and each must be fully specified.
    """
    base = base or DEFAULT_CONSTRAINT_TABLE
    overrides = {country: c.as_overrides() for country, c in config.countries.items()}
    try:
        if config.replace_defaults:
            if not overrides:
                raise ConfigLoadError("replace_defaults is set but no countries are configured")
            default_country = config.default_country or next(iter(overrides))
            return ConstraintTable(merge_constraint_overrides({}, overrides), default_country)
        return base.with_overrides(overrides, config.default_country)
    except ConstraintConfigError as e:
        raise ConfigLoadError(f"Invalid country constraints: {e}") from e


def build_weights(config: PlannerConfig, base: Optional[RaiseWeights] = None) -> RaiseWeights:
    base = base or DEFAULT_WEIGHTS
    wc = config.weights
    performance = dict(base.performance_multipliers)
    for rating, value in wc.performance_multipliers.items():
        performance[PerformanceRating(rating)] = value
    risk = dict(base.risk_factors)
    for flag, value in wc.risk_factors.items():
        risk[RiskIndicator(flag)] = value
    default = (
        wc.default_performance_multiplier
        if wc.default_performance_multiplier is not None
        else base.default_performance_multiplier
    )
    return RaiseWeights(performance, risk, default)


def build_scenarios(config: PlannerConfig) -> Tuple[ScenarioDefinition, ...]:
    if not config.scenarios:
        return DEFAULT_SCENARIOS
    return tuple(
        ScenarioDefinition(s.key, s.name or f"{s.key.title()} ({s.multiplier:.0%} of recommended)", s.multiplier)
        for s in config.scenarios
    )


__all__ = [
    "CONFIG_SCHEMA",
    "load_yaml_config",
    "parse_planner_config",
    "load_planner_config",
    "build_constraint_table",
    "build_weights",
    "build_scenarios",
]
