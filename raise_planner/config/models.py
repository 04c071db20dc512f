# raise_planner/config/models.py
"""
Pydantic models for validating the structure and types of the raise-policy
configuration loaded from YAML files (e.g., config/raise_policy.yaml).
"""

import logging
from typing import Dict, List, Optional

from pydantic import BaseModel, Field, model_validator

logger = logging.getLogger(__name__)

# --- Constraint Models ---


class TypicalRangeConfig(BaseModel):
    """Partial or complete typical raise band."""

    min: Optional[float] = Field(None, ge=0.0, description="Lower edge of the typical band")
    max: Optional[float] = Field(None, ge=0.0, description="Upper edge of the typical band")

    @model_validator(mode='after')
    def check_ordering(self) -> 'TypicalRangeConfig':
        if self.min is not None and self.max is not None and self.min > self.max:
            raise ValueError(f"typical_range min {self.min} exceeds max {self.max}")
        return self


class CountryConstraintConfig(BaseModel):
    """Override (or full definition) of one country's raise policy."""

    max_raise_pct: Optional[float] = Field(
        None, ge=0.0, description="Hard maximum raise (e.g., 0.12 for 12%)"
    )
    approval_threshold_pct: Optional[float] = Field(
        None, ge=0.0, description="Raise above which sign-off is required"
    )
    typical_range: Optional[TypicalRangeConfig] = None
    currency: Optional[str] = Field(None, min_length=3, max_length=3)
    budget_cycle: Optional[str] = None

    @model_validator(mode='after')
    def check_threshold_within_max(self) -> 'CountryConstraintConfig':
        if (
            self.max_raise_pct is not None
            and self.approval_threshold_pct is not None
            and self.approval_threshold_pct > self.max_raise_pct
        ):
            raise ValueError(
                f"approval_threshold_pct {self.approval_threshold_pct} exceeds "
                f"max_raise_pct {self.max_raise_pct}"
            )
        return self

    def as_overrides(self) -> Dict[str, object]:
        """Only the fields that were set, in ConstraintTable.with_overrides shape."""
        data = self.model_dump(exclude_none=True)
        if "typical_range" in data and not data["typical_range"]:
            data.pop("typical_range")
        return data


# --- Weights and Scenario Models ---


class RaiseWeightsConfig(BaseModel):
    performance_multipliers: Dict[int, float] = Field(
        default_factory=dict, description="Rating (1-5) -> multiplier overrides"
    )
    risk_factors: Dict[str, float] = Field(
        default_factory=dict, description="Risk indicator -> factor overrides"
    )
    default_performance_multiplier: Optional[float] = Field(None, ge=0.0)

    @model_validator(mode='after')
    def check_keys(self) -> 'RaiseWeightsConfig':
        bad = [k for k in self.performance_multipliers if k not in range(1, 6)]
        if bad:
            raise ValueError(f"performance_multipliers keys must be ratings 1-5, got {bad}")
        negative = {k: v for k, v in {**self.performance_multipliers, **self.risk_factors}.items() if v < 0}
        if negative:
            raise ValueError(f"Multipliers must be non-negative, got {negative}")
        return self


class ScenarioConfig(BaseModel):
    key: str
    name: Optional[str] = None
    multiplier: float = Field(..., ge=0.0)


class PlannerConfig(BaseModel):
    """Top-level raise-policy configuration."""

    default_country: Optional[str] = None
    replace_defaults: bool = Field(
        False, description="If true, the configured countries replace the built-in table"
    )
    countries: Dict[str, CountryConstraintConfig] = Field(default_factory=dict)
    weights: RaiseWeightsConfig = Field(default_factory=RaiseWeightsConfig)
    scenarios: List[ScenarioConfig] = Field(default_factory=list)
    budget_cap: Optional[float] = Field(None, gt=0.0)

    @model_validator(mode='after')
    def check_unique_scenarios(self) -> 'PlannerConfig':
        keys = [s.key for s in self.scenarios]
        if len(keys) != len(set(keys)):
            raise ValueError(f"Scenario keys must be unique, got {keys}")
        return self
