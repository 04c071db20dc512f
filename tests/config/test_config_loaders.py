from pathlib import Path

import pytest
import yaml

from raise_planner.config import (
    build_constraint_table,
    build_scenarios,
    build_weights,
    load_planner_config,
    load_yaml_config,
    parse_planner_config,
)
from raise_planner.constraints import DEFAULT_CONSTRAINT_TABLE
from raise_planner.engines.scenarios import DEFAULT_SCENARIOS
from raise_planner.exceptions import ConfigLoadError
from raise_planner.schema import PerformanceRating, RiskIndicator

SAMPLE_CONFIG = Path(__file__).resolve().parents[2] / "config" / "raise_policy.yaml"


def _write(tmp_path, data, name="policy.yaml"):
    path = tmp_path / name
    path.write_text(yaml.safe_dump(data), encoding="utf-8")
    return path


def test_sample_config_loads():
    config = load_planner_config(SAMPLE_CONFIG)
    table = build_constraint_table(config)
    assert table.lookup("UK").approval_threshold_pct == 0.10
    assert table.lookup("Australia").currency == "AUD"
    assert table.default_country == "US"
    weights = build_weights(config)
    assert weights.performance_multipliers[PerformanceRating.FAR_EXCEEDS] == 1.5
    assert weights.performance_multipliers[PerformanceRating.MEETS] == 1.0
    assert weights.risk_factors[RiskIndicator.FLIGHT_RISK] == 1.25
    assert [s.key for s in build_scenarios(config)] == ["conservative", "recommended", "aggressive"]
    assert config.budget_cap == 50000


def test_empty_config_keeps_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    config = load_planner_config(path)
    table = build_constraint_table(config)
    assert table.countries == DEFAULT_CONSTRAINT_TABLE.countries
    assert build_scenarios(config) == DEFAULT_SCENARIOS


def test_missing_file(tmp_path):
    with pytest.raises(ConfigLoadError):
        load_yaml_config(tmp_path / "nope.yaml")


def test_non_mapping_yaml(tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- 1\n- 2\n", encoding="utf-8")
    with pytest.raises(ConfigLoadError):
        load_yaml_config(path)


def test_malformed_yaml(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("countries: [unclosed\n", encoding="utf-8")
    with pytest.raises(ConfigLoadError):
        load_yaml_config(path)


def test_unknown_risk_factor_fails_schema():
    with pytest.raises(ConfigLoadError, match="validation failed"):
        parse_planner_config({"weights": {"risk_factors": {"moonlighting": 1.1}}})


def test_rating_out_of_range_fails_model():
    with pytest.raises(ConfigLoadError):
        parse_planner_config({"weights": {"performance_multipliers": {7: 2.0}}})


def test_threshold_above_max_fails_model():
    with pytest.raises(ConfigLoadError):
        parse_planner_config(
            {"countries": {"US": {"max_raise_pct": 0.1, "approval_threshold_pct": 0.2}}}
        )


def test_override_breaking_existing_max_is_reported():
    config = parse_planner_config({"countries": {"Germany": {"approval_threshold_pct": 0.2}}})
    with pytest.raises(ConfigLoadError, match="Invalid country constraints"):
        build_constraint_table(config)


def test_replace_defaults(tmp_path):
    path = _write(tmp_path, {
        "replace_defaults": True,
        "default_country": "Brazil",
        "countries": {
            "Brazil": {
                "max_raise_pct": 0.2,
                "approval_threshold_pct": 0.15,
                "typical_range": {"min": 0.05, "max": 0.1},
                "currency": "BRL",
            }
        },
    })
    table = build_constraint_table(load_planner_config(path))
    assert table.countries == ("Brazil",)
    assert table.lookup("US").country == "Brazil"


def test_replace_defaults_requires_countries():
    config = parse_planner_config({"replace_defaults": True})
    with pytest.raises(ConfigLoadError):
        build_constraint_table(config)


def test_duplicate_scenario_keys_rejected():
    with pytest.raises(ConfigLoadError):
        parse_planner_config({"scenarios": [
            {"key": "a", "multiplier": 1.0},
            {"key": "a", "multiplier": 2.0},
        ]})


def test_scenario_default_name():
    config = parse_planner_config({"scenarios": [{"key": "stretch", "multiplier": 1.5}]})
    (scenario,) = build_scenarios(config)
    assert scenario.name == "Stretch (150% of recommended)"
    assert scenario.multiplier == 1.5
