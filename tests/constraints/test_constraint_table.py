import logging

import pytest

from raise_planner.constraints import (
    DEFAULT_CONSTRAINT_TABLE,
    ConstraintTable,
    CountryConstraint,
    TypicalRange,
)
from raise_planner.exceptions import ConstraintConfigError


def test_builtin_us_constraints(table):
    us = table.lookup("US")
    assert us.max_raise_pct == 0.12
    assert us.approval_threshold_pct == 0.12
    assert us.typical_range == TypicalRange(0.03, 0.08)
    assert us.currency == "USD"


def test_builtin_invariants_hold_for_every_country(table):
    for country in table:
        c = table.lookup(country)
        assert 0 <= c.typical_range.min <= c.typical_range.max <= c.max_raise_pct
        assert c.approval_threshold_pct <= c.max_raise_pct


@pytest.mark.parametrize("country", ["France", "", None, "us"])
def test_unknown_country_falls_back_to_us(table, country, caplog):
    with caplog.at_level(logging.WARNING, logger="raise_planner.constraints.table"):
        assert table.fallback_country(country) == "US"
        assert table.lookup(country) is table.lookup("US")
    assert not table.is_known(country)
    assert "Unknown country" in caplog.text


def test_known_country_does_not_log(table, caplog):
    with caplog.at_level(logging.WARNING):
        assert table.lookup("India").currency == "INR"
    assert caplog.records == []


def test_typical_range_above_max_is_rejected():
    with pytest.raises(ConstraintConfigError):
        CountryConstraint("XX", 0.05, 0.05, TypicalRange(0.01, 0.06), "XXX")


def test_threshold_above_max_is_rejected():
    with pytest.raises(ConstraintConfigError):
        CountryConstraint("XX", 0.10, 0.11, TypicalRange(0.01, 0.05), "XXX")


def test_default_country_must_be_in_table():
    with pytest.raises(ConstraintConfigError):
        ConstraintTable({}, default_country="US")


def test_with_overrides_returns_new_table():
    updated = DEFAULT_CONSTRAINT_TABLE.with_overrides({
        "UK": {"approval_threshold_pct": 0.10, "typical_range": {"max": 0.09}},
        "Japan": {
            "max_raise_pct": 0.08,
            "approval_threshold_pct": 0.06,
            "typical_range": {"min": 0.01, "max": 0.04},
            "currency": "JPY",
        },
    })
    assert updated.lookup("UK").approval_threshold_pct == 0.10
    assert updated.lookup("UK").typical_range == TypicalRange(0.03, 0.09)
    assert updated.lookup("UK").max_raise_pct == 0.15
    assert updated.lookup("Japan").currency == "JPY"
    # original untouched
    assert DEFAULT_CONSTRAINT_TABLE.lookup("UK").approval_threshold_pct == 0.12
    assert "Japan" not in DEFAULT_CONSTRAINT_TABLE


def test_new_country_without_range_is_rejected():
    with pytest.raises(ConstraintConfigError):
        DEFAULT_CONSTRAINT_TABLE.with_overrides({"Japan": {"max_raise_pct": 0.08}})


def test_override_breaking_invariant_is_rejected():
    with pytest.raises(ConstraintConfigError):
        DEFAULT_CONSTRAINT_TABLE.with_overrides({"Germany": {"approval_threshold_pct": 0.2}})
