import pytest

from raise_planner.engines.validation import validate_raise
from raise_planner.roster import Employee


def _emp(country):
    return Employee("E1", 100000.0, country, performance_rating=3)


def test_typical_raise_is_clean(us_employee):
    result = validate_raise(us_employee, 0.05)
    assert result.is_valid
    assert result.errors == ()
    assert result.warnings == ()
    assert not result.requires_approval


def test_above_max_is_hard_error(us_employee):
    result = validate_raise(us_employee, 0.13)
    assert not result.is_valid
    assert len(result.errors) == 1
    assert "exceeds maximum of 12.0% for US" in result.errors[0]
    # also above the approval threshold
    assert result.requires_approval
    assert any("requires VP approval (threshold: 12.0%)" in w for w in result.warnings)


def test_approval_and_unusually_high_together():
    result = validate_raise(_emp("Germany"), 0.095)
    assert result.is_valid
    assert result.requires_approval
    assert len(result.warnings) == 2
    assert any("unusually high for Germany" in w for w in result.warnings)


def test_unusually_low():
    result = validate_raise(_emp("Germany"), 0.005)
    assert result.is_valid
    assert result.warnings == (
        "Raise of 0.5% is unusually low for Germany (typical range: 2.0%-6.0%)",
    )


def test_india_low_performer_is_not_unusually_low(india_employee):
    result = validate_raise(india_employee, 0.075)
    assert result.is_valid
    assert not any("unusually low" in w for w in result.warnings)


def test_india_low_performer_with_penalties_is_unusually_low(india_employee):
    result = validate_raise(india_employee, 0.075 * 0.8 * 0.7)
    assert any("unusually low for India" in w for w in result.warnings)


def test_unknown_country_validates_against_us():
    result = validate_raise(_emp("France"), 0.13)
    assert not result.is_valid
    assert "for France" in result.errors[0]


@pytest.mark.parametrize("pct", [0.0, 0.05, 0.1199, 0.12, 0.1201, 0.3, 1.0])
def test_errors_iff_above_max(us_employee, pct):
    result = validate_raise(us_employee, pct)
    assert result.is_valid == (pct <= 0.12)
    assert bool(result.errors) == (not result.is_valid)


def test_custom_table_is_used(us_employee, table):
    strict = table.with_overrides({"US": {"max_raise_pct": 0.09, "approval_threshold_pct": 0.06}})
    result = validate_raise(us_employee, 0.07, strict)
    assert result.is_valid
    assert result.requires_approval


@pytest.fixture
def wide_table(table):
    # binary-exact bounds: low cutoff 0.125, high cutoff 0.75
    return table.with_overrides({"US": {
        "typical_range": {"min": 0.25, "max": 0.5},
        "max_raise_pct": 1.0,
        "approval_threshold_pct": 1.0,
    }})


@pytest.mark.parametrize("pct, low_warning", [(0.0625, True), (0.125, False), (0.25, False)])
def test_unusually_low_cutoff_is_strict(us_employee, wide_table, pct, low_warning):
    result = validate_raise(us_employee, pct, wide_table)
    assert any("unusually low" in w for w in result.warnings) == low_warning


@pytest.mark.parametrize("pct, high_warning", [(0.5, False), (0.75, False), (0.875, True)])
def test_unusually_high_cutoff_is_strict(us_employee, wide_table, pct, high_warning):
    result = validate_raise(us_employee, pct, wide_table)
    assert any("unusually high" in w for w in result.warnings) == high_warning
    assert result.is_valid
