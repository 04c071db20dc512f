import math

import pytest

from raise_planner.engines.team import aggregate_team, budget_advisories
from raise_planner.exceptions import RosterValidationError
from raise_planner.roster import Employee
from raise_planner.schema import Severity


@pytest.fixture
def two_us():
    return [
        Employee("A", 100000.0, "US", performance_rating=3),
        Employee("B", 100000.0, "US", performance_rating=3),
    ]


def test_totals_match_per_employee_impacts(mixed_roster):
    result = aggregate_team(mixed_roster)
    assert len(result.employees) == len(mixed_roster)
    assert result.total_current_cost == pytest.approx(
        sum(r.impact.current_total_cost for r in result.employees)
    )
    assert result.total_new_cost == pytest.approx(
        sum(r.impact.new_total_cost for r in result.employees)
    )
    assert result.total_budget_increase == pytest.approx(
        result.total_new_cost - result.total_current_cost
    )


def test_results_keep_roster_order_and_original_records(mixed_roster):
    result = aggregate_team(mixed_roster)
    assert [r.employee for r in result.employees] == mixed_roster
    assert all(r.employee is e for r, e in zip(result.employees, mixed_roster))


def test_aggregation_is_repeatable(mixed_roster):
    first = aggregate_team(mixed_roster, budget_cap=50000.0)
    second = aggregate_team(mixed_roster, budget_cap=50000.0)
    assert first == second


def test_no_cap_means_no_utilization(two_us):
    result = aggregate_team(two_us)
    assert result.budget_utilization is None
    assert not result.budget_exceeded
    assert result.recommendations == ()


def test_budget_exceeded(two_us):
    result = aggregate_team(two_us, budget_cap=10000.0)
    assert result.total_budget_increase == pytest.approx(14300.0)
    assert result.budget_exceeded
    assert result.budget_utilization == pytest.approx(1.43)
    assert result.budget_utilization > 1.0
    assert [a.type for a in result.recommendations] == ["budget_exceeded"]
    assert result.recommendations[0].severity is Severity.ERROR
    # still complete
    assert len(result.employees) == 2


def test_high_utilization_warning(two_us):
    result = aggregate_team(two_us, budget_cap=15000.0)
    assert not result.budget_exceeded
    assert [a.type for a in result.recommendations] == ["budget_warning"]
    assert result.recommendations[0].severity is Severity.WARNING
    assert "95.3%" in result.recommendations[0].message


def test_comfortable_budget(two_us):
    result = aggregate_team(two_us, budget_cap=100000.0)
    assert result.budget_utilization == pytest.approx(0.143)
    assert result.recommendations == ()


def test_approval_required_preserves_roster_order():
    roster = [
        Employee("C1", 50000.0, "Canada", performance_rating=5, risk_indicators=("flight_risk",)),
        Employee("U1", 50000.0, "US", performance_rating=3),
        Employee("C2", 60000.0, "Canada", performance_rating=5, risk_indicators=("promotion_ready",)),
    ]
    result = aggregate_team(roster)
    assert [r.employee_id for r in result.approval_required] == ["C1", "C2"]


def test_empty_roster():
    result = aggregate_team([], budget_cap=1000.0)
    assert result.employees == ()
    assert result.total_budget_increase == 0.0
    assert result.budget_utilization == 0.0
    assert not result.budget_exceeded


@pytest.mark.parametrize("salary", [-1.0, math.nan, math.inf])
def test_bad_salary_rejected_before_any_work(salary):
    roster = [Employee("OK", 1000.0, "US"), Employee("BAD", salary, "US")]
    with pytest.raises(RosterValidationError) as exc:
        aggregate_team(roster)
    assert len(exc.value.problems) == 1
    assert "BAD" in exc.value.problems[0]


def test_non_employee_record_rejected():
    with pytest.raises(RosterValidationError):
        aggregate_team([{"employee_id": "X", "current_salary": 1.0}])


@pytest.mark.parametrize("cap", [0.0, -5.0, math.nan])
def test_bad_budget_cap_rejected(two_us, cap):
    with pytest.raises(RosterValidationError):
        aggregate_team(two_us, budget_cap=cap)


def test_unknown_country_uses_us_constraints():
    result = aggregate_team([Employee("F1", 100000.0, "France", performance_rating=3)])
    entry = result.employees[0]
    assert entry.constraints.country == "US"
    assert entry.recommendation.percentage == pytest.approx(0.055)


@pytest.mark.parametrize("increase, exceeded, advisory_types", [
    (800.0, False, []),
    (900.0, False, []),
    (1000.0, False, ["budget_warning"]),
    (1000.5, True, ["budget_exceeded"]),
])
def test_budget_advisory_thresholds(increase, exceeded, advisory_types):
    utilization, is_exceeded, advisories = budget_advisories(increase, 1000.0)
    assert utilization == increase / 1000.0
    assert is_exceeded == exceeded
    assert [a.type for a in advisories] == advisory_types


def test_spending_exactly_the_cap_is_not_exceeded(two_us):
    uncapped = aggregate_team(two_us)
    result = aggregate_team(two_us, budget_cap=uncapped.total_budget_increase)
    assert result.budget_utilization == 1.0
    assert not result.budget_exceeded
    assert [a.type for a in result.recommendations] == ["budget_warning"]
