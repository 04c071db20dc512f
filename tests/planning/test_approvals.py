from raise_planner.planning import approval_urgency, build_approval_queue
from raise_planner.roster import Employee
from raise_planner.schema import Urgency


def test_queue_keeps_only_raises_needing_approval():
    us = Employee("U1", 100000.0, "US")
    india = Employee("I1", 900000.0, "India")
    queue = build_approval_queue([(us, 0.05), (us, 0.0), (india, 0.20), (india, 0.32)])
    assert len(queue) == 1
    item = queue[0]
    assert item.employee is india
    assert item.proposed_pct == 0.32
    assert item.threshold_exceeded == 0.32 - 0.25
    assert item.urgency is Urgency.MEDIUM
    assert item.validation.requires_approval


def test_queue_sorted_by_urgency():
    us = Employee("U1", 100000.0, "US")
    india = Employee("I1", 900000.0, "India")
    queue = build_approval_queue([(us, 0.13), (india, 0.32), (us, 0.20)])
    assert [(i.employee.employee_id, i.urgency) for i in queue] == [
        ("U1", Urgency.HIGH),
        ("I1", Urgency.MEDIUM),
        ("U1", Urgency.LOW),
    ]
    # 0.20 is also above the US maximum
    assert not queue[0].validation.is_valid


def test_low_rule_overrides_flight_risk():
    flight = Employee("F1", 100000.0, "India", risk_indicators=("flight_risk",))
    assert approval_urgency(flight, 0.26, 0.25) is Urgency.LOW
    assert approval_urgency(flight, 0.32, 0.25) is Urgency.HIGH


def test_far_over_threshold_is_high():
    emp = Employee("E", 1.0, "UK")
    assert approval_urgency(emp, 0.19, 0.12) is Urgency.HIGH
