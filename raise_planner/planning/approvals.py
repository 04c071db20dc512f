# raise_planner/planning/approvals.py
"""
Queue of proposed raises that need higher-level sign-off.
"""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from raise_planner.constraints import DEFAULT_CONSTRAINT_TABLE, ConstraintTable, CountryConstraint
from raise_planner.engines.validation import ValidationResult, validate_raise
from raise_planner.roster import Employee
from raise_planner.schema import RiskIndicator, Urgency

logger = logging.getLogger(__name__)

HIGH_URGENCY_RATIO = 1.5
LOW_URGENCY_RATIO = 1.2


@dataclass(frozen=True)
class ApprovalItem:
    employee: Employee
    proposed_pct: float
    validation: ValidationResult
    constraints: CountryConstraint
    threshold_exceeded: float
    urgency: Urgency


def approval_urgency(employee: Employee, proposed_pct: float, threshold: float) -> Urgency:
    """
    Urgency of a request: high when far over threshold or a flight risk,
    low when only slightly over. The low rule is applied last and wins.
    """
    urgency = Urgency.MEDIUM
    if proposed_pct > threshold * HIGH_URGENCY_RATIO:
        urgency = Urgency.HIGH
    if employee.has_risk(RiskIndicator.FLIGHT_RISK):
        urgency = Urgency.HIGH
    if proposed_pct < threshold * LOW_URGENCY_RATIO:
        urgency = Urgency.LOW
    return urgency


def build_approval_queue(
    proposals: Iterable[Tuple[Employee, float]],
    table: Optional[ConstraintTable] = None,
) -> List[ApprovalItem]:
    """
    Validate each (employee, proposed raise) pair and queue those needing approval.

    Non-positive proposals are skipped. The queue is ordered by urgency
    (high first); ties keep proposal order.
    """
    table = table or DEFAULT_CONSTRAINT_TABLE
    queue: List[ApprovalItem] = []
    for employee, proposed_pct in proposals:
        if not proposed_pct or proposed_pct <= 0:
            continue
        validation = validate_raise(employee, proposed_pct, table)
        if not validation.requires_approval:
            continue
        constraints = table.lookup(employee.country)
        threshold = constraints.approval_threshold_pct
        queue.append(ApprovalItem(
            employee=employee,
            proposed_pct=proposed_pct,
            validation=validation,
            constraints=constraints,
            threshold_exceeded=proposed_pct - threshold,
            urgency=approval_urgency(employee, proposed_pct, threshold),
        ))
    queue.sort(key=lambda item: -item.urgency.rank)
    logger.info(f"[APPROVAL] {len(queue)} raise(s) queued for approval")
    return queue
