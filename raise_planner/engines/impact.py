# raise_planner/engines/impact.py

from dataclasses import dataclass

# Total cost of employment = salary x loading factor (benefits, taxes)
BENEFITS_LOADING_FACTOR = 1.3


@dataclass(frozen=True)
class SalaryImpact:
    current_salary: float
    raise_pct: float
    raise_amount: float
    new_salary: float
    current_total_cost: float
    new_total_cost: float
    total_cost_increase: float
    currency: str = "USD"


def calculate_impact(current_salary: float, percentage: float, currency: str = "USD") -> SalaryImpact:
    """
    Convert a raise percentage into salary and total-cost deltas.

    Negative salaries are rejected upstream by `validate_roster`.
    """
    raise_amount = current_salary * percentage
    new_salary = current_salary + raise_amount
    current_total_cost = current_salary * BENEFITS_LOADING_FACTOR
    new_total_cost = new_salary * BENEFITS_LOADING_FACTOR
    return SalaryImpact(
        current_salary=current_salary,
        raise_pct=percentage,
        raise_amount=raise_amount,
        new_salary=new_salary,
        current_total_cost=current_total_cost,
        new_total_cost=new_total_cost,
        total_cost_increase=new_total_cost - current_total_cost,
        currency=currency,
    )
