# raise_planner/constraints/models.py

from dataclasses import dataclass

from raise_planner.exceptions import ConstraintConfigError


@dataclass(frozen=True)
class TypicalRange:
    """Band of raises considered normal for a country absent special factors."""

    min: float
    max: float

    @property
    def midpoint(self) -> float:
        return (self.min + self.max) / 2


@dataclass(frozen=True)
class CountryConstraint:
    """Raise policy for one country.

    Args:
        country: Country code the policy applies to
        max_raise_pct: Hard maximum raise (fraction)
        approval_threshold_pct: Raise above which sign-off is required
        typical_range: Normal raise band
        currency: ISO currency code for salaries in this country
        budget_cycle: Budget period label
    """
    country: str
    max_raise_pct: float
    approval_threshold_pct: float
    typical_range: TypicalRange
    currency: str
    budget_cycle: str = "annual"

    def __post_init__(self):
        rng = self.typical_range
        if not 0 <= rng.min <= rng.max:
            raise ConstraintConfigError(
                f"{self.country}: typical range {rng.min}-{rng.max} must satisfy 0 <= min <= max"
            )
        if rng.max > self.max_raise_pct:
            raise ConstraintConfigError(
                f"{self.country}: typical range max {rng.max} exceeds max raise {self.max_raise_pct}"
            )
        if self.approval_threshold_pct > self.max_raise_pct:
            raise ConstraintConfigError(
                f"{self.country}: approval threshold {self.approval_threshold_pct} "
                f"exceeds max raise {self.max_raise_pct}"
            )
