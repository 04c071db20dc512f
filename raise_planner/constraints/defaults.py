from typing import Dict

from .models import CountryConstraint, TypicalRange

# Country used when a roster record names a country missing from the table
DEFAULT_COUNTRY = "US"

DEFAULT_CONSTRAINTS: Dict[str, CountryConstraint] = {
    "US": CountryConstraint(
        country="US",
        max_raise_pct=0.12,  # above this needs VP sign-off, which is also the hard cap
        approval_threshold_pct=0.12,
        typical_range=TypicalRange(min=0.03, max=0.08),
        currency="USD",
    ),
    "India": CountryConstraint(
        country="India",
        max_raise_pct=0.50,
        approval_threshold_pct=0.25,
        typical_range=TypicalRange(min=0.10, max=0.20),
        currency="INR",
    ),
    "UK": CountryConstraint(
        country="UK",
        max_raise_pct=0.15,
        approval_threshold_pct=0.12,
        typical_range=TypicalRange(min=0.03, max=0.10),
        currency="GBP",
    ),
    "Canada": CountryConstraint(
        country="Canada",
        max_raise_pct=0.12,
        approval_threshold_pct=0.10,
        typical_range=TypicalRange(min=0.03, max=0.08),
        currency="CAD",
    ),
    "Germany": CountryConstraint(
        country="Germany",
        max_raise_pct=0.10,
        approval_threshold_pct=0.08,
        typical_range=TypicalRange(min=0.02, max=0.06),
        currency="EUR",
    ),
}
