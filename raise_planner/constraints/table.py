# raise_planner/constraints/table.py
"""
Immutable lookup table of country raise policies.

Unknown country codes are not an error: they resolve to the table's default
country through `ConstraintTable.fallback_country`, and a warning is logged
so the configuration gap is visible without failing the computation.
"""

import logging
from dataclasses import replace
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional

from raise_planner.exceptions import ConstraintConfigError

from .defaults import DEFAULT_CONSTRAINTS, DEFAULT_COUNTRY
from .models import CountryConstraint, TypicalRange

logger = logging.getLogger(__name__)


class ConstraintTable:
    """Country code -> CountryConstraint mapping with an explicit fallback country."""

    def __init__(
        self,
        constraints: Mapping[str, CountryConstraint],
        default_country: str = DEFAULT_COUNTRY,
    ):
        if default_country not in constraints:
            raise ConstraintConfigError(
                f"Default country '{default_country}' is not present in the constraint table"
            )
        self._constraints = MappingProxyType(dict(constraints))
        self.default_country = default_country

    def __contains__(self, country: object) -> bool:
        return country in self._constraints

    def __iter__(self) -> Iterator[str]:
        return iter(self._constraints)

    def __len__(self) -> int:
        return len(self._constraints)

    def __repr__(self) -> str:
        return f"ConstraintTable(countries={list(self._constraints)}, default='{self.default_country}')"

    @property
    def countries(self):
        return tuple(self._constraints)

    def is_known(self, country: Optional[str]) -> bool:
        return bool(country) and country in self._constraints

    def fallback_country(self, country: Optional[str]) -> str:
        """
        Policy for resolving a country code to a table key.

        Known codes resolve to themselves. Missing or unrecognised codes
        resolve to the default country (the US baseline for the built-in
        table); this is a deliberate policy, not an error.
        """
        if self.is_known(country):
            return country
        logger.warning(
            f"[CONSTRAINTS] Unknown country {country!r}; using {self.default_country} constraints"
        )
        return self.default_country

    def lookup(self, country: Optional[str]) -> CountryConstraint:
        return self._constraints[self.fallback_country(country)]

    def with_overrides(
        self,
        overrides: Mapping[str, Mapping[str, Any]],
        default_country: Optional[str] = None,
    ) -> "ConstraintTable":
        """Return a new table with `overrides` merged in (see merge_constraint_overrides)."""
        merged = merge_constraint_overrides(self._constraints, overrides)
        logger.debug(f"[CONSTRAINTS] Applied overrides for {sorted(overrides)}")
        return ConstraintTable(merged, default_country or self.default_country)


def merge_constraint_overrides(
    constraints: Mapping[str, CountryConstraint],
    overrides: Mapping[str, Mapping[str, Any]],
) -> Dict[str, CountryConstraint]:
    """
    Merge per-country field overrides into a constraint mapping.

    Each override maps a country to any of the CountryConstraint fields
    (`typical_range` may be a partial {"min", "max"} mapping). Countries
    absent from `constraints` are added and must then supply every field.
    """
    merged: Dict[str, CountryConstraint] = dict(constraints)
    for country, fields in overrides.items():
        fields = dict(fields)
        base = merged.get(country)
        rng = fields.pop("typical_range", None)
        if base is None:
            if rng is None:
                raise ConstraintConfigError(f"New country '{country}' needs a typical_range")
            try:
                merged[country] = CountryConstraint(
                    country=country,
                    typical_range=TypicalRange(**dict(rng)),
                    **fields,
                )
            except TypeError as e:
                raise ConstraintConfigError(f"Incomplete constraint for '{country}': {e}") from e
            continue
        if rng is not None:
            fields["typical_range"] = replace(base.typical_range, **dict(rng))
        try:
            merged[country] = replace(base, **fields)
        except TypeError as e:
            raise ConstraintConfigError(f"Invalid override for '{country}': {e}") from e
    return merged


DEFAULT_CONSTRAINT_TABLE = ConstraintTable(DEFAULT_CONSTRAINTS, DEFAULT_COUNTRY)
