# raise_planner/schema/enums.py

import numbers
from enum import Enum, IntEnum
from typing import Any, Optional


class PerformanceRating(IntEnum):
    """Closed five-point performance scale."""

    BELOW = 1
    PARTIAL = 2
    MEETS = 3
    EXCEEDS = 4
    FAR_EXCEEDS = 5

    @classmethod
    def parse(cls, value: Any) -> Optional["PerformanceRating"]:
        """
        Return the rating for an integer 1-5, or None for anything else.

        Any integral number is accepted, numpy integers included. Booleans
        and floats are rejected rather than coerced; roster loaders
        convert integral floats explicitly before building records.
        """
        if isinstance(value, cls):
            return value
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            return None
        try:
            return cls(int(value))
        except ValueError:
            return None


class RiskIndicator(str, Enum):
    """Flags that adjust a recommended raise multiplicatively."""

    FLIGHT_RISK = "flight_risk"
    PROMOTION_READY = "promotion_ready"
    NEW_HIRE = "new_hire"
    RECENT_RAISE = "recent_raise"

    @classmethod
    def parse(cls, value: Any) -> Optional["RiskIndicator"]:
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


class Severity(str, Enum):
    """Severity of a team-level advisory."""

    INFO = "info"
    WARNING = "warning"
    ERROR = "error"


class Urgency(str, Enum):
    """Urgency of an approval request."""

    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return {"low": 1, "medium": 2, "high": 3}[self.value]


__all__ = ["PerformanceRating", "RiskIndicator", "Severity", "Urgency"]
