"""
Custom exception classes for the raise planner.

Policy outcomes (constraint violations, approval needs, budget overruns) are
returned as data on the result objects. These exceptions cover the remaining
failure modes: malformed input records and invalid configuration.
"""


class RaisePlannerError(Exception):
    """Base exception for all raise-planner errors."""

    pass


class RosterValidationError(RaisePlannerError):
    """Raised when roster records fail the entry-point precondition checks."""

    def __init__(self, message, problems=None):
        super().__init__(message)
        self.problems = list(problems or [])


class ConstraintConfigError(RaisePlannerError):
    """Raised when a country constraint breaks its range/threshold invariants."""

    pass


class ConfigLoadError(RaisePlannerError):
    """Raised for errors during config loading."""

    pass
