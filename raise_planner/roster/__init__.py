from .models import Employee, roster_problems, validate_roster
from .frame import roster_from_frame

__all__ = ["Employee", "roster_problems", "validate_roster", "roster_from_frame"]
