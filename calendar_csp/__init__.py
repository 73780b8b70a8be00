"""
Calendar Satisfaction Problem Solver

Schedules meetings on calendar days subject to unary and binary date
constraints, using node and arc consistency followed by backtracking search.
"""

from .api import solve_calendar_api
from .core import CalendarSolver, solve, solve_calendar
from .exceptions import (
    CalendarCSPError,
    InvalidProblemError,
    InvalidRangeError,
    MalformedConstraintError,
)
from .models import CalendarResult, DateConstraint, Operator, SolveStatus

__version__ = "0.1.0"
__all__ = [
    "solve",
    "solve_calendar",
    "solve_calendar_api",
    "CalendarSolver",
    "CalendarResult",
    "DateConstraint",
    "Operator",
    "SolveStatus",
    "CalendarCSPError",
    "InvalidProblemError",
    "InvalidRangeError",
    "MalformedConstraintError",
]
