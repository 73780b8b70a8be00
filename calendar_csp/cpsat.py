"""
Calendar solving with the OR-Tools CP-SAT solver.

Each meeting becomes an integer variable holding its day offset from the
range start, so date ordering maps directly onto integer ordering.
"""

import logging
import time
from datetime import date, timedelta
from typing import Iterable

from ortools.sat.python import cp_model

from .exceptions import InvalidProblemError, InvalidRangeError
from .models import CalendarResult, DateConstraint, SolveStatus, check_references

logger = logging.getLogger(__name__)


def solve_with_cpsat(
    n_meetings: int,
    range_start: date,
    range_end: date,
    constraints: Iterable[DateConstraint],
    max_time_in_seconds: float = 10.0,
) -> CalendarResult:
    """
    Solve a calendar problem with CP-SAT.

    Args:
        n_meetings: Number of meetings, indexed 0..n-1
        range_start: First allowed date (inclusive)
        range_end: Last allowed date (inclusive)
        constraints: Unary and binary date constraints
        max_time_in_seconds: Solver time limit

    Returns:
        CalendarResult with backend "cp-sat"
    """
    start_time = time.time()
    constraints = list(constraints)
    if n_meetings < 1:
        raise InvalidProblemError(f"At least one meeting is required, got {n_meetings}")
    if range_end < range_start:
        raise InvalidRangeError(range_start, range_end)
    check_references(n_meetings, constraints)

    model = cp_model.CpModel()
    last_offset = (range_end - range_start).days
    x = [model.NewIntVar(0, last_offset, f"meeting_{i}") for i in range(n_meetings)]

    for constraint in constraints:
        if constraint.is_unary:
            right = (constraint.right_date - range_start).days
        else:
            right = x[constraint.right_index]
        model.Add(constraint.operator.holds(x[constraint.left], right))

    solver = cp_model.CpSolver()
    solver.parameters.max_time_in_seconds = float(max_time_in_seconds)
    status = solver.Solve(model)
    solve_time = time.time() - start_time

    if status in [cp_model.OPTIMAL, cp_model.FEASIBLE]:
        dates = [range_start + timedelta(days=solver.Value(var)) for var in x]
        return CalendarResult(
            success=True,
            dates=dates,
            status=SolveStatus.SOLVED.value,
            backend="cp-sat",
            solve_time_seconds=solve_time,
        )

    if status == cp_model.INFEASIBLE:
        solve_status = SolveStatus.NO_SOLUTION
    else:
        solve_status = SolveStatus.UNKNOWN
        logger.warning(
            "CP-SAT stopped without a verdict after %.2fs (%s)",
            solve_time, solver.StatusName(status),
        )
    return CalendarResult(
        success=False,
        status=solve_status.value,
        backend="cp-sat",
        solve_time_seconds=solve_time,
    )
