"""
Calendar satisfaction solving: filtering followed by backtracking search.
"""

import logging
import time
from datetime import date
from typing import Iterable, List, Optional

from .config import Backend, Propagation, SolverSettings, settings as default_settings
from .cpsat import solve_with_cpsat
from .domains import DomainStore
from .filtering import filter_domains
from .models import CalendarResult, DateConstraint, SolveStatus, check_references
from .search import SearchStats, backtrack

logger = logging.getLogger(__name__)


class CalendarSolver:
    """Backtracking solver for one calendar problem."""

    def __init__(
        self,
        n_meetings: int,
        range_start: date,
        range_end: date,
        constraints: Iterable[DateConstraint],
        propagation: Propagation = Propagation.SINGLE_PASS,
    ):
        self.constraints = list(constraints)
        self.propagation = propagation
        self.store = DomainStore.initialize(n_meetings, range_start, range_end)
        check_references(n_meetings, self.constraints)
        self.stats = SearchStats()

    def solve(self) -> CalendarResult:
        """Filter the domains and, if none is empty, search them."""
        start_time = time.time()

        if not filter_domains(self.store, self.constraints, self.propagation):
            return CalendarResult(
                success=False,
                status=SolveStatus.NO_SOLUTION_FILTERING.value,
                solve_time_seconds=time.time() - start_time,
            )

        dates = backtrack(self.store, self.constraints, self.stats)
        return CalendarResult(
            success=dates is not None,
            dates=dates or [],
            status=(SolveStatus.SOLVED if dates is not None else SolveStatus.NO_SOLUTION_SEARCH).value,
            nodes_visited=self.stats.nodes_visited,
            solve_time_seconds=time.time() - start_time,
        )


def solve(
    n_meetings: int,
    range_start: date,
    range_end: date,
    constraints: Iterable[DateConstraint],
) -> Optional[List[date]]:
    """
    Schedule ``n_meetings`` meetings within ``[range_start, range_end]``.

    Args:
        n_meetings: Number of meetings, indexed 0..n-1
        range_start: First allowed date (inclusive)
        range_end: Last allowed date (inclusive)
        constraints: Unary and binary date constraints

    Returns:
        One date per meeting, indexed by meeting, or None if no assignment
        satisfies every constraint

    Raises:
        InvalidRangeError: If range_end precedes range_start
        MalformedConstraintError: If a constraint references an unknown meeting
    """
    result = CalendarSolver(n_meetings, range_start, range_end, constraints).solve()
    return result.dates if result.success else None


def solve_calendar(
    n_meetings: int,
    range_start: date,
    range_end: date,
    constraints: Iterable[DateConstraint],
    config: Optional[SolverSettings] = None,
    backend: Optional[Backend] = None,
) -> CalendarResult:
    """
    Solve a calendar problem with the configured backend and report how.

    Args:
        n_meetings: Number of meetings, indexed 0..n-1
        range_start: First allowed date (inclusive)
        range_end: Last allowed date (inclusive)
        constraints: Unary and binary date constraints
        config: Settings to use instead of the global ones
        backend: Override for ``config.backend``

    Returns:
        CalendarResult with the assignment and solve status
    """
    if config is None:
        config = default_settings
    backend = Backend(backend) if backend is not None else config.backend
    constraints = list(constraints)

    if backend == Backend.CP_SAT:
        result = solve_with_cpsat(
            n_meetings,
            range_start,
            range_end,
            constraints,
            max_time_in_seconds=config.cpsat_max_time_in_seconds,
        )
    else:
        solver = CalendarSolver(
            n_meetings, range_start, range_end, constraints, propagation=config.propagation
        )
        result = solver.solve()

    logger.info(
        "Solved %d meetings over %s..%s with %d constraints: %s in %.3fs",
        n_meetings, range_start, range_end, len(constraints), result.status,
        result.solve_time_seconds,
    )
    return result
