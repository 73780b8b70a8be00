"""
Depth-first backtracking search over filtered domains.

Meetings are assigned in index order. A complete assignment is validated
against every constraint from scratch; the first one that passes is returned.
"""

import logging
from dataclasses import dataclass
from datetime import date
from typing import Iterable, List, Optional, Sequence

from .domains import DomainStore
from .models import DateConstraint

logger = logging.getLogger(__name__)

_EXHAUSTED = object()


@dataclass
class SearchStats:
    nodes_visited: int = 0
    leaves_checked: int = 0


def is_valid_assignment(assignment: Sequence[date], constraints: Iterable[DateConstraint]) -> bool:
    """True if every constraint holds for the complete ``assignment``."""
    return all(constraint.is_satisfied_by(assignment) for constraint in constraints)


def backtrack(
    store: DomainStore,
    constraints: Iterable[DateConstraint],
    stats: Optional[SearchStats] = None,
) -> Optional[List[date]]:
    """
    Find the first complete assignment that satisfies every constraint.

    The domains are only read. Each stack frame holds an iterator over the
    candidates of one meeting, so the stack depth equals the number of
    meetings assigned so far plus one.

    Returns:
        One date per meeting, or None once every branch is exhausted
    """
    constraints = list(constraints)
    if stats is None:
        stats = SearchStats()

    n_meetings = len(store)
    assignment: List[date] = []
    ordered = [sorted(domain) for domain in store]
    frames = [iter(ordered[0])]

    while frames:
        depth = len(frames) - 1
        candidate = next(frames[-1], _EXHAUSTED)
        # Retract whatever was tried at this depth or below
        del assignment[depth:]

        if candidate is _EXHAUSTED:
            frames.pop()
            continue

        assignment.append(candidate)
        stats.nodes_visited += 1

        if len(assignment) == n_meetings:
            stats.leaves_checked += 1
            if is_valid_assignment(assignment, constraints):
                logger.debug(
                    "Found assignment after %d nodes, %d leaves",
                    stats.nodes_visited, stats.leaves_checked,
                )
                return list(assignment)
            continue

        frames.append(iter(ordered[depth + 1]))

    logger.debug(
        "Search exhausted after %d nodes, %d leaves", stats.nodes_visited, stats.leaves_checked
    )
    return None
