"""
Constraint propagation over the domain store.

Node consistency applies unary constraints to a single domain. Arc consistency
applies each binary constraint to the pair of domains it links, removing dates
that have no supporting partner on the other side. Both passes mutate the
store in place.
"""

import logging
from datetime import date
from typing import Callable, Iterable, Set

from .config import Propagation
from .domains import DomainStore
from .models import DateConstraint, Operator

logger = logging.getLogger(__name__)


def _revise(target: Set[date], support: Set[date], holds: Callable[[date, date], bool]) -> bool:
    """Drop every date in ``target`` without a partner in ``support``."""
    unsupported = {d for d in target if not any(holds(d, d2) for d2 in support)}
    target -= unsupported
    return bool(unsupported)


def node_consistency(store: DomainStore, constraints: Iterable[DateConstraint]) -> bool:
    """
    Apply every unary constraint to the domain it mentions.

    Returns True if any date was removed.
    """
    changed = False
    for constraint in constraints:
        if not constraint.is_unary:
            continue

        domain = store[constraint.left]
        literal = constraint.right_date
        before = len(domain)

        if constraint.operator == Operator.EQUAL:
            if literal in domain:
                domain.intersection_update({literal})
            else:
                domain.clear()
        elif constraint.operator == Operator.NOT_EQUAL:
            domain.discard(literal)
        else:
            domain -= {d for d in domain if not constraint.operator.holds(d, literal)}

        if len(domain) != before:
            changed = True
            logger.debug(
                "Node pass %s: meeting %d domain %d -> %d",
                constraint, constraint.left, before, len(domain),
            )
    return changed


def _arc_pass(store: DomainStore, constraints: Iterable[DateConstraint]) -> bool:
    changed = False
    for constraint in constraints:
        if constraint.is_unary:
            continue

        op = constraint.operator
        left = store[constraint.left]
        right = store[constraint.right_index]

        if op == Operator.EQUAL:
            before = len(left) + len(right)
            left.intersection_update(right)
            right.intersection_update(left)
            revised = len(left) + len(right) != before
        else:
            # NOT_EQUAL is revised here too, which the classic single pass
            # leaves alone; it can only prune against a singleton partner.
            # The second direction sees the first direction's result.
            revised = _revise(left, right, op.holds)
            revised = _revise(right, left, lambda d2, d: op.holds(d, d2)) or revised

        if revised:
            changed = True
            logger.debug(
                "Arc pass %s: domain sizes now %d / %d", constraint, len(left), len(right)
            )
    return changed


def arc_consistency(
    store: DomainStore,
    constraints: Iterable[DateConstraint],
    fixed_point: bool = False,
) -> bool:
    """
    Apply every binary constraint to both domains it links.

    By default each constraint is applied once, in iteration order, so a change
    made late in the pass is not propagated back through earlier constraints.
    With ``fixed_point`` the pass is repeated until no domain changes.

    Returns True if any date was removed.
    """
    constraints = list(constraints)
    changed = _arc_pass(store, constraints)
    if not fixed_point or not changed:
        return changed

    passes = 1
    while True:
        passes += 1
        if not _arc_pass(store, constraints) or store.is_wiped_out():
            break
    logger.debug("Arc consistency stopped after %d passes", passes)
    return True


def filter_domains(
    store: DomainStore,
    constraints: Iterable[DateConstraint],
    propagation: Propagation = Propagation.SINGLE_PASS,
) -> bool:
    """
    Run node consistency then arc consistency.

    Returns False when some meeting is left with no candidate date, meaning the
    problem has no solution.
    """
    constraints = list(constraints)
    node_consistency(store, constraints)
    arc_consistency(store, constraints, fixed_point=propagation == Propagation.FIXED_POINT)

    empty = store.empty_variables()
    if empty:
        logger.debug("Filtering emptied the domains of meetings %s", empty)
        return False
    logger.debug("Domain sizes after filtering: %s", store.sizes())
    return True
