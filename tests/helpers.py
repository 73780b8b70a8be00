"""Helpers shared by the calendar_csp tests."""

import itertools
import random
from datetime import date, timedelta

from calendar_csp.models import DateConstraint, Operator

DAY0 = date(2019, 1, 1)


def day(offset: int) -> date:
    return DAY0 + timedelta(days=offset)


def brute_force(n_meetings, range_start, range_end, constraints):
    """Every assignment over the unfiltered range that satisfies all constraints."""
    n_days = (range_end - range_start).days + 1
    full_range = [range_start + timedelta(days=i) for i in range(n_days)]
    return [
        list(candidate)
        for candidate in itertools.product(full_range, repeat=n_meetings)
        if all(c.is_satisfied_by(candidate) for c in constraints)
    ]


def random_instance(seed, max_meetings=3, max_days=5, self_references=False):
    """
    Seeded random problem small enough to enumerate.

    With ``self_references`` a binary constraint may link a meeting to itself
    (e.g. ``0 < 0``).
    """
    rng = random.Random(seed)
    n_meetings = rng.randint(1, max_meetings)
    n_days = rng.randint(1, max_days)
    operators = list(Operator)
    constraints = set()
    for _ in range(rng.randint(0, n_meetings + 2)):
        op = rng.choice(operators)
        left = rng.randrange(n_meetings)
        others = [m for m in range(n_meetings) if self_references or m != left]
        if others and rng.random() < 0.6:
            constraints.add(DateConstraint.binary(op, left, rng.choice(others)))
        else:
            # Literal may fall one day outside the range on either side
            constraints.add(DateConstraint.unary(op, left, day(rng.randint(-1, n_days))))
    return n_meetings, DAY0, day(n_days - 1), constraints
