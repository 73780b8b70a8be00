"""
Candidate dates for each meeting.

The store is built once per solve from the requested range and then only
shrinks: the consistency filter removes dates in place, the search reads it.
"""

import copy
from datetime import date, timedelta
from typing import Iterator, List, Set

from .exceptions import InvalidProblemError, InvalidRangeError


class DomainStore:
    """One set of candidate dates per meeting index."""

    def __init__(self, domains: List[Set[date]]):
        self._domains = domains

    @classmethod
    def initialize(cls, n_meetings: int, range_start: date, range_end: date) -> "DomainStore":
        """Give every meeting the full range ``[range_start, range_end]``."""
        if n_meetings < 1:
            raise InvalidProblemError(f"At least one meeting is required, got {n_meetings}")
        if range_end < range_start:
            raise InvalidRangeError(range_start, range_end)

        n_days = (range_end - range_start).days + 1
        full_range = {range_start + timedelta(days=offset) for offset in range(n_days)}
        return cls([set(full_range) for _ in range(n_meetings)])

    def __getitem__(self, meeting: int) -> Set[date]:
        return self._domains[meeting]

    def __len__(self) -> int:
        return len(self._domains)

    def __iter__(self) -> Iterator[Set[date]]:
        return iter(self._domains)

    def sizes(self) -> List[int]:
        return [len(domain) for domain in self._domains]

    def empty_variables(self) -> List[int]:
        """Indices of meetings with no candidate left."""
        return [i for i, domain in enumerate(self._domains) if not domain]

    def is_wiped_out(self) -> bool:
        return any(not domain for domain in self._domains)

    def snapshot(self) -> List[Set[date]]:
        return copy.deepcopy(self._domains)
