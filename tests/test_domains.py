"""
Tests for the domain store.
"""

import pytest

from calendar_csp.domains import DomainStore
from calendar_csp.exceptions import InvalidProblemError, InvalidRangeError

from .helpers import DAY0, day


class TestDomainStore:
    """Test cases for domain construction."""

    def test_range_exactness(self):
        """Each domain holds every day of the range, inclusive."""
        store = DomainStore.initialize(3, DAY0, day(9))

        assert len(store) == 3
        assert store.sizes() == [10, 10, 10]
        assert min(store[0]) == DAY0
        assert max(store[0]) == day(9)

    def test_single_day_range(self):
        store = DomainStore.initialize(1, DAY0, DAY0)
        assert store[0] == {DAY0}

    def test_range_across_month_boundary(self):
        """Calendar days, not day-of-month arithmetic."""
        store = DomainStore.initialize(1, day(28), day(33))
        assert store.sizes() == [6]

    def test_domains_are_independent(self):
        """Pruning one meeting leaves the others untouched."""
        store = DomainStore.initialize(2, DAY0, day(2))
        store[0].clear()

        assert store.sizes() == [0, 3]
        assert store.empty_variables() == [0]
        assert store.is_wiped_out() is True

    def test_snapshot_is_a_copy(self):
        store = DomainStore.initialize(2, DAY0, day(1))
        snapshot = store.snapshot()
        store[1].discard(DAY0)

        assert snapshot[1] == {DAY0, day(1)}

    def test_inverted_range(self):
        """Range end before range start is rejected."""
        with pytest.raises(InvalidRangeError) as exc_info:
            DomainStore.initialize(2, day(3), DAY0)

        assert exc_info.value.error_code == "INVALID_RANGE"
        assert exc_info.value.range_start == day(3)

    def test_no_meetings(self):
        with pytest.raises(InvalidProblemError):
            DomainStore.initialize(0, DAY0, day(1))
