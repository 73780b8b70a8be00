"""
Tests for the CP-SAT backend.
"""

import pytest

from calendar_csp.cpsat import solve_with_cpsat
from calendar_csp.exceptions import InvalidRangeError, MalformedConstraintError
from calendar_csp.core import solve
from calendar_csp.models import DateConstraint, SolveStatus

from .helpers import DAY0, day, random_instance


class TestCpSatBackend:
    """Test cases for the CP-SAT encoding."""

    def test_increasing_chain(self, chain_constraints):
        result = solve_with_cpsat(3, DAY0, day(4), chain_constraints)

        assert result.success is True
        assert result.status == SolveStatus.SOLVED.value
        assert result.dates[0] < result.dates[1] < result.dates[2]

    def test_unary_literal_outside_range(self):
        result = solve_with_cpsat(1, DAY0, day(2), [DateConstraint.unary("==", 0, day(9))])

        assert result.success is False
        assert result.status == SolveStatus.NO_SOLUTION.value
        assert result.dates == []

    def test_not_equal(self):
        constraints = [
            DateConstraint.unary("!=", 0, day(0)),
            DateConstraint.binary("!=", 1, 0),
        ]
        result = solve_with_cpsat(2, DAY0, day(1), constraints)

        assert result.dates[0] == day(1)
        assert result.dates[1] == day(0)

    def test_invalid_range(self):
        with pytest.raises(InvalidRangeError):
            solve_with_cpsat(1, day(2), DAY0, [])

    def test_bad_reference(self):
        with pytest.raises(MalformedConstraintError):
            solve_with_cpsat(1, DAY0, day(2), [DateConstraint.binary("<", 0, 1)])

    @pytest.mark.parametrize("seed", range(60))
    def test_agrees_with_backtracking(self, seed):
        """Both backends reach the same verdict."""
        n_meetings, start, end, constraints = random_instance(seed)

        backtracking = solve(n_meetings, start, end, constraints)
        cpsat = solve_with_cpsat(n_meetings, start, end, constraints)

        assert cpsat.success == (backtracking is not None)
        if cpsat.success:
            assert all(c.is_satisfied_by(cpsat.dates) for c in constraints)
