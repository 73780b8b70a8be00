import pytest

from calendar_csp.models import DateConstraint, Operator


@pytest.fixture
def chain_constraints():
    """meeting0 < meeting1 < meeting2"""
    return [
        DateConstraint.binary(Operator.LESS, 0, 1),
        DateConstraint.binary(Operator.LESS, 1, 2),
    ]
