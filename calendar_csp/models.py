"""
Data models for the calendar constraint solver using Pydantic.
"""

import operator as _operator
from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Union

from pydantic import BaseModel, ConfigDict, Field, model_validator

from .exceptions import MalformedConstraintError


class Operator(str, Enum):
    """Relation between the left and right operand of a constraint."""
    EQUAL = "=="
    NOT_EQUAL = "!="
    GREATER = ">"     # left is after right
    LESS = "<"        # left is before right
    GREATER_EQUAL = ">="
    LESS_EQUAL = "<="

    def holds(self, left: Any, right: Any) -> bool:
        """Evaluate ``left OP right``."""
        return _RELATIONS[self](left, right)

    def __str__(self) -> str:
        return self.value


_RELATIONS: Dict[Operator, Callable[[Any, Any], bool]] = {
    Operator.EQUAL: _operator.eq,
    Operator.NOT_EQUAL: _operator.ne,
    Operator.GREATER: _operator.gt,
    Operator.LESS: _operator.lt,
    Operator.GREATER_EQUAL: _operator.ge,
    Operator.LESS_EQUAL: _operator.le,
}


class DateConstraint(BaseModel):
    """
    Unary or binary constraint on meeting dates.

    Read as ``meeting[left] OP right`` where ``right`` is either a literal
    date (unary) or another meeting index (binary). Exactly one of
    ``right_date`` and ``right_index`` is set.
    """
    model_config = ConfigDict(frozen=True)

    operator: Operator = Field(..., description="Comparison operator")
    left: int = Field(..., ge=0, description="Left meeting index")
    right_date: Optional[date] = Field(None, description="Literal date (unary)")
    right_index: Optional[int] = Field(None, ge=0, description="Right meeting index (binary)")

    @model_validator(mode="after")
    def check_single_right_operand(self) -> "DateConstraint":
        if (self.right_date is None) == (self.right_index is None):
            raise ValueError("Exactly one of right_date and right_index must be set")
        return self

    @classmethod
    def unary(cls, op: Union[Operator, str], left: int, right: date) -> "DateConstraint":
        return cls(operator=Operator(op), left=left, right_date=right)

    @classmethod
    def binary(cls, op: Union[Operator, str], left: int, right: int) -> "DateConstraint":
        return cls(operator=Operator(op), left=left, right_index=right)

    @property
    def arity(self) -> int:
        return 1 if self.right_date is not None else 2

    @property
    def is_unary(self) -> bool:
        return self.arity == 1

    @property
    def variables(self) -> List[int]:
        """Meeting indices referenced by this constraint."""
        if self.is_unary:
            return [self.left]
        return [self.left, self.right_index]

    def is_satisfied_by(self, assignment: Sequence[date]) -> bool:
        """Check the constraint against a complete assignment."""
        left_date = assignment[self.left]
        right_date = self.right_date if self.is_unary else assignment[self.right_index]
        return self.operator.holds(left_date, right_date)

    def __str__(self) -> str:
        right = self.right_date.isoformat() if self.is_unary else str(self.right_index)
        return f"{self.left} {self.operator.value} {right}"


def check_references(n_meetings: int, constraints: Iterable[DateConstraint]) -> None:
    """Raise MalformedConstraintError for any meeting index outside 0..n-1."""
    for constraint in constraints:
        for meeting in constraint.variables:
            if not 0 <= meeting < n_meetings:
                raise MalformedConstraintError(
                    f"meeting index {meeting} is outside 0..{n_meetings - 1}",
                    str(constraint),
                )


class SolveStatus(str, Enum):
    """Outcome of a solve."""
    SOLVED = "SOLVED"
    NO_SOLUTION_FILTERING = "NO_SOLUTION_FILTERING"  # a domain was emptied
    NO_SOLUTION_SEARCH = "NO_SOLUTION_SEARCH"        # search exhausted
    NO_SOLUTION = "NO_SOLUTION"                      # CP-SAT proved infeasible
    UNKNOWN = "UNKNOWN"                              # CP-SAT gave up


class CalendarResult(BaseModel):
    """Result of a calendar solve."""
    success: bool = Field(..., description="Whether a satisfying assignment was found")
    dates: List[date] = Field(default_factory=list, description="Date per meeting, by index")
    status: str = Field("", description="Solve status")
    backend: str = Field("backtracking", description="Backend that produced the result")
    nodes_visited: int = Field(0, ge=0, description="Search nodes expanded")
    solve_time_seconds: float = Field(0.0, description="Time taken to solve")

    @property
    def span_days(self) -> int:
        """Days between the earliest and the latest meeting."""
        if not self.dates:
            return 0
        return (max(self.dates) - min(self.dates)).days


class SolveRequest(BaseModel):
    """Request model for the dictionary API."""
    n_meetings: int = Field(..., gt=0, description="Number of meetings to schedule")
    range_start: date = Field(..., description="First allowed date (inclusive)")
    range_end: date = Field(..., description="Last allowed date (inclusive)")
    constraints: List[Union[str, Dict[str, Any]]] = Field(
        default_factory=list, description="Constraints as '0 < 1' strings or dicts"
    )
    backend: Optional[str] = Field(None, description="Override the configured backend")


class SolveResponse(BaseModel):
    """Response model for the dictionary API."""
    result: CalendarResult = Field(..., description="Solve result")
    request_id: Optional[str] = Field(None, description="Request identifier")
    generated_at: datetime = Field(default_factory=datetime.now, description="Response generation time")
