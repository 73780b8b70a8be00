"""
API wrapper functions for calendar solving.
"""

import uuid
from datetime import date, datetime
from typing import Any, Dict, Optional, Union

from .config import SolverSettings
from .core import solve_calendar
from .exceptions import CalendarCSPError, MalformedConstraintError
from .models import (
    CalendarResult,
    DateConstraint,
    Operator,
    SolveRequest,
    SolveResponse,
)


def solve_calendar_api(
    request_data: Dict[str, Any],
    config: Optional[SolverSettings] = None,
) -> Dict[str, Any]:
    """
    API wrapper for calendar solving.

    Args:
        request_data: Dictionary containing solve request data
        config: Settings to use instead of the global ones

    Returns:
        Dictionary containing solve response data. Invalid requests produce
        an unsuccessful result whose status starts with "ERROR:".
    """
    request_id = str(uuid.uuid4())
    try:
        request = SolveRequest(**request_data)
        constraints = [_to_constraint(item) for item in request.constraints]

        result = solve_calendar(
            request.n_meetings,
            request.range_start,
            request.range_end,
            constraints,
            config=config,
            backend=request.backend,
        )
    except (CalendarCSPError, ValueError) as e:
        result = CalendarResult(success=False, status=f"ERROR: {str(e)}")

    response = SolveResponse(
        result=result,
        request_id=request_id,
        generated_at=datetime.now(),
    )
    return response.model_dump(mode="json")


def _to_constraint(item: Union[str, Dict[str, Any]]) -> DateConstraint:
    if isinstance(item, str):
        return parse_constraint(item)
    return create_constraint_from_dict(item)


def _parse_operator(symbol: str, source: str) -> Operator:
    try:
        return Operator(symbol)
    except ValueError:
        raise MalformedConstraintError(f"unknown operator '{symbol}'", source)


def parse_constraint(text: str) -> DateConstraint:
    """
    Parse a constraint written as ``<left> <op> <right>``.

    ``right`` is a meeting index (binary) or an ISO date (unary), e.g.
    ``"0 < 1"`` or ``"2 != 2019-05-09"``.
    """
    parts = text.split()
    if len(parts) != 3:
        raise MalformedConstraintError("expected '<left> <op> <right>'", text)

    left_str, op_str, right_str = parts
    op = _parse_operator(op_str, text)
    try:
        left = int(left_str)
        if right_str.isdigit():
            return DateConstraint.binary(op, left, int(right_str))
        return DateConstraint.unary(op, left, date.fromisoformat(right_str))
    except ValueError as e:
        raise MalformedConstraintError(str(e), text)


def create_constraint_from_dict(constraint_data: Dict[str, Any]) -> DateConstraint:
    """
    Create DateConstraint instance from dictionary data.

    Args:
        constraint_data: Dictionary with "operator", "left" and "right";
            an integer right operand makes a binary constraint, a date or ISO
            date string a unary one

    Returns:
        DateConstraint instance
    """
    source = str(constraint_data)
    for field in ("operator", "left", "right"):
        if field not in constraint_data:
            raise MalformedConstraintError(f"missing field '{field}'", source)

    op = _parse_operator(constraint_data["operator"], source)
    left = constraint_data["left"]
    right = constraint_data["right"]
    if not isinstance(left, int) or isinstance(left, bool):
        raise MalformedConstraintError(f"invalid left operand {left!r}", source)
    try:
        if isinstance(right, bool):
            raise ValueError(f"invalid right operand {right!r}")
        if isinstance(right, int):
            return DateConstraint.binary(op, left, right)
        if isinstance(right, str):
            right = date.fromisoformat(right)
        if not isinstance(right, date):
            raise ValueError(f"invalid right operand {right!r}")
        return DateConstraint.unary(op, left, right)
    except ValueError as e:
        raise MalformedConstraintError(str(e), source)


def format_calendar_result(result: CalendarResult) -> Dict[str, Any]:
    """
    Format CalendarResult for API response.

    Args:
        result: CalendarResult instance

    Returns:
        Formatted dictionary
    """
    return {
        'success': result.success,
        'dates': [d.isoformat() for d in result.dates],
        'status': result.status,
        'backend': result.backend,
        'nodes_visited': result.nodes_visited,
        'solve_time_seconds': result.solve_time_seconds,
        'span_days': result.span_days,
    }


def validate_solve_request(request_data: Dict[str, Any]) -> Optional[str]:
    """
    Validate solve request data.

    Args:
        request_data: Dictionary containing request data

    Returns:
        Error message if validation fails, None if valid
    """
    required_fields = ['n_meetings', 'range_start', 'range_end']
    for field in required_fields:
        if field not in request_data:
            return f"Missing required field: {field}"

    n_meetings = request_data['n_meetings']
    if not isinstance(n_meetings, int) or isinstance(n_meetings, bool) or n_meetings < 1:
        return "n_meetings must be a positive integer"

    bounds = {}
    for field in ('range_start', 'range_end'):
        value = request_data[field]
        if isinstance(value, date):
            bounds[field] = value
            continue
        try:
            bounds[field] = date.fromisoformat(str(value))
        except ValueError:
            return f"{field} must be in YYYY-MM-DD format"

    if bounds['range_end'] < bounds['range_start']:
        return "range_end must not precede range_start"

    constraints = request_data.get('constraints', [])
    if not isinstance(constraints, list):
        return "Constraints must be a list"

    for i, item in enumerate(constraints):
        if not isinstance(item, (str, dict)):
            return f"Constraint {i} must be a string or a dictionary"
        try:
            constraint = _to_constraint(item)
        except MalformedConstraintError as e:
            return f"Constraint {i}: {e.message}"
        for meeting in constraint.variables:
            if meeting >= n_meetings:
                return f"Constraint {i} references unknown meeting {meeting}"

    return None
