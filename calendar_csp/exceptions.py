"""
Exceptions raised by the calendar constraint solver.

"No solution" is a normal outcome and is never signalled with an exception.
"""


class CalendarCSPError(Exception):
    """Base exception for calendar_csp"""
    def __init__(self, message: str, error_code: str = None):
        self.message = message
        self.error_code = error_code
        super().__init__(message)


class InvalidProblemError(CalendarCSPError):
    """The problem itself cannot be posed (e.g. no meetings)"""
    def __init__(self, message: str, error_code: str = "INVALID_PROBLEM"):
        super().__init__(message, error_code)


class InvalidRangeError(InvalidProblemError):
    """Range end precedes range start"""
    def __init__(self, range_start, range_end):
        self.range_start = range_start
        self.range_end = range_end
        super().__init__(
            f"Range end {range_end} precedes range start {range_start}",
            "INVALID_RANGE",
        )


class MalformedConstraintError(CalendarCSPError):
    """Constraint with an unknown operator or a bad variable reference"""
    def __init__(self, message: str, constraint: str = None):
        if constraint:
            message = f"Malformed constraint '{constraint}': {message}"
        super().__init__(message, "MALFORMED_CONSTRAINT")
