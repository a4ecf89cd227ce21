"""
Domain-specific exceptions for shifts app.

These exceptions represent business rule violations and should be
caught in views and converted to appropriate HTTP responses.
"""


class ShiftsServiceError(Exception):
    """Base exception for all shifts service errors."""
    pass


class ShiftNotFoundError(ShiftsServiceError):
    """Raised when a shift does not exist."""
    pass


class EmptyRosterError(ShiftsServiceError):
    """Raised when starting a shift without any employee."""
    pass


class ShiftAlreadyActiveError(ShiftsServiceError):
    """Raised when starting a shift while another one is active."""
    pass


class NoActiveShiftError(ShiftsServiceError):
    """Raised when an operation needs an active shift and there is none."""
    pass


class ShiftNotActiveError(NoActiveShiftError):
    """Raised when writing to a shift that has already ended."""
    pass


class EmployeeNotOnShiftError(ShiftsServiceError):
    """Raised when an employee is not on the shift's roster."""
    pass


class StepNotInGoalError(ShiftsServiceError):
    """Raised when a step does not belong to the given goal."""
    pass


class GoalNotTrackableError(ShiftsServiceError):
    """Raised when recording an outcome against an archived goal."""
    pass
