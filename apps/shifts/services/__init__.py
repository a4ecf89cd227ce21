"""Services for shifts business logic."""

from .exceptions import (
    ShiftsServiceError,
    ShiftNotFoundError,
    EmptyRosterError,
    ShiftAlreadyActiveError,
    NoActiveShiftError,
    ShiftNotActiveError,
    EmployeeNotOnShiftError,
    StepNotInGoalError,
    GoalNotTrackableError,
)
from .shift_management import (
    get_active_shift,
    get_shift_by_id,
    start_shift,
    end_shift,
)
from .outcome_recording import (
    record_step_outcome,
    get_shift_outcomes,
)
from .shift_summaries import (
    save_shift_summary,
    get_shift_summaries,
)

__all__ = [
    # Exceptions
    'ShiftsServiceError',
    'ShiftNotFoundError',
    'EmptyRosterError',
    'ShiftAlreadyActiveError',
    'NoActiveShiftError',
    'ShiftNotActiveError',
    'EmployeeNotOnShiftError',
    'StepNotInGoalError',
    'GoalNotTrackableError',
    # Shifts
    'get_active_shift',
    'get_shift_by_id',
    'start_shift',
    'end_shift',
    # Outcomes
    'record_step_outcome',
    'get_shift_outcomes',
    # Summaries
    'save_shift_summary',
    'get_shift_summaries',
]
