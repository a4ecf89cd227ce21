"""
Step outcome recording.

Each write upserts the StepProgress row for its natural key
(goal, step, employee, shift, day) and then re-derives the goal's
progression from all of that day's records.
"""

import logging
from typing import Optional, Tuple
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.goals.models import DevelopmentGoal, GoalStatus, GoalStep
from apps.goals.services import GoalNotFoundError, refresh_goal_progress
from apps.shifts.models import ShiftRoster, StepProgress

from .exceptions import (
    ShiftNotFoundError,
    ShiftNotActiveError,
    EmployeeNotOnShiftError,
    StepNotInGoalError,
    GoalNotTrackableError,
)

logger = logging.getLogger(__name__)


@transaction.atomic
def record_step_outcome(
    *,
    shift_id: UUID,
    goal_id: UUID,
    step_id: UUID,
    outcome: str,
    notes: str = '',
    recorded_by: Optional[User] = None
) -> Tuple[StepProgress, DevelopmentGoal]:
    """
    Record (or overwrite) today's outcome of one goal step.

    Args:
        shift_id: Active shift the outcome belongs to
        goal_id: Goal being worked on
        step_id: Step of that goal
        outcome: 'correct', 'verbal_prompt' or 'na'
        notes: Manager notes
        recorded_by: Manager recording the outcome

    Returns:
        Tuple of (StepProgress, refreshed DevelopmentGoal)

    Raises:
        ShiftNotFoundError: If shift doesn't exist
        ShiftNotActiveError: If shift has ended
        GoalNotFoundError: If goal doesn't exist
        GoalNotTrackableError: If goal is archived
        StepNotInGoalError: If step is not part of the goal
        EmployeeNotOnShiftError: If the goal's employee is not on the roster
    """
    try:
        shift = ShiftRoster.objects.get(id=shift_id)
    except ShiftRoster.DoesNotExist:
        raise ShiftNotFoundError(f"Shift with ID {shift_id} not found")

    if not shift.is_active:
        raise ShiftNotActiveError("Outcomes can only be recorded during an active shift")

    try:
        goal = DevelopmentGoal.objects.select_related('employee').get(id=goal_id)
    except DevelopmentGoal.DoesNotExist:
        raise GoalNotFoundError(f"Goal with ID {goal_id} not found")

    if goal.status == GoalStatus.ARCHIVED:
        raise GoalNotTrackableError("Archived goals cannot receive outcomes")

    try:
        step = GoalStep.objects.get(id=step_id, goal=goal)
    except GoalStep.DoesNotExist:
        raise StepNotInGoalError("Step does not belong to this goal")

    if not shift.employees.filter(id=goal.employee_id).exists():
        raise EmployeeNotOnShiftError(f"{goal.employee.name} is not on this shift")

    today = timezone.localdate()
    progress, created = StepProgress.objects.update_or_create(
        goal=goal,
        step=step,
        employee=goal.employee,
        shift=shift,
        date=today,
        defaults={
            'outcome': outcome,
            'notes': notes or '',
            'recorded_by': recorded_by,
        }
    )

    logger.debug(
        "%s step %d of goal %s for %s: %s",
        'Recorded' if created else 'Updated',
        step.step_order, goal.id, goal.employee.name, outcome
    )

    goal = refresh_goal_progress(goal_id=goal.id, day=today)
    return progress, goal


def get_shift_outcomes(*, shift_id: UUID, employee_id: Optional[UUID] = None):
    """
    Outcomes recorded in a shift, optionally for one employee.

    Raises:
        ShiftNotFoundError: If shift doesn't exist
    """
    if not ShiftRoster.objects.filter(id=shift_id).exists():
        raise ShiftNotFoundError(f"Shift with ID {shift_id} not found")

    queryset = (
        StepProgress.objects
        .filter(shift_id=shift_id)
        .select_related('goal', 'step', 'employee', 'recorded_by')
        .order_by('employee__name', 'goal__title', 'step__step_order')
    )
    if employee_id:
        queryset = queryset.filter(employee_id=employee_id)
    return queryset
