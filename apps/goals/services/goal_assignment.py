"""
Goal assignment service.

An employee may have at most MAX_ACTIVE_GOALS goals in the active state.
The check locks the employee row, so two assignments for the same
employee cannot both pass it.
"""

import logging
from datetime import date, timedelta
from typing import List, Optional
from uuid import UUID

from django.db import transaction
from django.utils import timezone

from apps.accounts.models import User
from apps.employees.models import Employee
from apps.employees.services import EmployeeNotFoundError, EmployeeInactiveError
from apps.goals.models import (
    DevelopmentGoal,
    GoalStep,
    GoalStatus,
    GoalTemplate,
    TemplateStatus,
    DEFAULT_MASTERY_CRITERIA,
)

from .exceptions import (
    TemplateNotFoundError,
    TemplateArchivedError,
    GoalNotFoundError,
    ActiveGoalLimitError,
    GoalArchivedError,
    GoalAlreadyArchivedError,
)
from .template_management import validate_steps

logger = logging.getLogger(__name__)

MAX_ACTIVE_GOALS = 2
DEFAULT_TARGET_DAYS = 90


def _lock_employee_for_assignment(employee_id: UUID) -> Employee:
    """Lock the employee and make sure another active goal fits."""
    try:
        employee = Employee.objects.select_for_update().get(id=employee_id)
    except Employee.DoesNotExist:
        raise EmployeeNotFoundError(f"Employee with ID {employee_id} not found")

    if not employee.is_active:
        raise EmployeeInactiveError(f"{employee.name} is inactive and cannot receive goals")

    active_count = DevelopmentGoal.objects.filter(
        employee=employee,
        status=GoalStatus.ACTIVE
    ).count()
    if active_count >= MAX_ACTIVE_GOALS:
        raise ActiveGoalLimitError(
            f"{employee.name} already has {MAX_ACTIVE_GOALS} active goals"
        )

    return employee


def _create_goal(
    *,
    employee: Employee,
    title: str,
    description: str,
    mastery_criteria: str,
    start_date: date,
    target_end_date: Optional[date],
    steps: List[dict],
    assigned_by: Optional[User]
) -> DevelopmentGoal:
    goal = DevelopmentGoal.objects.create(
        employee=employee,
        title=title,
        description=description,
        mastery_criteria=mastery_criteria,
        start_date=start_date,
        target_end_date=target_end_date,
        created_by=assigned_by,
    )
    GoalStep.objects.bulk_create([
        GoalStep(
            goal=goal,
            step_order=position,
            step_description=step['step_description'],
            is_required=step.get('is_required', True),
        )
        for position, step in enumerate(steps, start=1)
    ])

    logger.info(
        "Goal '%s' assigned to %s by %s",
        goal.title, employee.name, assigned_by.email if assigned_by else 'system'
    )
    return goal


@transaction.atomic
def assign_goal_from_template(
    *,
    template_id: UUID,
    employee_id: UUID,
    assigned_by: Optional[User] = None,
    start_date: Optional[date] = None,
    target_end_date: Optional[date] = None
) -> DevelopmentGoal:
    """
    Create a goal for an employee by copying a template.

    The goal receives its own copy of the statement and steps; later
    template edits do not affect it.

    Args:
        template_id: Template to copy
        employee_id: Employee receiving the goal
        assigned_by: Manager assigning the goal
        start_date: Defaults to today
        target_end_date: Defaults to the template's date, else today + 90 days

    Returns:
        Created DevelopmentGoal instance

    Raises:
        TemplateNotFoundError: If template doesn't exist
        TemplateArchivedError: If template is archived
        EmployeeNotFoundError: If employee doesn't exist
        EmployeeInactiveError: If employee is inactive
        ActiveGoalLimitError: If employee already has 2 active goals
        NoRequiredStepsError: If the template has no required step
    """
    try:
        template = GoalTemplate.objects.prefetch_related('steps').get(id=template_id)
    except GoalTemplate.DoesNotExist:
        raise TemplateNotFoundError(f"Goal template with ID {template_id} not found")

    if template.status == TemplateStatus.ARCHIVED:
        raise TemplateArchivedError(f"Template '{template.name}' is archived")

    employee = _lock_employee_for_assignment(employee_id)

    steps = [
        {'step_description': step.step_description, 'is_required': step.is_required}
        for step in template.steps.all()
    ]
    validate_steps(steps)

    today = timezone.localdate()
    return _create_goal(
        employee=employee,
        title=template.name,
        description=template.goal_statement,
        mastery_criteria=template.default_mastery_criteria,
        start_date=start_date or today,
        target_end_date=(
            target_end_date
            or template.default_target_date
            or today + timedelta(days=DEFAULT_TARGET_DAYS)
        ),
        steps=steps,
        assigned_by=assigned_by,
    )


@transaction.atomic
def create_custom_goal(
    *,
    employee_id: UUID,
    title: str,
    steps: List[dict],
    description: str = '',
    mastery_criteria: str = DEFAULT_MASTERY_CRITERIA,
    start_date: Optional[date] = None,
    target_end_date: Optional[date] = None,
    assigned_by: Optional[User] = None
) -> DevelopmentGoal:
    """
    Create a goal with steps entered directly.

    Raises:
        EmployeeNotFoundError: If employee doesn't exist
        EmployeeInactiveError: If employee is inactive
        ActiveGoalLimitError: If employee already has 2 active goals
        NoRequiredStepsError: If no step is required
    """
    validate_steps(steps)
    employee = _lock_employee_for_assignment(employee_id)

    today = timezone.localdate()
    return _create_goal(
        employee=employee,
        title=title,
        description=description,
        mastery_criteria=mastery_criteria,
        start_date=start_date or today,
        target_end_date=target_end_date or today + timedelta(days=DEFAULT_TARGET_DAYS),
        steps=steps,
        assigned_by=assigned_by,
    )


def get_goal_by_id(*, goal_id: UUID) -> DevelopmentGoal:
    """
    Fetch a goal with employee and steps.

    Raises:
        GoalNotFoundError: If goal doesn't exist
    """
    try:
        return (
            DevelopmentGoal.objects
            .select_related('employee')
            .prefetch_related('steps')
            .get(id=goal_id)
        )
    except DevelopmentGoal.DoesNotExist:
        raise GoalNotFoundError(f"Goal with ID {goal_id} not found")


@transaction.atomic
def update_goal(*, goal_id: UUID, **changes) -> DevelopmentGoal:
    """
    Edit a goal's descriptive fields.

    Steps and progression fields cannot be changed here.

    Raises:
        GoalNotFoundError: If goal doesn't exist
        GoalArchivedError: If goal is archived
    """
    try:
        goal = DevelopmentGoal.objects.select_for_update().get(id=goal_id)
    except DevelopmentGoal.DoesNotExist:
        raise GoalNotFoundError(f"Goal with ID {goal_id} not found")

    if goal.status == GoalStatus.ARCHIVED:
        raise GoalArchivedError("Archived goals cannot be edited")

    allowed_fields = ['title', 'description', 'mastery_criteria', 'target_end_date']
    update_fields = [field for field in allowed_fields if field in changes]
    for field in update_fields:
        setattr(goal, field, changes[field])

    if update_fields:
        goal.save(update_fields=update_fields + ['updated_at'])

    return goal


@transaction.atomic
def archive_goal(*, goal_id: UUID, archived_by: Optional[User] = None) -> DevelopmentGoal:
    """
    Archive an active or maintenance goal. Archived is terminal.

    Raises:
        GoalNotFoundError: If goal doesn't exist
        GoalAlreadyArchivedError: If goal is already archived
    """
    try:
        goal = DevelopmentGoal.objects.select_for_update().get(id=goal_id)
    except DevelopmentGoal.DoesNotExist:
        raise GoalNotFoundError(f"Goal with ID {goal_id} not found")

    if goal.status == GoalStatus.ARCHIVED:
        raise GoalAlreadyArchivedError("Goal is already archived")

    goal.status = GoalStatus.ARCHIVED
    goal.save(update_fields=['status', 'updated_at'])

    logger.info(
        "Goal '%s' archived by %s",
        goal.title, archived_by.email if archived_by else 'system'
    )
    return goal
