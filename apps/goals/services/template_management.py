"""
Goal template catalog service.

Templates are blueprints only. Editing or archiving a template never
touches goals that were already assigned from it.
"""

import logging
from datetime import date
from typing import List, Optional
from uuid import UUID

from django.db import transaction

from apps.accounts.models import User
from apps.goals.models import (
    GoalTemplate,
    GoalTemplateStep,
    TemplateStatus,
    DEFAULT_MASTERY_CRITERIA,
)

from .exceptions import (
    TemplateNotFoundError,
    TemplateArchivedError,
    NoRequiredStepsError,
)

logger = logging.getLogger(__name__)


def validate_steps(steps: List[dict]) -> None:
    """
    Check a list of step definitions before it is stored.

    Raises:
        NoRequiredStepsError: If no step is required
    """
    if not any(step.get('is_required', True) for step in steps):
        raise NoRequiredStepsError("At least one step must be required for mastery")


def _create_template_steps(template: GoalTemplate, steps: List[dict]) -> None:
    GoalTemplateStep.objects.bulk_create([
        GoalTemplateStep(
            template=template,
            step_order=position,
            step_description=step['step_description'],
            is_required=step.get('is_required', True),
        )
        for position, step in enumerate(steps, start=1)
    ])


def get_template_by_id(*, template_id: UUID) -> GoalTemplate:
    """
    Fetch a template with its steps.

    Raises:
        TemplateNotFoundError: If template doesn't exist
    """
    try:
        return GoalTemplate.objects.prefetch_related('steps').get(id=template_id)
    except GoalTemplate.DoesNotExist:
        raise TemplateNotFoundError(f"Goal template with ID {template_id} not found")


@transaction.atomic
def create_template(
    *,
    name: str,
    goal_statement: str,
    steps: List[dict],
    default_mastery_criteria: str = DEFAULT_MASTERY_CRITERIA,
    default_target_date: Optional[date] = None,
    created_by: Optional[User] = None
) -> GoalTemplate:
    """
    Create a goal template with ordered steps.

    Args:
        name: Template name
        goal_statement: What the employee will be able to do
        steps: Ordered list of {'step_description': str, 'is_required': bool}
        default_mastery_criteria: Criteria text copied to assigned goals
        default_target_date: Target date copied to assigned goals
        created_by: Admin creating the template

    Returns:
        Created GoalTemplate instance

    Raises:
        NoRequiredStepsError: If no step is required
    """
    validate_steps(steps)

    template = GoalTemplate.objects.create(
        name=name,
        goal_statement=goal_statement,
        default_mastery_criteria=default_mastery_criteria,
        default_target_date=default_target_date,
        created_by=created_by,
    )
    _create_template_steps(template, steps)

    logger.info("Goal template '%s' created with %d step(s)", template.name, len(steps))
    return template


@transaction.atomic
def update_template(*, template_id: UUID, **changes) -> GoalTemplate:
    """
    Update a template. When ``steps`` is given, the step list is replaced.

    Raises:
        TemplateNotFoundError: If template doesn't exist
        TemplateArchivedError: If template is archived
        NoRequiredStepsError: If the new step list has no required step
    """
    try:
        template = GoalTemplate.objects.select_for_update().get(id=template_id)
    except GoalTemplate.DoesNotExist:
        raise TemplateNotFoundError(f"Goal template with ID {template_id} not found")

    if template.status == TemplateStatus.ARCHIVED:
        raise TemplateArchivedError("Archived templates cannot be edited")

    steps = changes.pop('steps', None)
    if steps is not None:
        validate_steps(steps)
        template.steps.all().delete()
        _create_template_steps(template, steps)

    allowed_fields = ['name', 'goal_statement', 'default_mastery_criteria', 'default_target_date']
    update_fields = [field for field in allowed_fields if field in changes]
    for field in update_fields:
        setattr(template, field, changes[field])

    if update_fields or steps is not None:
        template.save(update_fields=update_fields + ['updated_at'])
        logger.info("Goal template '%s' updated", template.name)

    return template


@transaction.atomic
def archive_template(*, template_id: UUID) -> GoalTemplate:
    """
    Archive a template so it can no longer be assigned.

    Archiving twice is a no-op.

    Raises:
        TemplateNotFoundError: If template doesn't exist
    """
    try:
        template = GoalTemplate.objects.select_for_update().get(id=template_id)
    except GoalTemplate.DoesNotExist:
        raise TemplateNotFoundError(f"Goal template with ID {template_id} not found")

    if template.status != TemplateStatus.ARCHIVED:
        template.status = TemplateStatus.ARCHIVED
        template.save(update_fields=['status', 'updated_at'])
        logger.info("Goal template '%s' archived", template.name)

    return template
