"""
Applies the progression rules to stored goals.

Loads a goal and the day's step outcomes, runs
apps.goals.progression.evaluate_daily_outcome on snapshots of them and
writes the result back. Called after every step outcome write.
"""

import logging
from datetime import date
from uuid import UUID

from django.db import transaction

from apps.goals.models import DevelopmentGoal
from apps.goals.progression import (
    GoalProgress,
    StepOutcome,
    StepSnapshot,
    evaluate_daily_outcome,
)
from apps.shifts.models import StepProgress

from .exceptions import GoalNotFoundError

logger = logging.getLogger(__name__)

PROGRESS_FIELDS = [
    'status',
    'consecutive_all_correct',
    'mastery_achieved',
    'mastery_date',
    'streak_evaluated_on',
    'streak_before_evaluation',
]


def goal_snapshot(goal: DevelopmentGoal) -> GoalProgress:
    """Build a progression snapshot of a stored goal and its steps."""
    return GoalProgress(
        status=goal.status,
        consecutive_all_correct=goal.consecutive_all_correct,
        mastery_achieved=goal.mastery_achieved,
        mastery_date=goal.mastery_date,
        steps=tuple(
            StepSnapshot(
                step_id=step.id,
                is_required=step.is_required,
                step_order=step.step_order,
            )
            for step in goal.steps.all()
        ),
        streak_evaluated_on=goal.streak_evaluated_on,
        streak_before_evaluation=goal.streak_before_evaluation,
    )


def day_outcomes(goal: DevelopmentGoal, day: date) -> list:
    """Outcomes recorded for the goal on ``day``, oldest write first."""
    records = (
        StepProgress.objects
        .filter(goal=goal, date=day)
        .order_by('updated_at', 'created_at')
        .values_list('step_id', 'outcome')
    )
    return [StepOutcome(step_id=step_id, outcome=outcome) for step_id, outcome in records]


@transaction.atomic
def refresh_goal_progress(*, goal_id: UUID, day: date) -> DevelopmentGoal:
    """
    Re-derive a goal's streak and status from all of ``day``'s records.

    The goal row is locked for the duration, so concurrent refreshes of
    one goal run one after the other.

    Args:
        goal_id: Goal to refresh
        day: Calendar day whose records are evaluated

    Returns:
        The updated DevelopmentGoal

    Raises:
        GoalNotFoundError: If goal doesn't exist
    """
    try:
        goal = DevelopmentGoal.objects.select_for_update().get(id=goal_id)
    except DevelopmentGoal.DoesNotExist:
        raise GoalNotFoundError(f"Goal with ID {goal_id} not found")

    before = goal_snapshot(goal)
    after = evaluate_daily_outcome(before, day_outcomes(goal, day), day)

    if after == before:
        return goal

    for field in PROGRESS_FIELDS:
        setattr(goal, field, getattr(after, field))
    goal.save(update_fields=PROGRESS_FIELDS + ['updated_at'])

    logger.debug(
        "Goal %s streak on %s: %d -> %d",
        goal.id, day, before.consecutive_all_correct, after.consecutive_all_correct
    )
    if after.mastery_achieved and not before.mastery_achieved:
        logger.info(
            "Goal '%s' mastered on %s, status now %s",
            goal.title, after.mastery_date, after.status
        )

    return goal
