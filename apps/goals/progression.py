"""
Goal mastery progression.

Decides, from the step outcomes recorded for one goal on one day, whether
that day counts as fully correct, what the goal's consecutive-success
streak becomes, and whether the goal moves from active to maintenance.

Everything here works on immutable snapshots and has no database access;
apps.goals.services.goal_progress loads and stores the snapshots.

Rules:
    - A day is fully correct when every required step has a ``correct``
      outcome. A goal without required steps never has a fully correct day.
    - A fully correct day extends the streak by one; any other evaluated
      day resets it to zero.
    - Reaching MASTERY_STREAK for the first time records the mastery date
      and moves an active goal to maintenance. Mastery is never revoked.
    - Evaluating the same day again starts from the streak carried into
      that day, so repeated evaluation never double counts.
    - Archived goals are not evaluated.
"""

from dataclasses import dataclass, replace
from datetime import date
from typing import Any, Iterable, Optional, Tuple

MASTERY_STREAK = 3

STATUS_ACTIVE = 'active'
STATUS_MAINTENANCE = 'maintenance'
STATUS_ARCHIVED = 'archived'

OUTCOME_CORRECT = 'correct'


@dataclass(frozen=True)
class StepSnapshot:
    step_id: Any
    is_required: bool = True
    step_order: int = 0


@dataclass(frozen=True)
class StepOutcome:
    """One recorded outcome of a goal step on the evaluated day."""

    step_id: Any
    outcome: str


@dataclass(frozen=True)
class GoalProgress:
    """Progression state of a goal together with its steps."""

    status: str
    consecutive_all_correct: int
    mastery_achieved: bool
    mastery_date: Optional[date]
    steps: Tuple[StepSnapshot, ...] = ()
    streak_evaluated_on: Optional[date] = None
    streak_before_evaluation: int = 0

    @property
    def required_step_ids(self) -> frozenset:
        return frozenset(step.step_id for step in self.steps if step.is_required)

    @property
    def is_near_mastery(self) -> bool:
        return (
            self.status == STATUS_ACTIVE
            and self.consecutive_all_correct >= MASTERY_STREAK - 1
        )


def latest_outcomes(step_outcomes: Iterable[StepOutcome]) -> dict:
    """Map step id to its outcome; later records override earlier ones."""
    outcomes = {}
    for record in step_outcomes:
        if record is None:
            continue
        outcomes[record.step_id] = record.outcome
    return outcomes


def is_all_correct(goal: GoalProgress, step_outcomes: Iterable[StepOutcome]) -> bool:
    """
    True when every required step of ``goal`` has a correct outcome.

    Records for unknown or optional steps and unknown outcome values do
    not count toward the tally.
    """
    required = goal.required_step_ids
    if not required:
        return False

    outcomes = latest_outcomes(step_outcomes)
    correct_required = sum(
        1 for step_id in required
        if outcomes.get(step_id) == OUTCOME_CORRECT
    )
    return correct_required == len(required)


def evaluate_daily_outcome(
    goal: GoalProgress,
    step_outcomes_for_today: Iterable[StepOutcome],
    today: date,
) -> GoalProgress:
    """
    Re-derive a goal's progression from the full set of records for ``today``.

    Args:
        goal: Current progression snapshot
        step_outcomes_for_today: Every outcome recorded for the goal today
        today: The day being evaluated

    Returns:
        New GoalProgress; ``goal`` itself is left untouched
    """
    if goal.status == STATUS_ARCHIVED:
        return goal

    if goal.streak_evaluated_on == today:
        base_streak = goal.streak_before_evaluation
    else:
        base_streak = goal.consecutive_all_correct

    if is_all_correct(goal, step_outcomes_for_today):
        new_streak = base_streak + 1
    else:
        new_streak = 0

    status = goal.status
    mastery_date = goal.mastery_date
    mastery_now = new_streak >= MASTERY_STREAK

    if mastery_now and not goal.mastery_achieved:
        mastery_date = today
        if status == STATUS_ACTIVE:
            status = STATUS_MAINTENANCE

    return replace(
        goal,
        status=status,
        consecutive_all_correct=new_streak,
        mastery_achieved=goal.mastery_achieved or mastery_now,
        mastery_date=mastery_date,
        streak_evaluated_on=today,
        streak_before_evaluation=base_streak,
    )


def mastery_progress(streak: int) -> float:
    """Percent of the mastery streak reached, capped at 100."""
    return min(streak / MASTERY_STREAK, 1) * 100
