"""Tests for the mastery progression rules. No database needed."""

from datetime import date, timedelta

import pytest

from apps.goals.progression import (
    MASTERY_STREAK,
    GoalProgress,
    StepOutcome,
    StepSnapshot,
    evaluate_daily_outcome,
    is_all_correct,
    mastery_progress,
)

DAY_1 = date(2025, 1, 6)


def day(n):
    """Calendar day ``n`` of the scenario, starting at 1."""
    return DAY_1 + timedelta(days=n - 1)


def make_goal(required=2, optional=0, **overrides):
    steps = tuple(
        StepSnapshot(step_id=f'req-{i}', is_required=True, step_order=i)
        for i in range(1, required + 1)
    ) + tuple(
        StepSnapshot(step_id=f'opt-{i}', is_required=False, step_order=required + i)
        for i in range(1, optional + 1)
    )
    fields = dict(
        status='active',
        consecutive_all_correct=0,
        mastery_achieved=False,
        mastery_date=None,
        steps=steps,
    )
    fields.update(overrides)
    return GoalProgress(**fields)


def outcomes(*pairs):
    return [StepOutcome(step_id=step_id, outcome=outcome) for step_id, outcome in pairs]


ALL_CORRECT = outcomes(('req-1', 'correct'), ('req-2', 'correct'))
ONE_PROMPTED = outcomes(('req-1', 'correct'), ('req-2', 'verbal_prompt'))


# =============================================================================
# Full-day scenario
# =============================================================================

class TestFiveDayScenario:
    """Two required steps, starting from no streak."""

    def test_scenario(self):
        goal = make_goal()

        goal = evaluate_daily_outcome(goal, ALL_CORRECT, day(1))
        assert goal.consecutive_all_correct == 1
        assert goal.status == 'active'

        goal = evaluate_daily_outcome(goal, ONE_PROMPTED, day(2))
        assert goal.consecutive_all_correct == 0

        goal = evaluate_daily_outcome(goal, ALL_CORRECT, day(3))
        assert goal.consecutive_all_correct == 1

        goal = evaluate_daily_outcome(goal, ALL_CORRECT, day(4))
        assert goal.consecutive_all_correct == 2
        assert goal.is_near_mastery
        assert goal.mastery_achieved is False

        goal = evaluate_daily_outcome(goal, ALL_CORRECT, day(5))
        assert goal.consecutive_all_correct == 3
        assert goal.mastery_achieved is True
        assert goal.status == 'maintenance'
        assert goal.mastery_date == day(5)
        assert not goal.is_near_mastery


# =============================================================================
# Streak rules
# =============================================================================

class TestStreak:

    def test_reset_is_to_zero_not_decrement(self):
        goal = make_goal(consecutive_all_correct=2)

        result = evaluate_daily_outcome(goal, ONE_PROMPTED, day(1))

        assert result.consecutive_all_correct == 0

    def test_missing_required_step_resets(self):
        goal = make_goal(consecutive_all_correct=1)

        result = evaluate_daily_outcome(goal, outcomes(('req-1', 'correct')), day(1))

        assert result.consecutive_all_correct == 0

    def test_na_is_not_correct(self):
        goal = make_goal(consecutive_all_correct=1)

        result = evaluate_daily_outcome(goal, outcomes(('req-1', 'correct'), ('req-2', 'na')), day(1))

        assert result.consecutive_all_correct == 0

    def test_optional_steps_do_not_matter(self):
        goal = make_goal(optional=1)
        records = ALL_CORRECT + outcomes(('opt-1', 'verbal_prompt'))

        result = evaluate_daily_outcome(goal, records, day(1))

        assert result.consecutive_all_correct == 1

    def test_two_is_not_mastery(self):
        goal = make_goal(consecutive_all_correct=1)

        result = evaluate_daily_outcome(goal, ALL_CORRECT, day(1))

        assert result.consecutive_all_correct == MASTERY_STREAK - 1
        assert result.mastery_achieved is False
        assert result.status == 'active'

    def test_input_snapshot_is_untouched(self):
        goal = make_goal()

        evaluate_daily_outcome(goal, ALL_CORRECT, day(1))

        assert goal.consecutive_all_correct == 0
        assert goal.streak_evaluated_on is None


# =============================================================================
# Malformed input fails open
# =============================================================================

class TestFailOpen:

    def test_unknown_step_is_ignored(self):
        goal = make_goal(required=1)
        records = outcomes(('req-1', 'correct'), ('someone-else', 'verbal_prompt'))

        result = evaluate_daily_outcome(goal, records, day(1))

        assert result.consecutive_all_correct == 1

    def test_unknown_outcome_counts_as_not_correct(self):
        goal = make_goal(consecutive_all_correct=2)
        records = outcomes(('req-1', 'correct'), ('req-2', 'CORRECT!'))

        result = evaluate_daily_outcome(goal, records, day(1))

        assert result.consecutive_all_correct == 0

    def test_none_records_are_skipped(self):
        goal = make_goal()

        assert is_all_correct(goal, ALL_CORRECT + [None]) is True

    def test_no_records_resets(self):
        goal = make_goal(consecutive_all_correct=2)

        result = evaluate_daily_outcome(goal, [], day(1))

        assert result.consecutive_all_correct == 0


# =============================================================================
# Zero required steps
# =============================================================================

class TestZeroRequiredSteps:
    """A goal without required steps can never be mastered."""

    def test_never_fully_correct(self):
        goal = make_goal(required=0, optional=2)
        records = outcomes(('opt-1', 'correct'), ('opt-2', 'correct'))

        assert is_all_correct(goal, records) is False

    def test_streak_stays_zero(self):
        goal = make_goal(required=0, optional=1)
        records = outcomes(('opt-1', 'correct'))

        for n in range(1, 6):
            goal = evaluate_daily_outcome(goal, records, day(n))

        assert goal.consecutive_all_correct == 0
        assert goal.mastery_achieved is False
        assert goal.status == 'active'

    def test_no_steps_at_all(self):
        goal = make_goal(required=0)

        result = evaluate_daily_outcome(goal, [], day(1))

        assert result.consecutive_all_correct == 0


# =============================================================================
# Same-day re-evaluation
# =============================================================================

class TestSameDayReevaluation:

    def test_repeated_evaluation_does_not_double_count(self):
        goal = make_goal(consecutive_all_correct=1)

        once = evaluate_daily_outcome(goal, ALL_CORRECT, day(1))
        twice = evaluate_daily_outcome(once, ALL_CORRECT, day(1))

        assert once.consecutive_all_correct == 2
        assert twice == once

    def test_each_write_rederives_from_the_whole_day(self):
        goal = make_goal(consecutive_all_correct=1)

        # First step recorded: day not complete yet
        goal = evaluate_daily_outcome(goal, outcomes(('req-1', 'correct')), day(1))
        assert goal.consecutive_all_correct == 0

        # Second step recorded: the day now counts on top of yesterday's streak
        goal = evaluate_daily_outcome(goal, ALL_CORRECT, day(1))
        assert goal.consecutive_all_correct == 2

    def test_correction_undoes_the_days_increment(self):
        goal = make_goal(consecutive_all_correct=1)

        goal = evaluate_daily_outcome(goal, ALL_CORRECT, day(1))
        assert goal.consecutive_all_correct == 2

        goal = evaluate_daily_outcome(goal, ONE_PROMPTED, day(1))
        assert goal.consecutive_all_correct == 0

        goal = evaluate_daily_outcome(goal, ALL_CORRECT, day(1))
        assert goal.consecutive_all_correct == 2

    def test_next_day_builds_on_final_result(self):
        goal = make_goal()

        goal = evaluate_daily_outcome(goal, ALL_CORRECT, day(1))
        goal = evaluate_daily_outcome(goal, ALL_CORRECT, day(1))
        goal = evaluate_daily_outcome(goal, ALL_CORRECT, day(2))

        assert goal.consecutive_all_correct == 2

    def test_last_record_for_a_step_wins(self):
        goal = make_goal()
        records = outcomes(
            ('req-1', 'verbal_prompt'),
            ('req-2', 'correct'),
            ('req-1', 'correct'),
        )

        result = evaluate_daily_outcome(goal, records, day(1))

        assert result.consecutive_all_correct == 1


# =============================================================================
# Mastery and status transitions
# =============================================================================

class TestMastery:

    def test_mastery_is_never_revoked(self):
        goal = make_goal(consecutive_all_correct=2)
        goal = evaluate_daily_outcome(goal, ALL_CORRECT, day(1))
        assert goal.mastery_achieved is True

        goal = evaluate_daily_outcome(goal, ONE_PROMPTED, day(2))

        assert goal.consecutive_all_correct == 0
        assert goal.mastery_achieved is True
        assert goal.mastery_date == day(1)

    def test_maintenance_never_returns_to_active(self):
        goal = make_goal(consecutive_all_correct=2)
        goal = evaluate_daily_outcome(goal, ALL_CORRECT, day(1))

        for n in range(2, 6):
            goal = evaluate_daily_outcome(goal, ONE_PROMPTED, day(n))
            assert goal.status == 'maintenance'

    def test_mastery_date_is_set_once(self):
        goal = make_goal(consecutive_all_correct=2)
        goal = evaluate_daily_outcome(goal, ALL_CORRECT, day(1))
        goal = evaluate_daily_outcome(goal, ALL_CORRECT, day(2))
        goal = evaluate_daily_outcome(goal, ALL_CORRECT, day(3))

        assert goal.consecutive_all_correct == 5
        assert goal.mastery_date == day(1)

    def test_same_day_correction_keeps_mastery(self):
        goal = make_goal(consecutive_all_correct=2)
        goal = evaluate_daily_outcome(goal, ALL_CORRECT, day(1))

        goal = evaluate_daily_outcome(goal, ONE_PROMPTED, day(1))

        assert goal.consecutive_all_correct == 0
        assert goal.mastery_achieved is True
        assert goal.status == 'maintenance'

    def test_archived_goal_is_unchanged(self):
        goal = make_goal(status='archived', consecutive_all_correct=2)

        result = evaluate_daily_outcome(goal, ALL_CORRECT, day(1))

        assert result is goal

    @pytest.mark.parametrize('streak, expected', [
        (0, 0),
        (1, 100 / 3),
        (3, 100),
        (7, 100),
    ])
    def test_mastery_progress(self, streak, expected):
        assert mastery_progress(streak) == pytest.approx(expected)
