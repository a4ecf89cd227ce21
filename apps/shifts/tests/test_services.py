"""
Tests for shift lifecycle, outcome recording and shift summaries.
"""

import uuid
from datetime import date

import pytest
from freezegun import freeze_time

from apps.employees.services import EmployeeNotFoundError, EmployeeInactiveError
from apps.goals.models import GoalStatus
from apps.goals.services import archive_goal, create_custom_goal, GoalNotFoundError
from apps.shifts.models import ShiftRoster, StepProgress, ShiftSummary
from apps.shifts.services import (
    get_active_shift,
    get_shift_by_id,
    start_shift,
    end_shift,
    record_step_outcome,
    get_shift_outcomes,
    save_shift_summary,
    get_shift_summaries,
    ShiftNotFoundError,
    EmptyRosterError,
    ShiftAlreadyActiveError,
    NoActiveShiftError,
    ShiftNotActiveError,
    EmployeeNotOnShiftError,
    StepNotInGoalError,
    GoalNotTrackableError,
)


def record_day(shift, goal, steps, outcomes, manager=None):
    """Record one outcome per step, in order."""
    result = None
    for step, outcome in zip(steps, outcomes):
        notes = 'Needed a reminder' if outcome == 'verbal_prompt' else ''
        _, result = record_step_outcome(
            shift_id=shift.id,
            goal_id=goal.id,
            step_id=step.id,
            outcome=outcome,
            notes=notes,
            recorded_by=manager,
        )
    return result


# =============================================================================
# Shift lifecycle
# =============================================================================

@pytest.mark.django_db
class TestStartShift:

    def test_start_shift(self, manager_user, employee, other_employee):
        shift = start_shift(manager=manager_user, employee_ids=[employee.id, other_employee.id])

        assert shift.is_active is True
        assert shift.manager == manager_user
        assert set(shift.employees.all()) == {employee, other_employee}
        assert get_active_shift() == shift

    def test_duplicate_ids_are_ignored(self, manager_user, employee):
        shift = start_shift(manager=manager_user, employee_ids=[employee.id, employee.id])

        assert shift.employees.count() == 1

    def test_empty_roster(self, manager_user):
        with pytest.raises(EmptyRosterError):
            start_shift(manager=manager_user, employee_ids=[])

        assert not ShiftRoster.objects.exists()

    def test_unknown_employee(self, manager_user, employee):
        with pytest.raises(EmployeeNotFoundError):
            start_shift(manager=manager_user, employee_ids=[employee.id, uuid.uuid4()])

    def test_inactive_employee(self, manager_user, inactive_employee):
        with pytest.raises(EmployeeInactiveError):
            start_shift(manager=manager_user, employee_ids=[inactive_employee.id])

    def test_only_one_active_shift(self, shift, admin_user, other_employee):
        with pytest.raises(ShiftAlreadyActiveError):
            start_shift(manager=admin_user, employee_ids=[other_employee.id])

        assert ShiftRoster.objects.filter(is_active=True).count() == 1

    @freeze_time('2025-01-06 18:00:00')
    def test_shift_date_is_local_day(self, manager_user, employee):
        shift = start_shift(manager=manager_user, employee_ids=[employee.id])

        assert shift.date == date(2025, 1, 6)


@pytest.mark.django_db
class TestEndShift:

    def test_end_active_shift(self, shift, manager_user):
        ended = end_shift(ended_by=manager_user)

        assert ended.id == shift.id
        assert ended.is_active is False
        assert ended.ended_at is not None
        assert get_active_shift() is None

    def test_end_by_id(self, shift):
        ended = end_shift(shift_id=shift.id)

        assert ended.is_active is False

    def test_nothing_to_end(self, db):
        with pytest.raises(NoActiveShiftError):
            end_shift()

    def test_end_twice(self, shift):
        end_shift(shift_id=shift.id)

        with pytest.raises(NoActiveShiftError):
            end_shift(shift_id=shift.id)

    def test_new_shift_after_end(self, shift, manager_user, employee):
        end_shift()

        second = start_shift(manager=manager_user, employee_ids=[employee.id])

        assert second.is_active is True
        assert ShiftRoster.objects.count() == 2

    def test_get_missing_shift(self, db):
        with pytest.raises(ShiftNotFoundError):
            get_shift_by_id(shift_id=uuid.uuid4())


# =============================================================================
# Outcome recording
# =============================================================================

@pytest.mark.django_db
class TestRecordStepOutcome:

    def test_record_creates_row_and_refreshes_goal(self, shift, goal, steps, manager_user):
        progress, refreshed = record_step_outcome(
            shift_id=shift.id,
            goal_id=goal.id,
            step_id=steps[0].id,
            outcome='correct',
            recorded_by=manager_user,
        )

        assert progress.outcome == 'correct'
        assert progress.employee == goal.employee
        assert progress.recorded_by == manager_user
        assert refreshed.consecutive_all_correct == 0

    def test_recording_again_overwrites(self, shift, goal, steps):
        record_step_outcome(
            shift_id=shift.id, goal_id=goal.id, step_id=steps[0].id,
            outcome='verbal_prompt', notes='Reminded to look up',
        )
        record_step_outcome(
            shift_id=shift.id, goal_id=goal.id, step_id=steps[0].id,
            outcome='correct',
        )

        records = StepProgress.objects.filter(goal=goal, step=steps[0])
        assert records.count() == 1
        assert records.get().outcome == 'correct'
        assert records.get().notes == ''

    def test_all_required_correct_counts_the_day(self, shift, goal, steps):
        refreshed = record_day(shift, goal, steps[:2], ['correct', 'correct'])

        assert refreshed.consecutive_all_correct == 1

    def test_optional_step_does_not_block(self, shift, goal, steps):
        refreshed = record_day(shift, goal, steps, ['correct', 'correct', 'verbal_prompt'])

        assert refreshed.consecutive_all_correct == 1

    def test_same_day_correction(self, shift, goal, steps):
        record_day(shift, goal, steps[:2], ['correct', 'correct'])

        refreshed = record_day(shift, goal, steps[1:2], ['verbal_prompt'])
        assert refreshed.consecutive_all_correct == 0

        refreshed = record_day(shift, goal, steps[1:2], ['correct'])
        assert refreshed.consecutive_all_correct == 1

    def test_repeat_writes_do_not_double_count(self, shift, goal, steps):
        for _ in range(3):
            refreshed = record_day(shift, goal, steps[:2], ['correct', 'correct'])

        assert refreshed.consecutive_all_correct == 1

    def test_shift_not_found(self, goal, steps):
        with pytest.raises(ShiftNotFoundError):
            record_step_outcome(
                shift_id=uuid.uuid4(), goal_id=goal.id, step_id=steps[0].id, outcome='correct',
            )

    def test_shift_ended(self, shift, goal, steps):
        end_shift()

        with pytest.raises(ShiftNotActiveError):
            record_step_outcome(
                shift_id=shift.id, goal_id=goal.id, step_id=steps[0].id, outcome='correct',
            )

    def test_ended_shift_counts_as_no_active_shift(self, shift, goal, steps):
        end_shift()

        with pytest.raises(NoActiveShiftError):
            record_step_outcome(
                shift_id=shift.id, goal_id=goal.id, step_id=steps[0].id, outcome='correct',
            )

    def test_goal_not_found(self, shift, steps):
        with pytest.raises(GoalNotFoundError):
            record_step_outcome(
                shift_id=shift.id, goal_id=uuid.uuid4(), step_id=steps[0].id, outcome='correct',
            )

    def test_archived_goal(self, shift, goal, steps):
        archive_goal(goal_id=goal.id)

        with pytest.raises(GoalNotTrackableError):
            record_step_outcome(
                shift_id=shift.id, goal_id=goal.id, step_id=steps[0].id, outcome='correct',
            )

        assert not StepProgress.objects.exists()

    def test_step_from_another_goal(self, shift, goal, employee):
        other_goal = create_custom_goal(
            employee_id=employee.id,
            title='Wiping Tables',
            steps=[{'step_description': 'Wipes', 'is_required': True}],
        )

        with pytest.raises(StepNotInGoalError):
            record_step_outcome(
                shift_id=shift.id,
                goal_id=other_goal.id,
                step_id=goal.steps.first().id,
                outcome='correct',
            )

    def test_employee_not_on_shift(self, manager_user, other_employee, goal, steps):
        shift = start_shift(manager=manager_user, employee_ids=[other_employee.id])

        with pytest.raises(EmployeeNotOnShiftError):
            record_step_outcome(
                shift_id=shift.id, goal_id=goal.id, step_id=steps[0].id, outcome='correct',
            )

    def test_maintenance_goal_still_records(self, shift, goal, steps):
        goal.status = GoalStatus.MAINTENANCE
        goal.mastery_achieved = True
        goal.save()

        refreshed = record_day(shift, goal, steps[:2], ['correct', 'verbal_prompt'])

        assert refreshed.status == GoalStatus.MAINTENANCE
        assert refreshed.mastery_achieved is True
        assert refreshed.consecutive_all_correct == 0

    def test_get_shift_outcomes(self, shift, goal, steps, other_employee):
        record_day(shift, goal, steps[:2], ['correct', 'na'])

        outcomes = get_shift_outcomes(shift_id=shift.id)
        assert [o.step.step_order for o in outcomes] == [1, 2]

        assert not get_shift_outcomes(shift_id=shift.id, employee_id=other_employee.id).exists()


# =============================================================================
# Progress across days
# =============================================================================

@pytest.mark.django_db
class TestProgressAcrossDays:
    """One shift per day, starting Monday 2025-01-06."""

    DAYS = [
        ('2025-01-06 18:00:00', ['correct', 'correct']),
        ('2025-01-07 18:00:00', ['correct', 'verbal_prompt']),
        ('2025-01-08 18:00:00', ['correct', 'correct']),
        ('2025-01-09 18:00:00', ['correct', 'correct']),
        ('2025-01-10 18:00:00', ['correct', 'correct']),
    ]

    def run_day(self, when, outcomes, manager, employee, goal, steps):
        with freeze_time(when):
            shift = start_shift(manager=manager, employee_ids=[employee.id])
            refreshed = record_day(shift, goal, steps[:2], outcomes, manager)
            end_shift(shift_id=shift.id)
        return refreshed

    def test_streak_and_mastery(self, manager_user, employee, goal, steps):
        streaks = []
        for when, outcomes in self.DAYS:
            refreshed = self.run_day(when, outcomes, manager_user, employee, goal, steps)
            streaks.append(refreshed.consecutive_all_correct)

        assert streaks == [1, 0, 1, 2, 3]
        goal.refresh_from_db()
        assert goal.mastery_achieved is True
        assert goal.mastery_date == date(2025, 1, 10)
        assert goal.status == GoalStatus.MAINTENANCE

    def test_mastery_survives_a_bad_day(self, manager_user, employee, goal, steps):
        for when, outcomes in self.DAYS:
            self.run_day(when, outcomes, manager_user, employee, goal, steps)

        refreshed = self.run_day(
            '2025-01-11 18:00:00', ['verbal_prompt', 'correct'],
            manager_user, employee, goal, steps,
        )

        assert refreshed.consecutive_all_correct == 0
        assert refreshed.mastery_achieved is True
        assert refreshed.mastery_date == date(2025, 1, 10)
        assert refreshed.status == GoalStatus.MAINTENANCE

    def test_day_without_records_keeps_streak(self, manager_user, employee, goal, steps):
        self.run_day('2025-01-06 18:00:00', ['correct', 'correct'], manager_user, employee, goal, steps)
        # No shift on the 7th
        refreshed = self.run_day(
            '2025-01-08 18:00:00', ['correct', 'correct'],
            manager_user, employee, goal, steps,
        )

        assert refreshed.consecutive_all_correct == 2

    def test_second_shift_same_day(self, manager_user, employee, goal, steps):
        self.run_day('2025-01-06 15:00:00', ['correct', 'correct'], manager_user, employee, goal, steps)

        refreshed = self.run_day(
            '2025-01-06 20:00:00', ['correct', 'correct'],
            manager_user, employee, goal, steps,
        )

        assert refreshed.consecutive_all_correct == 1
        assert StepProgress.objects.filter(goal=goal).count() == 4


# =============================================================================
# Shift summaries
# =============================================================================

@pytest.mark.django_db
class TestShiftSummaries:

    def test_save_summary(self, shift, employee, manager_user):
        summary = save_shift_summary(
            shift_id=shift.id,
            employee_id=employee.id,
            summary='Great energy at the register.',
            author=manager_user,
        )

        assert summary.author == manager_user
        assert list(get_shift_summaries(shift_id=shift.id)) == [summary]

    def test_second_save_replaces(self, shift, employee):
        save_shift_summary(shift_id=shift.id, employee_id=employee.id, summary='First draft')
        save_shift_summary(shift_id=shift.id, employee_id=employee.id, summary='Final')

        assert ShiftSummary.objects.count() == 1
        assert ShiftSummary.objects.get().summary == 'Final'

    def test_after_shift_ended(self, shift, employee):
        end_shift()

        summary = save_shift_summary(shift_id=shift.id, employee_id=employee.id, summary='Late note')

        assert summary.shift == shift

    def test_employee_not_on_shift(self, shift, other_employee):
        with pytest.raises(EmployeeNotOnShiftError):
            save_shift_summary(shift_id=shift.id, employee_id=other_employee.id, summary='Nope')

    def test_missing_shift(self, employee):
        with pytest.raises(ShiftNotFoundError):
            save_shift_summary(shift_id=uuid.uuid4(), employee_id=employee.id, summary='Nope')
