import pytest
from datetime import date

from apps.goals.models import DevelopmentGoal
from apps.goals.services import create_custom_goal
from apps.shifts.models import ShiftRoster, StepProgress


TODAY = date(2025, 1, 10)


@pytest.fixture
def analytics_goal(employee, manager_user):
    """Active goal for ``employee`` with two required steps."""
    return create_custom_goal(
        employee_id=employee.id,
        title='Greeting Customers',
        assigned_by=manager_user,
        start_date=date(2025, 1, 1),
        steps=[
            {'step_description': 'Makes eye contact', 'is_required': True},
            {'step_description': 'Says welcome', 'is_required': True},
        ],
    )


@pytest.fixture
def near_mastery_goal(other_employee, manager_user):
    """Active goal one fully correct day away from mastery."""
    goal = create_custom_goal(
        employee_id=other_employee.id,
        title='Counting Change',
        assigned_by=manager_user,
        steps=[{'step_description': 'Counts back change', 'is_required': True}],
    )
    DevelopmentGoal.objects.filter(id=goal.id).update(consecutive_all_correct=2)
    goal.refresh_from_db()
    return goal


@pytest.fixture
def past_shift(manager_user, employee):
    """Ended shift used as the home of recorded outcomes."""
    shift = ShiftRoster.objects.create(manager=manager_user, date=TODAY, is_active=False)
    shift.employees.add(employee)
    return shift


@pytest.fixture
def record_outcome(past_shift, manager_user):
    """Store an outcome row directly, bypassing the progression refresh."""
    def _record(goal, step_order, outcome, day=TODAY, notes=''):
        step = goal.steps.get(step_order=step_order)
        return StepProgress.objects.create(
            goal=goal,
            step=step,
            employee=goal.employee,
            shift=past_shift,
            date=day,
            outcome=outcome,
            notes=notes,
            recorded_by=manager_user,
        )
    return _record
