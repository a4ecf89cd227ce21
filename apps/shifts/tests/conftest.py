import pytest

from apps.goals.services import create_custom_goal
from apps.shifts.services import start_shift


@pytest.fixture
def goal(employee, manager_user):
    """Active goal with two required steps and one optional step."""
    return create_custom_goal(
        employee_id=employee.id,
        title='Greeting Customers',
        assigned_by=manager_user,
        steps=[
            {'step_description': 'Makes eye contact', 'is_required': True},
            {'step_description': 'Says welcome', 'is_required': True},
            {'step_description': 'Offers a sample', 'is_required': False},
        ],
    )


@pytest.fixture
def steps(goal):
    """The goal's steps in order."""
    return list(goal.steps.order_by('step_order'))


@pytest.fixture
def shift(manager_user, employee):
    """Active shift with ``employee`` on the roster."""
    return start_shift(manager=manager_user, employee_ids=[employee.id])
