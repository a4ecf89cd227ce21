import pytest

from apps.goals.services import create_template, create_custom_goal


@pytest.fixture
def template(admin_user):
    """Active template with two required steps and one optional step."""
    return create_template(
        name='Phone Answering Protocol',
        goal_statement='Answers the shop phone independently.',
        created_by=admin_user,
        steps=[
            {'step_description': 'Picks up the phone', 'is_required': True},
            {'step_description': 'Says the greeting', 'is_required': True},
            {'step_description': 'Hands the phone to a manager', 'is_required': False},
        ],
    )


@pytest.fixture
def make_goal(manager_user):
    """Factory for custom goals; two required steps by default."""
    def _make_goal(employee, title='Greeting Customers', steps=None):
        return create_custom_goal(
            employee_id=employee.id,
            title=title,
            assigned_by=manager_user,
            steps=steps or [
                {'step_description': 'Makes eye contact', 'is_required': True},
                {'step_description': 'Says welcome', 'is_required': True},
            ],
        )
    return _make_goal


@pytest.fixture
def goal(make_goal, employee):
    return make_goal(employee)
