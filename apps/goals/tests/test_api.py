"""
Tests for the goal template and development goal endpoints.
"""

import uuid

import pytest
from django.urls import reverse
from rest_framework import status

from apps.goals.models import DEFAULT_MASTERY_CRITERIA, DevelopmentGoal, GoalStatus, GoalTemplate


# =============================================================================
# Templates
# =============================================================================

@pytest.mark.django_db
class TestTemplateEndpoints:

    def test_list_templates(self, manager_client, template):
        response = manager_client.get(reverse('goals:template-list'))

        assert response.status_code == status.HTTP_200_OK
        assert [t['name'] for t in response.data] == ['Phone Answering Protocol']

    def test_filter_by_status(self, admin_client, template):
        admin_client.post(reverse('goals:template-archive', args=[template.id]))

        response = admin_client.get(reverse('goals:template-list'), {'status': 'active'})

        assert response.data == []

    def test_retrieve_template_with_steps(self, manager_client, template):
        response = manager_client.get(reverse('goals:template-detail', args=[template.id]))

        assert response.status_code == status.HTTP_200_OK
        assert [s['step_order'] for s in response.data['steps']] == [1, 2, 3]

    def test_admin_creates_template(self, admin_client):
        response = admin_client.post(
            reverse('goals:template-list'),
            {
                'name': 'Cone Assembly',
                'goal_statement': 'Builds a single scoop cone.',
                'steps': [
                    {'step_description': 'Picks a cone'},
                    {'step_description': 'Scoops ice cream', 'is_required': True},
                ],
            },
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['status'] == 'active'
        assert response.data['default_mastery_criteria'] == DEFAULT_MASTERY_CRITERIA
        assert len(response.data['steps']) == 2

    def test_manager_cannot_create_template(self, manager_client):
        response = manager_client.post(
            reverse('goals:template-list'),
            {
                'name': 'Cone Assembly',
                'goal_statement': 'Builds a cone.',
                'steps': [{'step_description': 'Picks a cone'}],
            },
            format='json'
        )

        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_template_needs_required_step(self, admin_client):
        response = admin_client.post(
            reverse('goals:template-list'),
            {
                'name': 'Optional',
                'goal_statement': 'Nothing required.',
                'steps': [{'step_description': 'Maybe', 'is_required': False}],
            },
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'steps' in response.data

    def test_update_template(self, admin_client, template):
        response = admin_client.patch(
            reverse('goals:template-detail', args=[template.id]),
            {'name': 'Phone Basics'},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['name'] == 'Phone Basics'
        assert len(response.data['steps']) == 3

    def test_update_missing_template(self, admin_client):
        response = admin_client.patch(
            reverse('goals:template-detail', args=[uuid.uuid4()]),
            {'name': 'Ghost'},
            format='json'
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_archive_template(self, admin_client, template):
        response = admin_client.post(reverse('goals:template-archive', args=[template.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'archived'


# =============================================================================
# Goals
# =============================================================================

@pytest.mark.django_db
class TestGoalEndpoints:

    def test_list_goals_for_employee(self, manager_client, make_goal, employee, other_employee):
        make_goal(employee)
        make_goal(other_employee)

        response = manager_client.get(reverse('goals:goal-list'), {'employee': str(employee.id)})

        assert response.status_code == status.HTTP_200_OK
        assert len(response.data) == 1
        assert response.data[0]['employee_name'] == 'Sam Scooper'

    def test_list_goals_malformed_employee_filter(self, manager_client, goal):
        response = manager_client.get(reverse('goals:goal-list'), {'employee': 'not-a-uuid'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'employee' in response.data

    def test_list_goals_unknown_status_filter(self, manager_client, goal):
        response = manager_client.get(reverse('goals:goal-list'), {'status': 'paused'})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'status' in response.data

    def test_retrieve_goal(self, manager_client, goal):
        response = manager_client.get(reverse('goals:goal-detail', args=[goal.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['required_step_count'] == 2
        assert response.data['mastery_streak'] == 3
        assert response.data['mastery_progress'] == 0
        assert response.data['is_near_mastery'] is False

    def test_create_custom_goal(self, manager_client, employee):
        response = manager_client.post(
            reverse('goals:goal-list'),
            {
                'employee': str(employee.id),
                'title': 'Restocking Napkins',
                'steps': [
                    {'step_description': 'Checks the dispenser'},
                    {'step_description': 'Refills it', 'is_required': False},
                ],
            },
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['status'] == 'active'
        assert response.data['required_step_count'] == 1
        assert response.data['consecutive_all_correct'] == 0

    def test_target_date_before_start(self, manager_client, employee):
        response = manager_client.post(
            reverse('goals:goal-list'),
            {
                'employee': str(employee.id),
                'title': 'Backwards',
                'start_date': '2025-03-01',
                'target_end_date': '2025-02-01',
                'steps': [{'step_description': 'Step'}],
            },
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'target_end_date' in response.data

    def test_assign_from_template(self, manager_client, template, employee):
        response = manager_client.post(
            reverse('goals:goal-from-template'),
            {'template': str(template.id), 'employee': str(employee.id)},
            format='json'
        )

        assert response.status_code == status.HTTP_201_CREATED
        assert response.data['title'] == 'Phone Answering Protocol'
        assert len(response.data['steps']) == 3

    def test_assign_from_missing_template(self, manager_client, employee):
        response = manager_client.post(
            reverse('goals:goal-from-template'),
            {'template': str(uuid.uuid4()), 'employee': str(employee.id)},
            format='json'
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_active_goal_limit(self, manager_client, make_goal, template, employee):
        make_goal(employee, title='First')
        make_goal(employee, title='Second')

        response = manager_client.post(
            reverse('goals:goal-from-template'),
            {'template': str(template.id), 'employee': str(employee.id)},
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert 'error' in response.data

    def test_inactive_employee(self, manager_client, template, inactive_employee):
        response = manager_client.post(
            reverse('goals:goal-from-template'),
            {'template': str(template.id), 'employee': str(inactive_employee.id)},
            format='json'
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_goal(self, manager_client, goal):
        response = manager_client.patch(
            reverse('goals:goal-detail', args=[goal.id]),
            {'title': 'Greeting Everyone', 'target_end_date': '2030-01-01'},
            format='json'
        )

        assert response.status_code == status.HTTP_200_OK
        assert response.data['title'] == 'Greeting Everyone'
        assert response.data['target_end_date'] == '2030-01-01'

    def test_archive_goal(self, manager_client, goal):
        response = manager_client.post(reverse('goals:goal-archive', args=[goal.id]))

        assert response.status_code == status.HTTP_200_OK
        assert response.data['status'] == 'archived'

        again = manager_client.post(reverse('goals:goal-archive', args=[goal.id]))
        assert again.status_code == status.HTTP_400_BAD_REQUEST

    def test_goal_cannot_be_deleted(self, manager_client, goal):
        response = manager_client.delete(reverse('goals:goal-detail', args=[goal.id]))

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert DevelopmentGoal.objects.filter(id=goal.id).exists()

    def test_near_mastery_flag(self, manager_client, goal):
        DevelopmentGoal.objects.filter(id=goal.id).update(consecutive_all_correct=2)

        response = manager_client.get(reverse('goals:goal-detail', args=[goal.id]))

        assert response.data['is_near_mastery'] is True
        assert response.data['mastery_progress'] == pytest.approx(200 / 3)

    def test_requires_authentication(self, api_client):
        response = api_client.get(reverse('goals:goal-list'))

        assert response.status_code == status.HTTP_401_UNAUTHORIZED


@pytest.mark.django_db
def test_templates_are_not_deleted_with_goals(admin_client, template, employee):
    admin_client.post(
        reverse('goals:goal-from-template'),
        {'template': str(template.id), 'employee': str(employee.id)},
        format='json'
    )

    response = admin_client.delete(reverse('goals:template-detail', args=[template.id]))

    assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
    assert GoalTemplate.objects.filter(id=template.id).exists()
    assert DevelopmentGoal.objects.filter(status=GoalStatus.ACTIVE).count() == 1
