import pytest
from django.urls import reverse
from rest_framework import status


@pytest.mark.django_db
class TestRolePermissions:
    """Shift managers run shifts; only administrators manage accounts and templates."""

    def test_manager_cannot_list_users(self, manager_client):
        response = manager_client.get(reverse('accounts:user-list'))
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_manager_cannot_create_users(self, manager_client):
        data = {'email': 'sneaky@example.com', 'password': 'SneakyPass123!'}
        response = manager_client.post(reverse('accounts:user-list'), data)
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_manager_cannot_create_templates(self, manager_client):
        data = {
            'name': 'Sneaky',
            'goal_statement': 'Nope',
            'steps': [{'step_description': 'Step'}],
        }
        response = manager_client.post(reverse('goals:template-list'), data, format='json')
        assert response.status_code == status.HTTP_403_FORBIDDEN

    def test_manager_can_browse_templates(self, manager_client):
        response = manager_client.get(reverse('goals:template-list'))
        assert response.status_code == status.HTTP_200_OK

    def test_admin_can_create_templates(self, admin_client):
        data = {
            'name': 'Opening Checklist',
            'goal_statement': 'Opens the shop independently.',
            'steps': [{'step_description': 'Unlocks the door'}],
        }
        response = admin_client.post(reverse('goals:template-list'), data, format='json')
        assert response.status_code == status.HTTP_201_CREATED

    def test_anonymous_is_rejected(self, api_client):
        response = api_client.get(reverse('shifts:active'))
        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    def test_admin_can_run_shifts(self, admin_client):
        response = admin_client.get(reverse('shifts:active'))
        assert response.status_code == status.HTTP_200_OK
