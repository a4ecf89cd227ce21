"""Shared fixtures for all apps."""

import pytest
from rest_framework.test import APIClient
from rest_framework_simplejwt.tokens import RefreshToken

from apps.accounts.models import User, UserRole
from apps.employees.models import Employee


def authenticate(client, user):
    """Attach a JWT bearer token for ``user`` to ``client``."""
    refresh = RefreshToken.for_user(user)
    client.credentials(HTTP_AUTHORIZATION=f'Bearer {refresh.access_token}')
    return client


@pytest.fixture
def api_client():
    """Return an unauthenticated API client."""
    return APIClient()


@pytest.fixture
def admin_user(db):
    """Create and return an administrator."""
    return User.objects.create_user(
        email='admin@example.com',
        password='AdminPass123!',
        name='Ada Admin',
        role=UserRole.ADMIN,
    )


@pytest.fixture
def manager_user(db):
    """Create and return a shift manager."""
    return User.objects.create_user(
        email='manager@example.com',
        password='ManagerPass123!',
        name='Morgan Manager',
        role=UserRole.SHIFT_MANAGER,
    )


@pytest.fixture
def admin_client(admin_user):
    """API client authenticated as the administrator."""
    return authenticate(APIClient(), admin_user)


@pytest.fixture
def manager_client(manager_user):
    """API client authenticated as the shift manager."""
    return authenticate(APIClient(), manager_user)


@pytest.fixture
def employee(db):
    """Create and return an active employee."""
    return Employee.objects.create(
        name='Sam Scooper',
        allergies=['peanuts'],
        interests_motivators=['music'],
    )


@pytest.fixture
def other_employee(db):
    """Create and return a second active employee."""
    return Employee.objects.create(name='Riley Register', role='Cashier')


@pytest.fixture
def inactive_employee(db):
    """Create and return a deactivated employee."""
    return Employee.objects.create(name='Former Worker', is_active=False)
