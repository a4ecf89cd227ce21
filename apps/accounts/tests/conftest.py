import pytest
from apps.accounts.models import User, UserRole


@pytest.fixture
def inactive_manager(db):
    """Create and return a deactivated shift manager."""
    return User.objects.create_user(
        email='inactive@example.com',
        password='InactivePass123!',
        name='Inactive Manager',
        role=UserRole.SHIFT_MANAGER,
        is_active=False,
    )
