"""
User management service.

Admin-only operations on manager accounts. Accounts are never deleted,
only deactivated, so shift history keeps its author.
"""

import logging
from typing import Optional
from uuid import UUID

from django.db import transaction, IntegrityError
from django.contrib.auth import get_user_model

from apps.accounts.models import UserRole
from .exceptions import (
    UserNotFoundError,
    DuplicateEmailError,
    CannotDeactivateSelfError,
)

User = get_user_model()

logger = logging.getLogger(__name__)


def get_user_by_id(*, user_id: UUID) -> User:
    """
    Fetch a user by ID.

    Raises:
        UserNotFoundError: If user doesn't exist
    """
    try:
        return User.objects.get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User with ID {user_id} not found")


@transaction.atomic
def create_user(
    *,
    email: str,
    password: str,
    name: str = "",
    role: str = UserRole.SHIFT_MANAGER,
    created_by: Optional[User] = None
) -> User:
    """
    Create a manager account.

    Args:
        email: Login email (unique, case-insensitive)
        password: Initial password (will be hashed)
        name: Display name
        role: 'admin' or 'shift_manager'
        created_by: Admin performing the action (for the audit log)

    Returns:
        Created User instance

    Raises:
        DuplicateEmailError: If the email is already registered
    """
    if User.objects.filter(email__iexact=email).exists():
        raise DuplicateEmailError(f"An account with email {email} already exists")

    try:
        user = User.objects.create_user(
            email=email,
            password=password,
            name=name,
            role=role,
        )
    except IntegrityError:
        raise DuplicateEmailError(f"An account with email {email} already exists")

    logger.info(
        "User %s created with role %s by %s",
        user.email, user.role, created_by.email if created_by else 'system'
    )
    return user


@transaction.atomic
def update_user(
    *,
    user_id: UUID,
    updated_by: User,
    **changes
) -> User:
    """
    Update name, email, role or active flag of an account.

    An admin cannot deactivate or demote their own account; that would
    leave the shop without anyone able to manage users.

    Args:
        user_id: ID of the account to change
        updated_by: Admin performing the change
        **changes: Any of name, email, role, is_active

    Returns:
        Updated User instance

    Raises:
        UserNotFoundError: If user doesn't exist
        DuplicateEmailError: If the new email belongs to another account
        CannotDeactivateSelfError: If the admin targets their own access
    """
    try:
        user = User.objects.select_for_update().get(id=user_id)
    except User.DoesNotExist:
        raise UserNotFoundError(f"User with ID {user_id} not found")

    if user.pk == updated_by.pk:
        if changes.get('is_active') is False:
            raise CannotDeactivateSelfError("You cannot deactivate your own account")
        if 'role' in changes and changes['role'] != UserRole.ADMIN:
            raise CannotDeactivateSelfError("You cannot remove your own admin role")

    email = changes.get('email')
    if email and User.objects.filter(email__iexact=email).exclude(id=user.id).exists():
        raise DuplicateEmailError(f"An account with email {email} already exists")

    allowed_fields = ['name', 'email', 'role', 'is_active']
    update_fields = []
    for field in allowed_fields:
        if field in changes:
            setattr(user, field, changes[field])
            update_fields.append(field)

    if update_fields:
        user.save(update_fields=update_fields + ['updated_at'])
        logger.info("User %s updated by %s: %s", user.email, updated_by.email, ', '.join(update_fields))

    return user


def deactivate_user(*, user_id: UUID, deactivated_by: User) -> User:
    """Deactivate an account. Shortcut for update_user(is_active=False)."""
    return update_user(user_id=user_id, updated_by=deactivated_by, is_active=False)
