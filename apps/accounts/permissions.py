"""
Role-based permission classes.

Two roles exist: administrators manage accounts and the goal template
catalog; shift managers (and administrators) run shifts, record outcomes
and maintain employee records.

Usage:
    from apps.accounts.permissions import IsAdminRole

    class GoalTemplateViewSet(viewsets.ModelViewSet):
        def get_permissions(self):
            if self.action in ['create', 'update', 'partial_update', 'archive']:
                return [IsAuthenticated(), IsAdminRole()]
            return [IsAuthenticated(), IsShiftStaff()]
"""

from rest_framework.permissions import BasePermission

from .models import UserRole


class IsAdminRole(BasePermission):
    """
    Permission: User must have the admin role.
    """

    message = 'Only administrators can perform this action.'

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user and user.is_authenticated and user.is_active
            and getattr(user, 'role', None) == UserRole.ADMIN
        )


class IsShiftStaff(BasePermission):
    """
    Permission: User must be an active admin or shift manager.
    """

    message = 'You must be a shift manager or administrator.'

    def has_permission(self, request, view):
        user = request.user
        return bool(
            user and user.is_authenticated and user.is_active
            and getattr(user, 'role', None) in (UserRole.ADMIN, UserRole.SHIFT_MANAGER)
        )
