"""
Serializers for analytics app.

This module contains:
1. Input serializers - Query parameter validation
2. Response serializers - API documentation and output formatting
"""

from rest_framework import serializers


# =============================================================================
# Input Serializers (Query Parameter Validation)
# =============================================================================

class SuccessRateQuerySerializer(serializers.Serializer):
    """
    Validate query parameters for the success rate endpoint.

    Query Parameters:
        days (int): Trailing window length in days (1-365)
        today (date): End of the window, defaults to the local date
    """

    days = serializers.IntegerField(
        min_value=1,
        max_value=365,
        required=False,
        default=7,
        help_text='Trailing window length in days (1-365)'
    )
    today = serializers.DateField(required=False, help_text='End of the window (YYYY-MM-DD)')


# =============================================================================
# Response Serializers
# =============================================================================

class NearMasteryGoalSerializer(serializers.Serializer):
    goal_id = serializers.UUIDField()
    title = serializers.CharField()
    employee_id = serializers.UUIDField()
    employee_name = serializers.CharField()
    consecutive_all_correct = serializers.IntegerField()
    remaining = serializers.IntegerField()


class SuccessRateSerializer(serializers.Serializer):
    window_start = serializers.DateField()
    window_end = serializers.DateField()
    total = serializers.IntegerField()
    correct = serializers.IntegerField()
    success_rate = serializers.IntegerField(help_text='Rounded percentage')


class ActivitySerializer(serializers.Serializer):
    id = serializers.UUIDField()
    date = serializers.DateField()
    employee_name = serializers.CharField()
    goal_title = serializers.CharField()
    step_order = serializers.IntegerField()
    outcome = serializers.CharField()


class ShiftEmployeeSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    name = serializers.CharField()


class DashboardShiftSerializer(serializers.Serializer):
    id = serializers.UUIDField()
    date = serializers.DateField()
    started_at = serializers.DateTimeField()
    manager_name = serializers.CharField()
    employees = ShiftEmployeeSerializer(many=True)


class DashboardResponseSerializer(serializers.Serializer):
    active_employees = serializers.IntegerField()
    active_goals = serializers.IntegerField()
    mastered_goals = serializers.IntegerField()
    goals_near_mastery = serializers.IntegerField()
    success_rate = serializers.IntegerField()
    active_shift = DashboardShiftSerializer(allow_null=True)
    near_mastery = NearMasteryGoalSerializer(many=True)
    recent_activity = ActivitySerializer(many=True)


class RecentProgressSerializer(serializers.Serializer):
    date = serializers.DateField()
    step_order = serializers.IntegerField()
    outcome = serializers.CharField()
    notes = serializers.CharField(allow_blank=True)


class GoalProgressSerializer(serializers.Serializer):
    goal_id = serializers.UUIDField()
    title = serializers.CharField()
    status = serializers.CharField()
    required_step_count = serializers.IntegerField()
    consecutive_all_correct = serializers.IntegerField()
    mastery_achieved = serializers.BooleanField()
    mastery_date = serializers.DateField(allow_null=True)
    mastery_progress = serializers.FloatField()
    recent_progress = RecentProgressSerializer(many=True)


class EmployeeProgressResponseSerializer(serializers.Serializer):
    employee_id = serializers.UUIDField()
    employee_name = serializers.CharField()
    active_goal_count = serializers.IntegerField()
    mastered_goal_count = serializers.IntegerField()
    goals = GoalProgressSerializer(many=True)


class ErrorSerializer(serializers.Serializer):
    """Standard error response."""

    error = serializers.CharField()
