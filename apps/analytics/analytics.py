"""
Analytics Module
=================

Read-only dashboard queries over goals, step outcomes and shifts.

Classes:
    AnalyticsQueries: Static methods for the dashboard aggregates.

Key Features:
    - Goals near mastery (active goals one fully correct day away)
    - Success rate of recorded outcomes over a trailing window
    - Headline counts for the dashboard
    - Per-employee goal progress with recent outcomes

Example:
    Getting the weekly success rate::

        from apps.analytics.analytics import AnalyticsQueries

        stats = AnalyticsQueries.success_rate(days=7)
        print(f"{stats['success_rate']}% correct")

Note:
    This module doesn't modify any data. All methods are static and
    return plain dictionaries or lists ready for JSON serialization.
"""

from datetime import timedelta

from django.db.models import Count, Q, Prefetch
from django.utils import timezone

from apps.employees.models import Employee
from apps.goals.models import DevelopmentGoal, GoalStatus, GoalStep
from apps.goals.progression import MASTERY_STREAK, mastery_progress
from apps.shifts.models import ShiftRoster, StepProgress, StepOutcome

from .exceptions import EmployeeNotFoundError, InvalidWindowError

RECENT_PROGRESS_LIMIT = 5
RECENT_ACTIVITY_LIMIT = 10


class AnalyticsQueries:
    """
    Aggregate queries for the dashboard endpoints.

    Methods:
        goals_near_mastery: Active goals with a streak of at least 2.
        success_rate: Share of correct outcomes in a trailing window.
        dashboard_summary: Headline counts and the current shift.
        employee_goal_progress: Progress of every goal of one employee.
        recent_activity: Latest recorded outcomes across the shop.
    """

    @staticmethod
    def goals_near_mastery():
        """
        List active goals one or more fully correct days short of mastery.

        Returns:
            list[dict]: One entry per goal with:
                - goal_id, title
                - employee_id, employee_name
                - consecutive_all_correct (int)
                - remaining (int): Fully correct days still needed
        """
        goals = (
            DevelopmentGoal.objects
            .filter(
                status=GoalStatus.ACTIVE,
                consecutive_all_correct__gte=MASTERY_STREAK - 1,
            )
            .select_related('employee')
            .order_by('-consecutive_all_correct', 'employee__name', 'title')
        )

        return [
            {
                'goal_id': goal.id,
                'title': goal.title,
                'employee_id': goal.employee_id,
                'employee_name': goal.employee.name,
                'consecutive_all_correct': goal.consecutive_all_correct,
                'remaining': max(MASTERY_STREAK - goal.consecutive_all_correct, 0),
            }
            for goal in goals
        ]

    @staticmethod
    def success_rate(days=7, today=None):
        """
        Share of correct outcomes among all outcomes in a trailing window.

        The window covers the last ``days`` calendar days ending ``today``
        (``today - (days - 1)`` through ``today``), across all employees
        and goals.

        Args:
            days (int, optional): Window length in days. Defaults to 7.
            today (date, optional): End of the window. Defaults to the
                local date.

        Returns:
            dict: Dictionary containing:
                - window_start, window_end (date)
                - total (int): Outcomes recorded in the window
                - correct (int): Outcomes that were correct
                - success_rate (int): Rounded percentage, 0 when no outcomes

        Raises:
            InvalidWindowError: If ``days`` is less than one.
        """
        if days < 1:
            raise InvalidWindowError("Window must cover at least one day")

        today = today or timezone.localdate()
        window_start = today - timedelta(days=days - 1)

        counts = StepProgress.objects.filter(
            date__gte=window_start,
            date__lte=today,
        ).aggregate(
            total=Count('id'),
            correct=Count('id', filter=Q(outcome=StepOutcome.CORRECT)),
        )

        total = counts['total'] or 0
        correct = counts['correct'] or 0

        return {
            'window_start': window_start,
            'window_end': today,
            'total': total,
            'correct': correct,
            'success_rate': round(correct / total * 100) if total else 0,
        }

    @staticmethod
    def recent_activity(limit=RECENT_ACTIVITY_LIMIT):
        """Latest recorded outcomes, newest first."""
        records = (
            StepProgress.objects
            .select_related('employee', 'goal', 'step')
            .order_by('-date', '-updated_at')[:limit]
        )
        return [
            {
                'id': record.id,
                'date': record.date,
                'employee_name': record.employee.name,
                'goal_title': record.goal.title,
                'step_order': record.step.step_order,
                'outcome': record.outcome,
            }
            for record in records
        ]

    @staticmethod
    def dashboard_summary(today=None):
        """
        Headline numbers for the dashboard.

        Returns:
            dict: Dictionary containing:
                - active_employees (int)
                - active_goals (int)
                - mastered_goals (int): Goals that ever reached mastery
                - goals_near_mastery (int)
                - success_rate (int): Last 7 days, rounded percentage
                - active_shift (dict | None): Current shift with roster
                - near_mastery (list): See goals_near_mastery
                - recent_activity (list): See recent_activity
        """
        goal_counts = DevelopmentGoal.objects.aggregate(
            active=Count('id', filter=Q(status=GoalStatus.ACTIVE)),
            mastered=Count('id', filter=Q(mastery_achieved=True)),
        )
        near_mastery = AnalyticsQueries.goals_near_mastery()

        shift = (
            ShiftRoster.objects
            .filter(is_active=True)
            .select_related('manager')
            .prefetch_related('employees')
            .first()
        )
        active_shift = None
        if shift is not None:
            active_shift = {
                'id': shift.id,
                'date': shift.date,
                'started_at': shift.started_at,
                'manager_name': shift.manager.get_display_name(),
                'employees': [
                    {'id': employee.id, 'name': employee.name}
                    for employee in shift.employees.all()
                ],
            }

        return {
            'active_employees': Employee.objects.filter(is_active=True).count(),
            'active_goals': goal_counts['active'],
            'mastered_goals': goal_counts['mastered'],
            'goals_near_mastery': len(near_mastery),
            'success_rate': AnalyticsQueries.success_rate(days=7, today=today)['success_rate'],
            'active_shift': active_shift,
            'near_mastery': near_mastery,
            'recent_activity': AnalyticsQueries.recent_activity(),
        }

    @staticmethod
    def employee_goal_progress(employee_id):
        """
        Progress of every goal of one employee.

        Args:
            employee_id (UUID): The employee.

        Returns:
            dict: Dictionary containing:
                - employee_id, employee_name
                - active_goal_count, mastered_goal_count (int)
                - goals (list[dict]): Per goal, newest first:
                    - goal_id, title, status
                    - required_step_count (int)
                    - consecutive_all_correct (int)
                    - mastery_achieved (bool), mastery_date (date | None)
                    - mastery_progress (float): Percent of the mastery
                      streak reached, capped at 100
                    - recent_progress (list): Last 5 recorded outcomes

        Raises:
            EmployeeNotFoundError: If the employee doesn't exist.
        """
        try:
            employee = Employee.objects.get(id=employee_id)
        except Employee.DoesNotExist:
            raise EmployeeNotFoundError(f"Employee with ID {employee_id} not found")

        goals = (
            DevelopmentGoal.objects
            .filter(employee=employee)
            .prefetch_related(
                Prefetch('steps', queryset=GoalStep.objects.order_by('step_order'))
            )
            .order_by('-created_at')
        )

        goals_data = []
        for goal in goals:
            recent = (
                StepProgress.objects
                .filter(goal=goal)
                .select_related('step')
                .order_by('-date', '-updated_at')[:RECENT_PROGRESS_LIMIT]
            )
            goals_data.append({
                'goal_id': goal.id,
                'title': goal.title,
                'status': goal.status,
                'required_step_count': sum(1 for step in goal.steps.all() if step.is_required),
                'consecutive_all_correct': goal.consecutive_all_correct,
                'mastery_achieved': goal.mastery_achieved,
                'mastery_date': goal.mastery_date,
                'mastery_progress': mastery_progress(goal.consecutive_all_correct),
                'recent_progress': [
                    {
                        'date': record.date,
                        'step_order': record.step.step_order,
                        'outcome': record.outcome,
                        'notes': record.notes,
                    }
                    for record in recent
                ],
            })

        return {
            'employee_id': employee.id,
            'employee_name': employee.name,
            'active_goal_count': sum(1 for g in goals_data if g['status'] == GoalStatus.ACTIVE),
            'mastered_goal_count': sum(1 for g in goals_data if g['mastery_achieved']),
            'goals': goals_data,
        }
