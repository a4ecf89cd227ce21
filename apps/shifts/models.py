from django.conf import settings
from django.db import models
from django.db.models import Q
from django.utils import timezone
import uuid


class StepOutcome(models.TextChoices):
    CORRECT = 'correct', 'Correct'
    VERBAL_PROMPT = 'verbal_prompt', 'Verbal Prompt'
    NA = 'na', 'N/A'


class ShiftRoster(models.Model):
    """
    A shift run by a manager with the employees present.

    At most one shift is active at a time across the whole shop.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    manager = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.PROTECT,
        related_name='shifts'
    )
    date = models.DateField(db_index=True)
    started_at = models.DateTimeField(default=timezone.now)
    ended_at = models.DateTimeField(null=True, blank=True)
    employees = models.ManyToManyField(
        'employees.Employee',
        related_name='shifts'
    )
    is_active = models.BooleanField(default=True)

    class Meta:
        db_table = 'shift_rosters'
        ordering = ['-started_at']
        constraints = [
            models.UniqueConstraint(
                fields=['is_active'],
                condition=Q(is_active=True),
                name='single_active_shift'
            ),
        ]

    def __str__(self):
        return f"Shift {self.date} ({self.manager})"


class StepProgress(models.Model):
    """
    Outcome of one goal step for one employee in one shift on one day.

    Recording the same step again the same day overwrites this row.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    goal = models.ForeignKey(
        'goals.DevelopmentGoal',
        on_delete=models.CASCADE,
        related_name='step_progress'
    )
    step = models.ForeignKey(
        'goals.GoalStep',
        on_delete=models.CASCADE,
        related_name='progress'
    )
    employee = models.ForeignKey(
        'employees.Employee',
        on_delete=models.CASCADE,
        related_name='step_progress'
    )
    shift = models.ForeignKey(
        ShiftRoster,
        on_delete=models.CASCADE,
        related_name='step_progress'
    )
    date = models.DateField()
    outcome = models.CharField(max_length=20, choices=StepOutcome.choices)
    notes = models.TextField(blank=True)
    recorded_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='recorded_progress'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'step_progress'
        ordering = ['-date', '-updated_at']
        indexes = [
            models.Index(fields=['goal', 'date'], name='progress_goal_2b6f8e_idx'),
            models.Index(fields=['date', 'outcome'], name='progress_date_9d3a1c_idx'),
        ]
        constraints = [
            models.UniqueConstraint(
                fields=['goal', 'step', 'employee', 'shift', 'date'],
                name='unique_step_progress_per_day'
            ),
        ]

    def __str__(self):
        return f"{self.employee} {self.step} {self.date}: {self.outcome}"


class ShiftSummary(models.Model):
    """Manager's free-text narrative about one employee's shift."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    employee = models.ForeignKey(
        'employees.Employee',
        on_delete=models.CASCADE,
        related_name='shift_summaries'
    )
    shift = models.ForeignKey(
        ShiftRoster,
        on_delete=models.CASCADE,
        related_name='summaries'
    )
    date = models.DateField()
    summary = models.TextField()
    author = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='shift_summaries'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'shift_summaries'
        ordering = ['-date', 'employee__name']
        constraints = [
            models.UniqueConstraint(
                fields=['employee', 'shift', 'date'],
                name='unique_shift_summary_per_day'
            ),
        ]

    def __str__(self):
        return f"Summary {self.employee} {self.date}"
