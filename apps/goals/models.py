from django.conf import settings
from django.core.validators import MinValueValidator
from django.db import models
import uuid

from .progression import MASTERY_STREAK, mastery_progress as streak_progress

DEFAULT_MASTERY_CRITERIA = '3 consecutive shifts with all required steps Correct'


class TemplateStatus(models.TextChoices):
    ACTIVE = 'active', 'Active'
    ARCHIVED = 'archived', 'Archived'


class GoalStatus(models.TextChoices):
    ACTIVE = 'active', 'Active'
    MAINTENANCE = 'maintenance', 'Maintenance'
    ARCHIVED = 'archived', 'Archived'


class GoalTemplate(models.Model):
    """Reusable goal blueprint. Assigning it copies statement and steps into a new goal."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=200)
    goal_statement = models.TextField()
    default_mastery_criteria = models.CharField(
        max_length=255,
        default=DEFAULT_MASTERY_CRITERIA
    )
    default_target_date = models.DateField(null=True, blank=True)
    status = models.CharField(
        max_length=20,
        choices=TemplateStatus.choices,
        default=TemplateStatus.ACTIVE,
        db_index=True
    )
    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='goal_templates'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'goal_templates'
        ordering = ['name']

    def __str__(self):
        return self.name


class GoalTemplateStep(models.Model):
    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    template = models.ForeignKey(
        GoalTemplate,
        on_delete=models.CASCADE,
        related_name='steps'
    )
    step_order = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    step_description = models.TextField()
    is_required = models.BooleanField(default=True)

    class Meta:
        db_table = 'goal_template_steps'
        ordering = ['template', 'step_order']
        constraints = [
            models.UniqueConstraint(
                fields=['template', 'step_order'],
                name='unique_template_step_order'
            ),
        ]

    def __str__(self):
        return f"{self.template.name} #{self.step_order}"


class DevelopmentGoal(models.Model):
    """
    Individual development goal of one employee.

    The streak and mastery fields are written only by the progression
    service; mastery_date is set once and never changes.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    employee = models.ForeignKey(
        'employees.Employee',
        on_delete=models.PROTECT,
        related_name='goals'
    )
    title = models.CharField(max_length=200)
    description = models.TextField(blank=True)
    mastery_criteria = models.CharField(max_length=255, default=DEFAULT_MASTERY_CRITERIA)
    start_date = models.DateField()
    target_end_date = models.DateField(null=True, blank=True)
    status = models.CharField(
        max_length=20,
        choices=GoalStatus.choices,
        default=GoalStatus.ACTIVE
    )

    # Progression state
    consecutive_all_correct = models.PositiveIntegerField(default=0)
    mastery_achieved = models.BooleanField(default=False)
    mastery_date = models.DateField(null=True, blank=True)
    # Day of the last evaluation and the streak carried into that day,
    # so re-evaluating the same day starts from the same base.
    streak_evaluated_on = models.DateField(null=True, blank=True)
    streak_before_evaluation = models.PositiveIntegerField(default=0)

    created_by = models.ForeignKey(
        settings.AUTH_USER_MODEL,
        on_delete=models.SET_NULL,
        null=True,
        blank=True,
        related_name='assigned_goals'
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'development_goals'
        indexes = [
            models.Index(fields=['employee', 'status'], name='goals_employee_8a4d2c_idx'),
            models.Index(fields=['status', 'consecutive_all_correct'], name='goals_status_1c7e9f_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"{self.title} ({self.employee})"

    @property
    def is_near_mastery(self):
        return self.status == GoalStatus.ACTIVE and self.consecutive_all_correct >= MASTERY_STREAK - 1

    @property
    def mastery_progress(self):
        """Percent of the mastery streak reached, capped at 100."""
        return streak_progress(self.consecutive_all_correct)


class GoalStep(models.Model):
    """One step of a goal. Copied from a template or entered with a custom goal."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    goal = models.ForeignKey(
        DevelopmentGoal,
        on_delete=models.CASCADE,
        related_name='steps'
    )
    step_order = models.PositiveIntegerField(validators=[MinValueValidator(1)])
    step_description = models.TextField()
    is_required = models.BooleanField(default=True)

    class Meta:
        db_table = 'goal_steps'
        ordering = ['goal', 'step_order']
        constraints = [
            models.UniqueConstraint(
                fields=['goal', 'step_order'],
                name='unique_goal_step_order'
            ),
        ]

    def __str__(self):
        return f"{self.goal.title} #{self.step_order}"
