from rest_framework import serializers
from .models import (
    GoalTemplate,
    GoalTemplateStep,
    DevelopmentGoal,
    GoalStatus,
    GoalStep,
    DEFAULT_MASTERY_CRITERIA,
)
from .progression import MASTERY_STREAK


class StepInputSerializer(serializers.Serializer):
    """One step in a create/update request. Order is taken from list position."""

    step_description = serializers.CharField()
    is_required = serializers.BooleanField(default=True)


def validate_step_list(value):
    if not value:
        raise serializers.ValidationError("At least one step is required.")
    if not any(step.get('is_required', True) for step in value):
        raise serializers.ValidationError("At least one step must be required for mastery.")
    return value


# =============================================================================
# Templates
# =============================================================================

class GoalTemplateStepSerializer(serializers.ModelSerializer):

    class Meta:
        model = GoalTemplateStep
        fields = ['id', 'step_order', 'step_description', 'is_required']
        read_only_fields = fields


class GoalTemplateSerializer(serializers.ModelSerializer):
    """Template with its ordered steps."""

    steps = GoalTemplateStepSerializer(many=True, read_only=True)

    class Meta:
        model = GoalTemplate
        fields = [
            'id',
            'name',
            'goal_statement',
            'default_mastery_criteria',
            'default_target_date',
            'status',
            'steps',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields


class GoalTemplateWriteSerializer(serializers.Serializer):
    """Input serializer for creating and updating templates."""

    name = serializers.CharField(max_length=200)
    goal_statement = serializers.CharField()
    default_mastery_criteria = serializers.CharField(max_length=255, required=False)
    default_target_date = serializers.DateField(required=False, allow_null=True)
    steps = StepInputSerializer(many=True)

    def validate_steps(self, value):
        return validate_step_list(value)


# =============================================================================
# Goals
# =============================================================================

class GoalStepSerializer(serializers.ModelSerializer):

    class Meta:
        model = GoalStep
        fields = ['id', 'step_order', 'step_description', 'is_required']
        read_only_fields = fields


class DevelopmentGoalSerializer(serializers.ModelSerializer):
    """Goal with steps and progression state."""

    employee_name = serializers.CharField(source='employee.name', read_only=True)
    steps = GoalStepSerializer(many=True, read_only=True)
    required_step_count = serializers.SerializerMethodField()
    mastery_streak = serializers.SerializerMethodField()
    mastery_progress = serializers.FloatField(read_only=True)
    is_near_mastery = serializers.BooleanField(read_only=True)

    class Meta:
        model = DevelopmentGoal
        fields = [
            'id',
            'employee',
            'employee_name',
            'title',
            'description',
            'mastery_criteria',
            'start_date',
            'target_end_date',
            'status',
            'consecutive_all_correct',
            'mastery_achieved',
            'mastery_date',
            'mastery_streak',
            'mastery_progress',
            'is_near_mastery',
            'required_step_count',
            'steps',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_required_step_count(self, obj):
        return sum(1 for step in obj.steps.all() if step.is_required)

    def get_mastery_streak(self, obj):
        return MASTERY_STREAK


class DevelopmentGoalListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list views."""

    employee_name = serializers.CharField(source='employee.name', read_only=True)

    class Meta:
        model = DevelopmentGoal
        fields = [
            'id',
            'employee',
            'employee_name',
            'title',
            'status',
            'consecutive_all_correct',
            'mastery_achieved',
            'mastery_date',
            'target_end_date',
        ]
        read_only_fields = fields


class CustomGoalCreateSerializer(serializers.Serializer):
    """Input serializer for a goal entered without a template."""

    employee = serializers.UUIDField()
    title = serializers.CharField(max_length=200)
    description = serializers.CharField(required=False, allow_blank=True, default='')
    mastery_criteria = serializers.CharField(max_length=255, required=False, default=DEFAULT_MASTERY_CRITERIA)
    start_date = serializers.DateField(required=False, allow_null=True)
    target_end_date = serializers.DateField(required=False, allow_null=True)
    steps = StepInputSerializer(many=True)

    def validate_steps(self, value):
        return validate_step_list(value)

    def validate(self, attrs):
        start, end = attrs.get('start_date'), attrs.get('target_end_date')
        if start and end and end < start:
            raise serializers.ValidationError({'target_end_date': "Target date cannot be before the start date."})
        return attrs


class GoalFromTemplateSerializer(serializers.Serializer):
    """Input serializer for assigning a template to an employee."""

    template = serializers.UUIDField()
    employee = serializers.UUIDField()
    start_date = serializers.DateField(required=False, allow_null=True)
    target_end_date = serializers.DateField(required=False, allow_null=True)


class GoalUpdateSerializer(serializers.Serializer):
    """Input serializer for editing a goal's descriptive fields."""

    title = serializers.CharField(max_length=200, required=False)
    description = serializers.CharField(required=False, allow_blank=True)
    mastery_criteria = serializers.CharField(max_length=255, required=False)
    target_end_date = serializers.DateField(required=False, allow_null=True)


class GoalQuerySerializer(serializers.Serializer):
    """Query parameters accepted by the goal list."""

    employee = serializers.UUIDField(required=False)
    status = serializers.ChoiceField(choices=GoalStatus.choices, required=False)
