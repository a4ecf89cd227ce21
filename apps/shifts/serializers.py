from rest_framework import serializers
from apps.accounts.serializers import UserMinimalSerializer
from apps.employees.serializers import EmployeeListSerializer
from .models import ShiftRoster, StepProgress, ShiftSummary, StepOutcome


class ShiftRosterSerializer(serializers.ModelSerializer):
    """Shift with manager and roster."""

    manager = UserMinimalSerializer(read_only=True)
    employees = EmployeeListSerializer(many=True, read_only=True)

    class Meta:
        model = ShiftRoster
        fields = [
            'id',
            'manager',
            'date',
            'started_at',
            'ended_at',
            'is_active',
            'employees',
        ]
        read_only_fields = fields


class StartShiftSerializer(serializers.Serializer):
    employee_ids = serializers.ListField(
        child=serializers.UUIDField(),
        allow_empty=False,
        help_text="Employees present on the shift"
    )


class StepProgressSerializer(serializers.ModelSerializer):
    """Recorded outcome of one goal step."""

    employee_name = serializers.CharField(source='employee.name', read_only=True)
    goal_title = serializers.CharField(source='goal.title', read_only=True)
    step_order = serializers.IntegerField(source='step.step_order', read_only=True)
    step_description = serializers.CharField(source='step.step_description', read_only=True)
    recorded_by = UserMinimalSerializer(read_only=True)

    class Meta:
        model = StepProgress
        fields = [
            'id',
            'goal',
            'goal_title',
            'step',
            'step_order',
            'step_description',
            'employee',
            'employee_name',
            'shift',
            'date',
            'outcome',
            'notes',
            'recorded_by',
            'updated_at',
        ]
        read_only_fields = fields


class RecordOutcomeSerializer(serializers.Serializer):
    """Input for recording a step outcome. A verbal prompt must be explained in notes."""

    goal = serializers.UUIDField()
    step = serializers.UUIDField()
    outcome = serializers.ChoiceField(choices=StepOutcome.choices)
    notes = serializers.CharField(required=False, allow_blank=True, default='')

    def validate(self, attrs):
        if attrs['outcome'] == StepOutcome.VERBAL_PROMPT and not attrs.get('notes', '').strip():
            raise serializers.ValidationError({
                'notes': "Notes are required when the outcome is a verbal prompt."
            })
        return attrs


class ShiftSummarySerializer(serializers.ModelSerializer):
    employee_name = serializers.CharField(source='employee.name', read_only=True)
    author = UserMinimalSerializer(read_only=True)

    class Meta:
        model = ShiftSummary
        fields = [
            'id',
            'employee',
            'employee_name',
            'shift',
            'date',
            'summary',
            'author',
            'updated_at',
        ]
        read_only_fields = fields


class SaveSummarySerializer(serializers.Serializer):
    employee = serializers.UUIDField()
    summary = serializers.CharField()


class OutcomeQuerySerializer(serializers.Serializer):
    employee = serializers.UUIDField(required=False)
