from rest_framework import serializers
from .models import Employee


class EmergencyContactSerializer(serializers.Serializer):
    """One emergency contact entry."""

    name = serializers.CharField(max_length=100)
    relationship = serializers.CharField(max_length=50, required=False, allow_blank=True, default='')
    phone = serializers.CharField(max_length=30)


class EmployeeSerializer(serializers.ModelSerializer):
    """Full employee profile."""

    active_goal_count = serializers.SerializerMethodField()

    class Meta:
        model = Employee
        fields = [
            'id',
            'name',
            'role',
            'profile_image_url',
            'is_active',
            'allergies',
            'emergency_contacts',
            'interests_motivators',
            'challenges',
            'regulation_strategies',
            'active_goal_count',
            'created_at',
            'updated_at',
        ]
        read_only_fields = fields

    def get_active_goal_count(self, obj):
        return obj.goals.filter(status='active').count()


class EmployeeListSerializer(serializers.ModelSerializer):
    """Lightweight serializer for list views."""

    class Meta:
        model = Employee
        fields = ['id', 'name', 'role', 'profile_image_url', 'is_active']
        read_only_fields = fields


class EmployeeWriteSerializer(serializers.Serializer):
    """Input serializer for creating and updating employees."""

    name = serializers.CharField(max_length=100)
    role = serializers.CharField(max_length=100, required=False)
    profile_image_url = serializers.URLField(max_length=500, required=False, allow_blank=True)
    is_active = serializers.BooleanField(required=False)
    allergies = serializers.ListField(
        child=serializers.CharField(max_length=200), required=False
    )
    emergency_contacts = EmergencyContactSerializer(many=True, required=False)
    interests_motivators = serializers.ListField(
        child=serializers.CharField(max_length=200), required=False
    )
    challenges = serializers.ListField(
        child=serializers.CharField(max_length=200), required=False
    )
    regulation_strategies = serializers.ListField(
        child=serializers.CharField(max_length=200), required=False
    )

    def validate_name(self, value):
        value = value.strip()
        if not value:
            raise serializers.ValidationError("Name cannot be blank.")
        return value
