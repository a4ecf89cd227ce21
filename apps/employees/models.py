from django.db import models
import uuid


class Employee(models.Model):
    """
    Shop employee whose development goals are tracked during shifts.

    Employees are never hard deleted; deactivating keeps their goal and
    progress history intact.
    """

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    name = models.CharField(max_length=100)
    role = models.CharField(max_length=100, default='Super Scooper')
    profile_image_url = models.URLField(max_length=500, blank=True, default='')
    is_active = models.BooleanField(default=True, db_index=True)

    # Support profile, free-text lists
    allergies = models.JSONField(default=list, blank=True)
    # List of {"name": ..., "relationship": ..., "phone": ...}
    emergency_contacts = models.JSONField(default=list, blank=True)
    interests_motivators = models.JSONField(default=list, blank=True)
    challenges = models.JSONField(default=list, blank=True)
    regulation_strategies = models.JSONField(default=list, blank=True)

    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'employees'
        indexes = [
            models.Index(fields=['is_active', 'name'], name='employees_active_3f9c2b_idx'),
        ]
        ordering = ['name']

    def __str__(self):
        return self.name
