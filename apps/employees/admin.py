from django.contrib import admin
from .models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ['name', 'role', 'is_active', 'created_at']
    list_filter = ['is_active', 'role']
    search_fields = ['name', 'role']
    readonly_fields = ['id', 'created_at', 'updated_at']

    fieldsets = (
        ('Basic Information', {
            'fields': ('id', 'name', 'role', 'profile_image_url', 'is_active')
        }),
        ('Support Profile', {
            'fields': (
                'allergies',
                'emergency_contacts',
                'interests_motivators',
                'challenges',
                'regulation_strategies',
            ),
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',),
        }),
    )

    def has_delete_permission(self, request, obj=None):
        # Employees are deactivated, never deleted
        return False
