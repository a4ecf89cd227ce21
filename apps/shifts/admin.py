from django.contrib import admin
from .models import ShiftRoster, StepProgress, ShiftSummary


@admin.register(ShiftRoster)
class ShiftRosterAdmin(admin.ModelAdmin):
    list_display = ['date', 'manager', 'is_active', 'started_at', 'ended_at']
    list_filter = ['is_active', 'date']
    filter_horizontal = ['employees']
    readonly_fields = ['id', 'started_at', 'ended_at']
    date_hierarchy = 'date'


@admin.register(StepProgress)
class StepProgressAdmin(admin.ModelAdmin):
    list_display = ['date', 'employee', 'goal', 'step', 'outcome', 'recorded_by']
    list_filter = ['outcome', 'date']
    search_fields = ['employee__name', 'goal__title', 'notes']
    raw_id_fields = ['goal', 'step', 'employee', 'shift', 'recorded_by']
    readonly_fields = ['id', 'created_at', 'updated_at']
    date_hierarchy = 'date'


@admin.register(ShiftSummary)
class ShiftSummaryAdmin(admin.ModelAdmin):
    list_display = ['date', 'employee', 'shift', 'author']
    search_fields = ['employee__name', 'summary']
    raw_id_fields = ['employee', 'shift', 'author']
    readonly_fields = ['id', 'created_at', 'updated_at']
