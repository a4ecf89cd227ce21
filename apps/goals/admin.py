from django.contrib import admin
from .models import GoalTemplate, GoalTemplateStep, DevelopmentGoal, GoalStep


class GoalTemplateStepInline(admin.TabularInline):
    model = GoalTemplateStep
    extra = 1
    ordering = ['step_order']


@admin.register(GoalTemplate)
class GoalTemplateAdmin(admin.ModelAdmin):
    list_display = ['name', 'status', 'default_target_date', 'created_at']
    list_filter = ['status']
    search_fields = ['name', 'goal_statement']
    readonly_fields = ['id', 'created_at', 'updated_at']
    inlines = [GoalTemplateStepInline]


class GoalStepInline(admin.TabularInline):
    model = GoalStep
    extra = 0
    ordering = ['step_order']


@admin.register(DevelopmentGoal)
class DevelopmentGoalAdmin(admin.ModelAdmin):
    list_display = [
        'title',
        'employee',
        'status',
        'consecutive_all_correct',
        'mastery_achieved',
        'mastery_date',
    ]
    list_filter = ['status', 'mastery_achieved']
    search_fields = ['title', 'employee__name']
    raw_id_fields = ['employee', 'created_by']
    inlines = [GoalStepInline]

    # Progression fields are maintained by the progression service
    readonly_fields = [
        'id',
        'consecutive_all_correct',
        'mastery_achieved',
        'mastery_date',
        'streak_evaluated_on',
        'streak_before_evaluation',
        'created_at',
        'updated_at',
    ]
