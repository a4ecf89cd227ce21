from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    # Dashboard
    path('dashboard/', views.dashboard, name='dashboard'),

    # Aggregates
    path('goals-near-mastery/', views.goals_near_mastery, name='goals-near-mastery'),
    path('success-rate/', views.success_rate, name='success-rate'),

    # Per-employee progress
    path('employees/<uuid:employee_id>/progress/', views.employee_progress, name='employee-progress'),
]
