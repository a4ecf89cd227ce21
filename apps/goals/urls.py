from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'goals'

router = DefaultRouter()
router.register(r'templates', views.GoalTemplateViewSet, basename='template')
router.register(r'goals', views.DevelopmentGoalViewSet, basename='goal')

urlpatterns = [
    # Template routes
    # GET    /api/templates/                 - List templates
    # POST   /api/templates/                 - Create template (admin)
    # GET    /api/templates/{id}/            - Template with steps
    # PATCH  /api/templates/{id}/            - Edit template (admin)
    # POST   /api/templates/{id}/archive/    - Archive template (admin)

    # Goal routes
    # GET    /api/goals/                     - List goals (?employee=, ?status=)
    # POST   /api/goals/                     - Create custom goal
    # POST   /api/goals/from-template/       - Assign template to employee
    # GET    /api/goals/{id}/                - Goal with steps and progression
    # PATCH  /api/goals/{id}/                - Edit goal
    # POST   /api/goals/{id}/archive/        - Archive goal
    path('', include(router.urls)),
]
