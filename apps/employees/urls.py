from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'employees'

router = DefaultRouter()
router.register(r'', views.EmployeeViewSet, basename='employee')

urlpatterns = [
    # GET    /api/employees/          - List employees (?active=, ?search=)
    # POST   /api/employees/          - Add employee
    # GET    /api/employees/{id}/     - Employee profile
    # PATCH  /api/employees/{id}/     - Edit employee
    # DELETE /api/employees/{id}/     - Deactivate employee
    path('', include(router.urls)),
]
