from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'accounts'

router = DefaultRouter()
router.register(r'users', views.UserViewSet, basename='user')

urlpatterns = [
    # Authentication
    path('login/', views.login, name='login'),
    path('logout/', views.logout, name='logout'),

    # Current user
    path('user/', views.get_current_user, name='current-user'),
    path('user/update/', views.update_profile, name='update-profile'),

    # User management (admin)
    # GET   /api/auth/users/                  - List accounts
    # POST  /api/auth/users/                  - Create account
    # GET   /api/auth/users/{id}/             - Account details
    # PATCH /api/auth/users/{id}/             - Update account
    # POST  /api/auth/users/{id}/deactivate/  - Deactivate account
    path('', include(router.urls)),
]
