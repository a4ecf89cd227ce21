from django.urls import path
from . import views

app_name = 'shifts'

urlpatterns = [
    # Shift lifecycle
    path('active/', views.active_shift, name='active'),
    path('start/', views.start, name='start'),
    path('end/', views.end, name='end'),
    path('<uuid:shift_id>/', views.shift_detail, name='detail'),

    # Per-shift records
    path('<uuid:shift_id>/outcomes/', views.shift_outcomes, name='outcomes'),
    path('<uuid:shift_id>/summaries/', views.shift_summaries, name='summaries'),
]
