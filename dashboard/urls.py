from django.urls import path
from .views import AdminStatsView, HealthView

urlpatterns = [
    path('admin/stats', AdminStatsView.as_view(), name='admin-stats'),
    path('health', HealthView.as_view(), name='health'),
]
