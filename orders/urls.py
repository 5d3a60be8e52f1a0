from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import OrderCreateView, AdminOrderViewSet

router = SimpleRouter(trailing_slash=False)
router.register(r'orders', AdminOrderViewSet, basename='admin-orders')

urlpatterns = [
    path('orders', OrderCreateView.as_view(), name='order-create'),
    path('admin/', include(router.urls)),
]
