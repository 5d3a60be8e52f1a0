from django.urls import path, include
from rest_framework.routers import SimpleRouter
from .views import (
    ProductListView,
    ProductSearchView,
    TopDiscountProductsView,
    ProductDetailView,
    AdminProductViewSet,
)

router = SimpleRouter(trailing_slash=False)
router.register(r'products', AdminProductViewSet, basename='admin-products')

urlpatterns = [
    path('products', ProductListView.as_view(), name='product-list'),
    path('products/search', ProductSearchView.as_view(), name='product-search'),
    path('products/top-discount', TopDiscountProductsView.as_view(), name='product-top-discount'),
    path('products/<int:pk>', ProductDetailView.as_view(), name='product-detail'),

    path('admin/', include(router.urls)),
]
