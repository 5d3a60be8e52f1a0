from rest_framework import generics, viewsets
from rest_framework.permissions import AllowAny
from rest_framework.filters import OrderingFilter
from django_filters.rest_framework import DjangoFilterBackend

from drf_spectacular.utils import (
    extend_schema, extend_schema_view, OpenApiParameter, OpenApiTypes
)
import logging

from .models import Product
from .serializers import ProductSerializer
from .filters import ProductFilter
from users.permissions import IsAdminRole

logger = logging.getLogger("rest_framework")

SEARCH_LIMIT = 50
TOP_DISCOUNT_DEFAULT = 10


@extend_schema_view(
    get=extend_schema(
        summary="List Products",
        description=(
            "All products, newest first. Supports `category`, `subCategory`, "
            "`price_min` and `price_max` filters and `ordering` by price, rating or discount."
        ),
    )
)
class ProductListView(generics.ListAPIView):
    serializer_class = ProductSerializer
    authentication_classes = []
    permission_classes = [AllowAny]
    filter_backends = [DjangoFilterBackend, OrderingFilter]
    filterset_class = ProductFilter
    ordering_fields = ['price', 'rating', 'discount', 'created_at']
    queryset = Product.objects.order_by('-created_at')


@extend_schema(
    summary="Search Products",
    parameters=[
        OpenApiParameter(
            name="q",
            type=OpenApiTypes.STR,
            location=OpenApiParameter.QUERY,
            description="Case-insensitive match on the product name."
        )
    ],
)
class ProductSearchView(generics.ListAPIView):
    serializer_class = ProductSerializer
    authentication_classes = []
    permission_classes = [AllowAny]

    def get_queryset(self):
        search_text = self.request.query_params.get('q', '').strip()
        queryset = Product.objects.order_by('name')
        if search_text:
            queryset = queryset.filter(name__icontains=search_text)
        return queryset[:SEARCH_LIMIT]


@extend_schema(
    summary="Top Discounted Products",
    parameters=[
        OpenApiParameter(
            name="limit",
            type=OpenApiTypes.INT,
            location=OpenApiParameter.QUERY,
            description=f"How many products to return (1-{SEARCH_LIMIT}, default {TOP_DISCOUNT_DEFAULT})."
        )
    ],
)
class TopDiscountProductsView(generics.ListAPIView):
    serializer_class = ProductSerializer
    authentication_classes = []
    permission_classes = [AllowAny]

    def get_limit(self):
        try:
            limit = int(self.request.query_params.get('limit', TOP_DISCOUNT_DEFAULT))
        except (TypeError, ValueError):
            limit = TOP_DISCOUNT_DEFAULT
        return max(1, min(limit, SEARCH_LIMIT))

    def get_queryset(self):
        return Product.objects.filter(discount__gt=0).order_by('-discount', '-rating')[:self.get_limit()]


@extend_schema(summary="Retrieve Product")
class ProductDetailView(generics.RetrieveAPIView):
    serializer_class = ProductSerializer
    authentication_classes = []
    permission_classes = [AllowAny]
    queryset = Product.objects.all()


@extend_schema_view(
    list=extend_schema(summary="Admin: List Products"),
    retrieve=extend_schema(summary="Admin: Retrieve Product"),
    create=extend_schema(summary="Admin: Create Product"),
    update=extend_schema(
        summary="Admin: Update Product",
        description="Rating and review count are derived from feedback and ignored if sent."
    ),
    partial_update=extend_schema(summary="Admin: Partially Update Product"),
    destroy=extend_schema(summary="Admin: Delete Product"),
)
class AdminProductViewSet(viewsets.ModelViewSet):
    serializer_class = ProductSerializer
    permission_classes = [IsAdminRole]
    queryset = Product.objects.order_by('-created_at')

    def perform_create(self, serializer):
        product = serializer.save()
        logger.info(f"Admin {self.request.user.pk} created product {product.pk}")

    def perform_update(self, serializer):
        product = serializer.save()
        logger.info(f"Admin {self.request.user.pk} updated product {product.pk}")

    def perform_destroy(self, instance):
        logger.info(f"Admin {self.request.user.pk} deleted product {instance.pk}")
        instance.delete()
