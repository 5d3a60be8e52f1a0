from django.db.models import Count

from rest_framework import mixins, status, viewsets
from rest_framework.decorators import action
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiTypes

from users.authentication import OptionalJWTAuthentication
from users.permissions import IsAdminRole
from .fallback import FallbackOrderStore
from .models import Order
from .serializers import (
    CheckoutSerializer,
    OrderSerializer,
    OrderDetailSerializer,
    OrderStatusSerializer,
)
from .services import OrderService

import logging
logger = logging.getLogger("rest_framework")


def raw_payload(request):
    data = request.data
    if hasattr(data, 'dict'):
        return data.dict()
    return dict(data)


@extend_schema(
    summary="Submit Order",
    description=(
        "Checkout without an account. The order and its items are written in one transaction; "
        "if the database is unavailable the payload is kept in a fallback file and "
        "`fallbackId` is returned instead of `orderId` (HTTP 202). Submitting the same payload "
        "twice creates two orders."
    ),
    request=CheckoutSerializer,
    responses={201: OpenApiTypes.OBJECT, 202: OpenApiTypes.OBJECT, 400: OpenApiTypes.OBJECT},
)
class OrderCreateView(APIView):
    authentication_classes = [OptionalJWTAuthentication]
    permission_classes = [AllowAny]
    serializer_class = CheckoutSerializer

    def post(self, request):
        serializer = CheckoutSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        result = OrderService.submit(serializer.validated_data, raw_payload(request), user=request.user)

        if 'orderId' in result:
            return Response(result, status=status.HTTP_201_CREATED)
        return Response(result, status=status.HTTP_202_ACCEPTED)


@extend_schema_view(
    list=extend_schema(summary="Admin: List Orders", responses={200: OrderSerializer(many=True)}),
    retrieve=extend_schema(summary="Admin: Retrieve Order", responses={200: OrderDetailSerializer}),
    partial_update=extend_schema(
        summary="Admin: Update Order Status",
        request=OrderStatusSerializer,
        responses={200: OrderDetailSerializer},
    ),
    destroy=extend_schema(summary="Admin: Delete Order"),
    fallback=extend_schema(
        summary="Admin: Fallback Orders",
        description="Orders stored in the fallback file while the database was unavailable, newest first.",
        responses={200: OpenApiTypes.OBJECT},
    ),
)
class AdminOrderViewSet(
    mixins.ListModelMixin,
    mixins.RetrieveModelMixin,
    mixins.UpdateModelMixin,
    mixins.DestroyModelMixin,
    viewsets.GenericViewSet
):
    permission_classes = [IsAdminRole]
    lookup_value_regex = r'\d+'
    http_method_names = ['get', 'patch', 'delete', 'head', 'options']

    def get_queryset(self):
        if self.action == 'list':
            return Order.objects.annotate(items_count=Count('items')).order_by('-created_at')
        return Order.objects.prefetch_related('items')

    def get_serializer_class(self):
        if self.action == 'list':
            return OrderSerializer
        if self.action == 'partial_update':
            return OrderStatusSerializer
        return OrderDetailSerializer

    def partial_update(self, request, *args, **kwargs):
        order = self.get_object()
        serializer = OrderStatusSerializer(order, data=request.data, partial=True)
        serializer.is_valid(raise_exception=True)
        serializer.save()
        logger.info(f"Admin {request.user.pk} set order {order.pk} status to {order.status!r}")
        return Response(OrderDetailSerializer(order).data)

    def perform_destroy(self, instance):
        logger.info(f"Admin {self.request.user.pk} deleted order {instance.pk}")
        instance.delete()

    @action(detail=False, methods=['get'], url_path='fallback')
    def fallback(self, request):
        try:
            records = FallbackOrderStore.from_settings().read()
        except (OSError, ValueError) as e:
            logger.error(f"Could not read fallback order store: {e}")
            return Response(
                {"detail": "Fallback order store is unreadable."},
                status=status.HTTP_500_INTERNAL_SERVER_ERROR,
            )
        return Response(records)
