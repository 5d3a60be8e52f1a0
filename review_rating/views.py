from rest_framework import generics, status
from rest_framework.exceptions import ValidationError, NotFound
from rest_framework.pagination import LimitOffsetPagination
from rest_framework.permissions import AllowAny, SAFE_METHODS
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_spectacular.utils import extend_schema, extend_schema_view, OpenApiTypes

from .models import Feedback
from .serializers import (
    FeedbackCreateSerializer,
    FeedbackSerializer,
    AdminFeedbackSerializer,
    FeedbackReplySerializer,
)
from .services import FeedbackService
from product_management.models import Product
from users.permissions import HasRole, IsAdminRole

import logging
logger = logging.getLogger("rest_framework")


class LoadMorePagination(LimitOffsetPagination):
    default_limit = 10


def parse_numeric_id(value, label):
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError({"detail": f"Invalid {label} id."})


@extend_schema_view(
    get=extend_schema(
        summary="List Reviews",
        description="Approved reviews for a product, newest first. Public."
    ),
    post=extend_schema(
        summary="Create Review",
        description=(
            "Rate a product from 1 to 5 with optional text. Requires a bearer token of any role. "
            "Repeated reviews of the same product are kept. The response carries the product's "
            "recomputed average rating and review count."
        ),
        request=FeedbackCreateSerializer,
        responses={201: OpenApiTypes.OBJECT},
    ),
)
class ProductReviewListCreateView(generics.ListCreateAPIView):
    serializer_class = FeedbackSerializer
    pagination_class = LoadMorePagination
    permission_classes = [HasRole]
    allowed_roles = ()

    def get_authenticators(self):
        if self.request and self.request.method in SAFE_METHODS:
            return []
        return super().get_authenticators()

    def get_permissions(self):
        if self.request and self.request.method in SAFE_METHODS:
            return [AllowAny()]
        return super().get_permissions()

    def get_product_id(self):
        return parse_numeric_id(self.kwargs.get('product_id'), 'product')

    def get_queryset(self):
        return (
            Feedback.objects.filter(product_id=self.get_product_id(), is_approved=True)
            .select_related('user')
            .order_by('-created_at', '-id')
        )

    def create(self, request, *args, **kwargs):
        product_id = self.get_product_id()

        serializer = FeedbackCreateSerializer(data=request.data)
        serializer.is_valid(raise_exception=True)
        data = serializer.validated_data

        product = Product.objects.filter(pk=product_id).first()
        if product is None:
            raise NotFound({"detail": "Product not found."})

        feedback, avg_rating, review_count = FeedbackService.submit(
            request.user, product, data['rating'], data.get('text', '')
        )

        return Response({
            'ok': True,
            'review': FeedbackSerializer(feedback).data,
            'avgRating': float(avg_rating),
            'reviewCount': review_count,
        }, status=status.HTTP_201_CREATED)


@extend_schema(summary="Admin: List Feedbacks", description="Every review with product and author names.")
class AdminFeedbackListView(generics.ListAPIView):
    serializer_class = AdminFeedbackSerializer
    permission_classes = [IsAdminRole]
    queryset = Feedback.objects.select_related('product', 'user').order_by('-created_at', '-id')


@extend_schema(summary="Admin: Delete Feedback", description="The product aggregate is recomputed afterwards.")
class AdminFeedbackDetailView(APIView):
    permission_classes = [IsAdminRole]
    serializer_class = None

    def delete(self, request, feedback_id):
        pk = parse_numeric_id(feedback_id, 'feedback')
        feedback = Feedback.objects.filter(pk=pk).first()
        if feedback is None:
            raise NotFound({"detail": "Feedback not found."})

        feedback.delete()
        logger.info(f"Admin {request.user.pk} deleted feedback {pk}")
        return Response(status=status.HTTP_204_NO_CONTENT)


@extend_schema(
    summary="Admin: Reply to Feedback",
    description="Stores the reply text, author and time on the feedback, replacing any earlier reply.",
    request=FeedbackReplySerializer,
    responses={200: OpenApiTypes.OBJECT},
)
class AdminFeedbackReplyView(APIView):
    permission_classes = [IsAdminRole]
    serializer_class = FeedbackReplySerializer

    def post(self, request, feedback_id):
        pk = parse_numeric_id(feedback_id, 'feedback')

        serializer = FeedbackReplySerializer(data=request.data)
        serializer.is_valid(raise_exception=True)

        feedback = Feedback.objects.filter(pk=pk).first()
        if feedback is None:
            raise NotFound({"detail": "Feedback not found."})

        feedback = FeedbackService.reply(feedback, serializer.validated_data['reply'], request.user.display_name)
        logger.info(f"Admin {request.user.pk} replied to feedback {pk}")

        return Response({
            'ok': True,
            'reply': {
                'text': feedback.admin_reply,
                'by': feedback.admin_reply_by,
                'at': feedback.admin_reply_at,
            },
        }, status=status.HTTP_200_OK)
