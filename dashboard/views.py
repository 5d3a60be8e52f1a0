from django.db import DatabaseError, connection
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from drf_spectacular.utils import extend_schema
from drf_spectacular.types import OpenApiTypes

from users.permissions import IsAdminRole
from .dsh_cache import get_cached_stats

import logging
logger = logging.getLogger("rest_framework")


@extend_schema(
    tags=['Admin'],
    summary="Admin: Dashboard Stats",
    description=(
        "Totals of products, approved reviews, users and orders, overall revenue and "
        "monthly sales for the last six months."
    ),
    responses={200: OpenApiTypes.OBJECT},
)
class AdminStatsView(APIView):
    """
    GET /api/admin/stats
    """

    permission_classes = [IsAdminRole]
    serializer_class = None

    def get(self, request):
        return Response(get_cached_stats())


@extend_schema(tags=['Health'], summary="Database Health Check", responses={200: OpenApiTypes.OBJECT, 503: OpenApiTypes.OBJECT})
class HealthView(APIView):
    authentication_classes = []
    permission_classes = [AllowAny]
    serializer_class = None

    def get(self, request):
        try:
            with connection.cursor() as cursor:
                cursor.execute("SELECT 1")
                row = cursor.fetchone()
        except DatabaseError as e:
            logger.error(f"Health check failed: {e}")
            return Response({"ok": False, "error": str(e)}, status=status.HTTP_503_SERVICE_UNAVAILABLE)
        return Response({"ok": True, "result": [{"test": row[0]}]})
