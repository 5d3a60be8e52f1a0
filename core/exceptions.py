import logging

from django.db import DatabaseError
from rest_framework import status
from rest_framework.exceptions import APIException
from rest_framework.response import Response
from rest_framework.views import exception_handler

logger = logging.getLogger("rest_framework")


class TransientStorageError(Exception):
    """
    The primary database could not complete a write or read.

    Never reaches the client: callers recover locally (order fallback file,
    previously stored product aggregates).
    """


class FatalStorageError(APIException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail = "Order could not be stored. Please try again later."
    default_code = "storage_unavailable"


def api_exception_handler(exc, context):
    response = exception_handler(exc, context)
    if response is not None:
        return response

    if isinstance(exc, DatabaseError):
        view = context.get("view")
        logger.error("Unhandled database error in %s: %s", view.__class__.__name__, exc)
        return Response(
            {"detail": "A server error occurred. Please try again later."},
            status=status.HTTP_500_INTERNAL_SERVER_ERROR,
        )
    return None
