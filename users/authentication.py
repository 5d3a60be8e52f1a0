from django.db import DatabaseError
from rest_framework.authentication import BaseAuthentication
from rest_framework.exceptions import AuthenticationFailed, NotAuthenticated
from rest_framework_simplejwt.tokens import AccessToken
from rest_framework_simplejwt.exceptions import TokenError
import logging
from .models import User


logger = logging.getLogger("django")

INVALID_TOKEN = {"code": "invalid_token", "message": "Invalid or expired token. Please log in again."}


class JWTAuthentication(BaseAuthentication):
    """
    Bearer authentication for the storefront API.

    The access token is read from ``Authorization: Bearer <token>`` and, when
    that header is absent, from the ``access_token`` cookie set at login.
    A request without any token is rejected outright, so views that are
    public must opt out (``authentication_classes = []``) or use
    :class:`OptionalJWTAuthentication`.
    """

    keyword = "Bearer"

    def get_raw_token(self, request):
        header = request.META.get("HTTP_AUTHORIZATION", "")
        parts = header.split()
        if len(parts) == 2 and parts[0].lower() == self.keyword.lower():
            return parts[1]
        return request.COOKIES.get("access_token")

    def authenticate(self, request):
        raw_token = self.get_raw_token(request)

        if not raw_token:
            raise NotAuthenticated(
                detail={"code": "not_authenticated", "message": "Authentication credentials were not provided."}
            )

        try:
            token = AccessToken(raw_token)
        except TokenError as e:
            logger.debug("Rejected access token: %s", e)
            raise AuthenticationFailed(detail=INVALID_TOKEN)

        user_id = token.get("id")
        if not user_id:
            raise AuthenticationFailed(detail=INVALID_TOKEN)

        try:
            user = User.objects.get(id=user_id, is_active=True)
        except User.DoesNotExist:
            raise AuthenticationFailed(detail=INVALID_TOKEN)

        return (user, token)

    def authenticate_header(self, request):
        return f'{self.keyword} realm="api"'


class OptionalJWTAuthentication(JWTAuthentication):
    """
    Same token handling, but a missing or unusable token leaves the request
    anonymous instead of failing it.

    A database failure while loading the user also leaves it anonymous, so
    checkout can still reach the fallback store.
    """

    def authenticate(self, request):
        try:
            return super().authenticate(request)
        except (NotAuthenticated, AuthenticationFailed):
            return None
        except DatabaseError as e:
            logger.warning(f"Could not load user for token, continuing anonymously: {e}")
            return None
