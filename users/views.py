import logging

from django.conf import settings
from django.urls import reverse

from rest_framework import generics, status
from rest_framework.response import Response
from rest_framework.views import APIView
from rest_framework.permissions import AllowAny

from drf_spectacular.utils import extend_schema

from .models import User
from .permissions import IsAdminRole
from .serializers import RegisterSerializer, LoginUserSerializer, UserSerializer
from .throttles import LoginRateThrottle
from utils import jwt_tokens, set_jwt_token
from utils.send_mail_custom import send_verification_email

logger = logging.getLogger("rest_framework")


class RegisterView(APIView):
    """
    RegisterView

    Creates a customer account and emails a verification link. The account
    can log in straight away; ``isVerified`` flips once the link is opened.

    **Request Body Parameters:**
      - **name (str)**
      - **surname (str, optional)**
      - **email (str)**
      - **password (str):** at least 8 characters.

    **Responses:**
      - **201 Created:** ``{"ok": true, "user": {...}}``
      - **400 Bad Request:** validation errors (e.g. email already registered).
    """

    authentication_classes = []
    permission_classes = [AllowAny]
    serializer_class = RegisterSerializer

    @extend_schema(summary="Register", request=RegisterSerializer, responses={201: UserSerializer})
    def post(self, request):
        serializer = self.serializer_class(data=request.data)
        if not serializer.is_valid():
            logger.warning(f"Registration failed for email {request.data.get('email')}: {serializer.errors}")
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        user = serializer.save()
        verify_url = request.build_absolute_uri(
            reverse('verify-email', kwargs={'token': user.email_verify_token})
        )

        try:
            send_verification_email(user, verify_url)
        except Exception as e:
            # the account exists either way; the link can be re-sent by an admin
            logger.error(f"Failed to send verification email to {user.email}: {str(e)}")

        data = UserSerializer(user).data
        if settings.DEBUG:
            data['emailVerifyToken'] = user.email_verify_token

        logger.info(f"User {user.email} registered successfully.")
        return Response({'ok': True, 'user': data}, status=status.HTTP_201_CREATED)


class VerifyEmailView(APIView):
    """
    Marks the account owning ``token`` as verified. Tokens are single use.
    """

    authentication_classes = []
    permission_classes = [AllowAny]
    serializer_class = None

    @extend_schema(summary="Verify Email", responses={200: None, 400: None})
    def get(self, request, token):
        user = User.objects.filter(email_verify_token=token).first()
        if user is None:
            return Response(
                {"detail": "Invalid or expired verification token."},
                status=status.HTTP_400_BAD_REQUEST,
            )

        user.is_verified = True
        user.email_verify_token = None
        user.save(update_fields=['is_verified', 'email_verify_token'])
        logger.info(f"Email {user.email} successfully verified.")
        return Response({"ok": True, "detail": "Email verified."}, status=status.HTTP_200_OK)


class LoginUser(APIView):
    """
    LoginUser

    Authenticates a user using email and password credentials. The access
    token is returned in the body for ``Authorization: Bearer`` use and is
    also set as an HTTP-only cookie.

    **Responses:**
      - **200 OK:** ``{"ok": true, "token": "...", "user": {...}}``
      - **400 Bad Request:** Invalid credentials or validation errors.
    """

    authentication_classes = []
    permission_classes = [AllowAny]
    serializer_class = LoginUserSerializer
    throttle_classes = [LoginRateThrottle]

    @extend_schema(summary="Login", request=LoginUserSerializer)
    def post(self, request):
        serializer = self.serializer_class(data=request.data, context={'request': request})
        if not serializer.is_valid():
            logger.warning(f"Login failed for email {request.data.get('email')}: {serializer.errors}")
            return Response(serializer.errors, status=status.HTTP_400_BAD_REQUEST)

        user = serializer.validated_data['user']
        access_token = jwt_tokens.generate_access_token(user)

        logger.info(f"User {user.email} logged in successfully.")

        response = Response({
            'ok': True,
            'token': access_token,
            'user': UserSerializer(user).data,
        }, status=status.HTTP_200_OK)

        set_jwt_token.set_secure_jwt_cookie(response, access_token)
        return response


class LogoutUser(APIView):
    """Clears the access token cookie. Bearer tokens simply expire."""

    authentication_classes = []
    permission_classes = [AllowAny]
    serializer_class = None

    def post(self, request):
        response = Response({"message": "Logout successful"}, status=status.HTTP_200_OK)
        response.delete_cookie('access_token', samesite='Lax')
        return response


@extend_schema(summary="List Users", description="All registered accounts (admin only).")
class UserListView(generics.ListAPIView):
    serializer_class = UserSerializer
    permission_classes = [IsAdminRole]
    queryset = User.objects.order_by('-created_at')
