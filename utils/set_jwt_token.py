from django.conf import settings


def set_secure_jwt_cookie(response, access_token):
    """
    Securely stores the JWT access token in an HTTP-only cookie.
    """
    response.set_cookie(
        key='access_token',
        value=access_token,
        httponly=True,
        secure=not settings.DEBUG,
        samesite='Lax',
        max_age=settings.SIMPLE_JWT['ACCESS_TOKEN_LIFETIME'].total_seconds()
    )
