from drf_spectacular.extensions import OpenApiAuthenticationExtension


class BearerAuthenticationScheme(OpenApiAuthenticationExtension):
    """Documents both the strict and the optional bearer authenticators as one scheme."""

    target_class = 'users.authentication.JWTAuthentication'
    match_subclasses = True
    name = 'BearerAuth'

    def get_security_definition(self, auto_schema):
        return {
            'type': 'http',
            'scheme': 'bearer',
            'bearerFormat': 'JWT',
            'description': 'Access token from /api/login. The access_token cookie is accepted as well.',
        }
