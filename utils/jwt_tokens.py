from rest_framework_simplejwt.tokens import AccessToken


def generate_access_token(user):
    """Signed access token carrying the ``id``, ``role`` and ``name`` claims."""
    token = AccessToken.for_user(user)
    token["role"] = user.role
    token["name"] = user.display_name
    return str(token)
