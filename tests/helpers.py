from utils.jwt_tokens import generate_access_token


def bearer(user):
    return f"Bearer {generate_access_token(user)}"
