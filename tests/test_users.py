from types import SimpleNamespace

import pytest
from django.core import mail
from django.core.management import call_command
from django.core.management.base import CommandError
from rest_framework_simplejwt.tokens import AccessToken

from users.models import User
from users.permissions import HasRole, IsAdminRole
from utils.jwt_tokens import generate_access_token

pytestmark = pytest.mark.django_db


class TestRegister:
    def test_register_creates_unverified_customer_and_sends_link(self, api_client):
        response = api_client.post(
            "/api/register",
            {"name": "Salam", "surname": "Aleykum", "email": "Salam+Test@Example.com", "password": "password123"},
            format="json",
        )

        assert response.status_code == 201
        assert response.data["ok"] is True
        assert "emailVerifyToken" not in response.data["user"]

        user = User.objects.get(email="salam+test@example.com")
        assert user.role == User.Role.CUSTOMER
        assert user.is_verified is False
        assert user.email_verify_token
        assert len(mail.outbox) == 1
        assert user.email_verify_token in mail.outbox[0].body

    def test_verify_email_link(self, api_client):
        api_client.post(
            "/api/register",
            {"name": "Verify", "email": "verify@example.com", "password": "password123"},
            format="json",
        )
        token = User.objects.get(email="verify@example.com").email_verify_token

        response = api_client.get(f"/api/verify-email/{token}")

        assert response.status_code == 200
        user = User.objects.get(email="verify@example.com")
        assert user.is_verified is True
        assert user.email_verify_token is None

        assert api_client.get(f"/api/verify-email/{token}").status_code == 400

    def test_duplicate_email_is_rejected(self, api_client, customer):
        response = api_client.post(
            "/api/register",
            {"name": "Jane", "email": "JANE@example.com", "password": "password123"},
            format="json",
        )
        assert response.status_code == 400

    def test_short_password_is_rejected(self, api_client):
        response = api_client.post(
            "/api/register", {"name": "X", "email": "x@example.com", "password": "short"}, format="json"
        )
        assert response.status_code == 400


class TestLogin:
    def test_login_returns_token_with_identity_claims(self, api_client, customer):
        response = api_client.post("/api/login", {"email": "jane@example.com", "password": "password123"}, format="json")

        assert response.status_code == 200
        assert response.data["ok"] is True
        assert response.data["user"]["email"] == "jane@example.com"

        token = AccessToken(response.data["token"])
        assert token["id"] == customer.pk
        assert token["role"] == "customer"
        assert token["name"] == "Jane Doe"
        assert response.cookies["access_token"]["httponly"]

    def test_wrong_password(self, api_client, customer):
        response = api_client.post("/api/login", {"email": "jane@example.com", "password": "wrong-pass"}, format="json")
        assert response.status_code == 400
        assert "token" not in response.data

    def test_logout_clears_cookie(self, api_client):
        response = api_client.post("/api/logout")
        assert response.status_code == 200
        assert response.cookies["access_token"].value == ""


class TestUserList:
    def test_admin_can_list_users(self, admin_client, customer):
        response = admin_client.get("/api/users")

        assert response.status_code == 200
        assert {row["email"] for row in response.data} == {"admin@example.com", "jane@example.com"}

    def test_customer_is_forbidden(self, customer_client):
        assert customer_client.get("/api/users").status_code == 403

    def test_anonymous_is_unauthorized(self, api_client):
        assert api_client.get("/api/users").status_code == 401


class TestHasRole:
    def test_empty_allowed_roles_admit_any_authenticated_user(self, customer):
        request = SimpleNamespace(user=customer)
        assert HasRole().has_permission(request, SimpleNamespace(allowed_roles=())) is True

    def test_role_outside_allowed_set_is_refused(self, customer):
        request = SimpleNamespace(user=customer)
        assert HasRole().has_permission(request, SimpleNamespace(allowed_roles=("Admin",))) is False

    def test_role_match_ignores_case(self, admin_user):
        request = SimpleNamespace(user=admin_user)
        assert HasRole().has_permission(request, SimpleNamespace(allowed_roles=("ADMIN",))) is True

    def test_admin_role_permission(self, admin_user, customer):
        view = SimpleNamespace()
        assert IsAdminRole().has_permission(SimpleNamespace(user=admin_user), view) is True
        assert IsAdminRole().has_permission(SimpleNamespace(user=customer), view) is False


class TestCreateAdminCommand:
    def test_creates_admin_once(self, settings):
        settings.ADMIN_NAME = "Owner"
        settings.ADMIN_EMAIL = "owner@example.com"
        settings.ADMIN_PASSWORD = "secret12345"

        call_command("create_admin")
        call_command("create_admin")

        admins = User.objects.filter(email="owner@example.com")
        assert admins.count() == 1
        admin = admins.get()
        assert admin.role == User.Role.ADMIN
        assert admin.first_name == "Owner"
        assert admin.check_password("secret12345")

    def test_requires_credentials(self, settings):
        settings.ADMIN_EMAIL = None
        settings.ADMIN_PASSWORD = None

        with pytest.raises(CommandError):
            call_command("create_admin")

    def test_admin_token_carries_admin_role(self, admin_user):
        token = AccessToken(generate_access_token(admin_user))
        assert token["role"] == "admin"
