from decimal import Decimal

import pytest
from django.core.cache import cache
from rest_framework.test import APIClient

from product_management.models import Product
from users.models import User
from tests.helpers import bearer


@pytest.fixture(autouse=True)
def clear_cache():
    cache.clear()
    yield
    cache.clear()


@pytest.fixture(autouse=True)
def fallback_file(tmp_path, settings):
    path = tmp_path / "orders_fallback.json"
    settings.ORDERS_FALLBACK_FILE = str(path)
    return path


@pytest.fixture
def api_client():
    return APIClient()


@pytest.fixture
def customer(db):
    return User.objects.create_user(
        email="jane@example.com",
        password="password123",
        first_name="Jane",
        last_name="Doe",
    )


@pytest.fixture
def admin_user(db):
    return User.objects.create_superuser(
        email="admin@example.com",
        password="secret12345",
        first_name="Admin",
    )


@pytest.fixture
def customer_client(customer):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=bearer(customer))
    return client


@pytest.fixture
def admin_client(admin_user):
    client = APIClient()
    client.credentials(HTTP_AUTHORIZATION=bearer(admin_user))
    return client


@pytest.fixture
def product(db):
    return Product.objects.create(
        pk=5,
        name="PlayStation 5",
        description="Console with one controller",
        category="Consoles",
        sub_category="PS5",
        price=Decimal("499.99"),
        original_price=Decimal("549.99"),
        discount=9,
        image_url="/images/ps5.png",
    )
