from datetime import datetime, timezone as dt_timezone
from decimal import Decimal
from unittest import mock

import pytest
from django.db import OperationalError
from django.db.backends.base.base import BaseDatabaseWrapper

from dashboard.services import AdminStats, month_starts
from orders.models import Order
from review_rating.models import Feedback

pytestmark = pytest.mark.django_db


def make_order(total, **extra):
    fields = dict(
        customer_name="Jane", surname="Doe", phone="+15550100", city="Baku",
        address="1 Main St", payment_method="card", delivery_method="courier",
        subtotal=Decimal(total), discount=Decimal("0"), total=Decimal(total),
    )
    fields.update(extra)
    return Order.objects.create(**fields)


def test_month_starts_cross_year_boundary():
    now = datetime(2024, 2, 17, 13, 45, tzinfo=dt_timezone.utc)

    starts = month_starts(now, 4)

    assert [(s.year, s.month) for s in starts] == [(2023, 11), (2023, 12), (2024, 1), (2024, 2)]
    assert all(s.day == 1 and s.hour == 0 for s in starts)


class TestAdminStats:
    def test_collect_totals_and_current_month(self, product, customer):
        make_order("100.50")
        make_order("20.00")
        Feedback.objects.create(product=product, user=customer, rating=5, comment="Great")
        Feedback.objects.create(product=product, user=customer, rating=1, comment="Hidden", is_approved=False)

        stats = AdminStats.collect()

        assert stats["totalProducts"] == 1
        assert stats["totalReviews"] == 1
        assert stats["totalUsers"] == 1
        assert stats["totalOrders"] == 2
        assert stats["revenue"] == pytest.approx(120.5)
        assert len(stats["monthly"]) == AdminStats.MONTHS
        assert stats["monthly"][-1]["sales"] == pytest.approx(120.5)
        assert stats["monthly"][-1]["orders"] == 2
        assert all(month["orders"] == 0 for month in stats["monthly"][:-1])

    def test_endpoint_requires_admin(self, customer_client, api_client):
        assert customer_client.get("/api/admin/stats").status_code == 403
        assert api_client.get("/api/admin/stats").status_code == 401

    def test_cached_stats_drop_when_orders_change(self, admin_client):
        first = admin_client.get("/api/admin/stats")
        assert first.status_code == 200
        assert first.data["totalOrders"] == 0

        make_order("10.00")

        second = admin_client.get("/api/admin/stats")
        assert second.data["totalOrders"] == 1

    def test_stats_are_served_from_cache(self, admin_client):
        admin_client.get("/api/admin/stats")

        with mock.patch("dashboard.dsh_cache.AdminStats.collect") as collect:
            response = admin_client.get("/api/admin/stats")

        assert response.status_code == 200
        collect.assert_not_called()


class TestHealth:
    def test_health_ok(self, api_client):
        response = api_client.get("/api/health")

        assert response.status_code == 200
        assert response.data == {"ok": True, "result": [{"test": 1}]}

    def test_health_reports_database_failure(self, api_client):
        with mock.patch.object(BaseDatabaseWrapper, "cursor", side_effect=OperationalError("db down")):
            response = api_client.get("/api/health")

        assert response.status_code == 503
        assert response.data["ok"] is False
