from datetime import timedelta
from decimal import Decimal
from unittest import mock

import pytest
from django.db import OperationalError
from rest_framework_simplejwt.tokens import AccessToken

from review_rating.models import Feedback
from review_rating.services import round_rating

pytestmark = pytest.mark.django_db


def reviews_url(product_id):
    return f"/api/products/{product_id}/reviews"


class TestSubmitReview:
    def test_first_review_sets_aggregate(self, customer_client, product):
        response = customer_client.post(reviews_url(5), {"rating": 4}, format="json")

        assert response.status_code == 201
        assert response.data["ok"] is True
        assert response.data["avgRating"] == 4
        assert response.data["reviewCount"] == 1
        assert response.data["review"]["rating"] == 4
        assert response.data["review"]["isApproved"] is True

        product.refresh_from_db()
        assert product.rating == Decimal("4.0")
        assert product.reviews == 1

    def test_average_covers_approved_feedback_only(self, customer_client, customer, product):
        Feedback.objects.create(product=product, user=customer, rating=5)
        Feedback.objects.create(product=product, user=customer, rating=1, is_approved=False)

        response = customer_client.post(reviews_url(product.pk), {"rating": 3, "text": "Decent"}, format="json")

        assert response.data["avgRating"] == 4
        assert response.data["reviewCount"] == 2

    def test_average_is_rounded_to_one_decimal(self, customer_client, customer, product):
        Feedback.objects.create(product=product, user=customer, rating=5)
        Feedback.objects.create(product=product, user=customer, rating=4)

        response = customer_client.post(reviews_url(product.pk), {"rating": 4}, format="json")

        assert response.data["avgRating"] == 4.3
        product.refresh_from_db()
        assert product.rating == Decimal("4.3")

    def test_review_is_tagged_with_caller(self, customer_client, customer, product):
        response = customer_client.post(reviews_url(product.pk), {"rating": 5, "text": "Great"}, format="json")

        feedback = Feedback.objects.get(pk=response.data["review"]["id"])
        assert feedback.user == customer
        assert feedback.comment == "Great"
        assert response.data["review"]["userName"] == "Jane Doe"

    def test_repeated_reviews_are_all_kept(self, customer_client, product):
        customer_client.post(reviews_url(product.pk), {"rating": 5}, format="json")
        response = customer_client.post(reviews_url(product.pk), {"rating": 3}, format="json")

        assert response.status_code == 201
        assert Feedback.objects.filter(product=product).count() == 2
        assert response.data["reviewCount"] == 2
        assert response.data["avgRating"] == 4

    def test_editing_review_refreshes_aggregate(self, customer_client, product):
        customer_client.post(reviews_url(product.pk), {"rating": 5}, format="json")
        response = customer_client.post(reviews_url(product.pk), {"rating": 1}, format="json")

        feedback = Feedback.objects.get(pk=response.data["review"]["id"])
        feedback.is_approved = False
        feedback.save()

        product.refresh_from_db()
        assert product.rating == Decimal("5.0")
        assert product.reviews == 1

        feedback.is_approved = True
        feedback.rating = 2
        feedback.save()

        product.refresh_from_db()
        assert product.rating == Decimal("3.5")
        assert product.reviews == 2

    def test_recompute_failure_keeps_review_and_reports_stored_aggregate(self, customer_client, product):
        product.rating = Decimal("3.5")
        product.reviews = 2
        product.save()

        with mock.patch("review_rating.services.Feedback.objects.filter", side_effect=OperationalError("down")):
            response = customer_client.post(reviews_url(product.pk), {"rating": 5}, format="json")

        assert response.status_code == 201
        assert response.data["avgRating"] == 3.5
        assert response.data["reviewCount"] == 2
        assert Feedback.objects.filter(product=product).count() == 1


class TestReviewValidation:
    def test_missing_rating(self, customer_client, product):
        response = customer_client.post(reviews_url(product.pk), {"text": "no stars"}, format="json")
        assert response.status_code == 400

    @pytest.mark.parametrize("rating", [0, 6, -1])
    def test_rating_out_of_range(self, customer_client, product, rating):
        response = customer_client.post(reviews_url(product.pk), {"rating": rating}, format="json")
        assert response.status_code == 400
        assert Feedback.objects.count() == 0

    def test_non_numeric_product_id(self, customer_client):
        response = customer_client.post(reviews_url("abc"), {"rating": 4}, format="json")
        assert response.status_code == 400

    def test_unknown_product(self, customer_client, product):
        response = customer_client.post(reviews_url(404), {"rating": 4}, format="json")
        assert response.status_code == 404


class TestReviewAuthentication:
    def test_without_bearer(self, api_client, product):
        response = api_client.post(reviews_url(product.pk), {"rating": 4}, format="json")

        assert response.status_code == 401
        assert Feedback.objects.count() == 0

    def test_with_garbage_token(self, api_client, product):
        api_client.credentials(HTTP_AUTHORIZATION="Bearer garbage")

        response = api_client.post(reviews_url(product.pk), {"rating": 4}, format="json")

        assert response.status_code == 401
        assert response.data["code"] == "invalid_token"

    def test_with_expired_token(self, api_client, customer, product):
        token = AccessToken.for_user(customer)
        token.set_exp(lifetime=-timedelta(minutes=1))
        api_client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

        response = api_client.post(reviews_url(product.pk), {"rating": 4}, format="json")

        assert response.status_code == 401

    def test_token_of_deleted_user(self, customer_client, customer, product):
        customer.delete()

        response = customer_client.post(reviews_url(product.pk), {"rating": 4}, format="json")

        assert response.status_code == 401

    def test_cookie_token_is_accepted(self, api_client, customer, product):
        login = api_client.post("/api/login", {"email": "jane@example.com", "password": "password123"}, format="json")
        assert "access_token" in login.cookies

        response = api_client.post(reviews_url(product.pk), {"rating": 4}, format="json")

        assert response.status_code == 201


class TestListReviews:
    def test_public_list_shows_approved_newest_first(self, api_client, customer, product):
        Feedback.objects.create(product=product, user=customer, rating=5, comment="old")
        Feedback.objects.create(product=product, user=customer, rating=2, comment="hidden", is_approved=False)
        Feedback.objects.create(product=product, user=customer, rating=4, comment="new")

        response = api_client.get(reviews_url(product.pk))

        assert response.status_code == 200
        assert response.data["count"] == 2
        assert [r["comment"] for r in response.data["results"]] == ["new", "old"]


class TestRoundRating:
    def test_none_is_zero(self):
        assert round_rating(None) == Decimal("0.0")

    def test_half_rounds_up(self):
        assert round_rating(4.25) == Decimal("4.3")
