import pytest
from rest_framework.test import APIClient

from review_rating.models import Feedback
from users.models import User
from tests.helpers import bearer

pytestmark = pytest.mark.django_db


@pytest.fixture
def feedback(customer, product):
    return Feedback.objects.create(product=product, user=customer, rating=2, comment="Arrived late")


def reply_url(feedback_id):
    return f"/api/admin/feedbacks/{feedback_id}/reply"


class TestAdminReply:
    def test_reply_is_stored(self, admin_client, feedback):
        response = admin_client.post(reply_url(feedback.pk), {"reply": "Sorry about that!"}, format="json")

        assert response.status_code == 200
        assert response.data["ok"] is True
        assert response.data["reply"]["text"] == "Sorry about that!"
        assert response.data["reply"]["by"] == "Admin"
        assert response.data["reply"]["at"] is not None

        feedback.refresh_from_db()
        assert feedback.admin_reply == "Sorry about that!"
        assert feedback.admin_reply_by == "Admin"
        assert feedback.admin_reply_at is not None

    def test_new_reply_replaces_previous(self, admin_client, feedback):
        admin_client.post(reply_url(feedback.pk), {"reply": "First"}, format="json")
        admin_client.post(reply_url(feedback.pk), {"reply": "Second"}, format="json")

        feedback.refresh_from_db()
        assert feedback.admin_reply == "Second"

    def test_whitespace_reply_is_rejected(self, admin_client, feedback):
        response = admin_client.post(reply_url(feedback.pk), {"reply": "   "}, format="json")

        assert response.status_code == 400
        feedback.refresh_from_db()
        assert feedback.admin_reply is None

    def test_missing_reply_is_rejected(self, admin_client, feedback):
        assert admin_client.post(reply_url(feedback.pk), {}, format="json").status_code == 400

    def test_non_numeric_id_is_rejected(self, admin_client):
        assert admin_client.post(reply_url("abc"), {"reply": "Hi"}, format="json").status_code == 400

    def test_unknown_feedback(self, admin_client):
        assert admin_client.post(reply_url(12345), {"reply": "Hi"}, format="json").status_code == 404

    def test_without_bearer(self, api_client, feedback):
        assert api_client.post(reply_url(feedback.pk), {"reply": "Hi"}, format="json").status_code == 401

    def test_customer_is_forbidden(self, customer_client, feedback):
        response = customer_client.post(reply_url(feedback.pk), {"reply": "Hi"}, format="json")

        assert response.status_code == 403
        feedback.refresh_from_db()
        assert feedback.admin_reply is None

    def test_role_comparison_ignores_case(self, feedback):
        moderator = User.objects.create_user(
            email="mod@example.com", password="password123", first_name="Mod", role="ADMIN"
        )
        client = APIClient()
        client.credentials(HTTP_AUTHORIZATION=bearer(moderator))

        response = client.post(reply_url(feedback.pk), {"reply": "Hi"}, format="json")

        assert response.status_code == 200
        assert response.data["reply"]["by"] == "Mod"


class TestAdminFeedbackList:
    def test_lists_feedback_with_names(self, admin_client, feedback):
        response = admin_client.get("/api/admin/feedbacks")

        assert response.status_code == 200
        row = response.data[0]
        assert row["productName"] == "PlayStation 5"
        assert row["userName"] == "Jane Doe"
        assert row["rating"] == 2

    def test_customer_is_forbidden(self, customer_client):
        assert customer_client.get("/api/admin/feedbacks").status_code == 403


class TestAdminFeedbackDelete:
    def test_delete_recomputes_product_aggregate(self, admin_client, customer_client, product):
        customer_client.post(f"/api/products/{product.pk}/reviews", {"rating": 5}, format="json")
        second = customer_client.post(f"/api/products/{product.pk}/reviews", {"rating": 1}, format="json")

        response = admin_client.delete(f"/api/admin/feedbacks/{second.data['review']['id']}")

        assert response.status_code == 204
        product.refresh_from_db()
        assert product.reviews == 1
        assert float(product.rating) == 5.0

    def test_delete_unknown(self, admin_client):
        assert admin_client.delete("/api/admin/feedbacks/999").status_code == 404
