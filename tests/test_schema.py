import pytest

pytestmark = pytest.mark.django_db


def test_schema_declares_bearer_scheme(api_client):
    response = api_client.get("/api/schema/", HTTP_ACCEPT="application/vnd.oai.openapi+json")

    assert response.status_code == 200
    assert "BearerAuth" in response.content.decode()
