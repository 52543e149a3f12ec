"""Integration tests for the access gate middleware."""

import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration


class TestAccessGate:
    def test_health_is_exempt(self, test_client: TestClient):
        response = test_client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"

    def test_api_is_exempt(self, test_client: TestClient, auth_prefix):
        response = test_client.get(f"{auth_prefix}/session")

        assert response.status_code == 200

    def test_protected_page_redirects_to_login(self, test_client: TestClient):
        response = test_client.get("/dashboard")

        assert response.status_code == 307
        assert response.headers["location"] == "/login?callbackUrl=/dashboard"

    def test_query_is_kept_in_callback(self, test_client: TestClient):
        response = test_client.get("/posts/edit?id=3")

        assert response.headers["location"] == "/login?callbackUrl=/posts/edit%3Fid%3D3"

    def test_login_page_is_open_without_session(self, test_client: TestClient):
        response = test_client.get("/login")

        # Passed through; no page is mounted in the API
        assert response.status_code == 404

    def test_signed_in_user_passes(self, logged_in_client: TestClient):
        response = logged_in_client.get("/dashboard")

        assert response.status_code == 404

    def test_signed_in_user_is_sent_away_from_login(
        self, logged_in_client: TestClient
    ):
        response = logged_in_client.get("/login")

        assert response.status_code == 307
        assert response.headers["location"] == "/"

    def test_signed_in_user_follows_safe_callback(self, logged_in_client: TestClient):
        response = logged_in_client.get("/signup?callbackUrl=/posts")

        assert response.headers["location"] == "/posts"
