"""
API tests with rate limiting switched on.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import create_application
from app.infrastructure.rate_limiting import RateLimit, RateLimiter, limits_for_environment
from api_helpers import PASSWORD, login_headers, register


@pytest.fixture
def limited_app(test_settings):
    return create_application(test_settings.model_copy(update={"rate_limit_enabled": True}))


@pytest.fixture
def limited_client(limited_app):
    with TestClient(limited_app) as client:
        yield client


class TestRateLimits:
    """Test cases for the request rate limits."""

    def test_fourth_registration_is_rejected(self, limited_client):
        statuses = [register(limited_client).status_code for _ in range(4)]

        assert statuses == [201, 201, 201, 429]
        response = register(limited_client)
        assert response.status_code == 429
        assert response.json()["status"] == "error"
        assert "Retry-After" in response.headers

    def test_disabled_by_settings(self, client):
        statuses = [register(client).status_code for _ in range(5)]

        assert statuses == [201] * 5


class TestLoginRateLimit:
    """Only failed logins count against the authentication limit."""

    def test_successful_logins_are_not_counted(self, limited_client):
        email = register(limited_client).json()["email"]

        statuses = [
            limited_client.post("/api/auth/login", json={"email": email, "password": PASSWORD}).status_code
            for _ in range(8)
        ]

        assert statuses == [200] * 8

    def test_failed_logins_are_limited(self, limited_client):
        email = register(limited_client).json()["email"]

        statuses = [
            limited_client.post("/api/auth/login", json={"email": email, "password": "wrong-password"}).status_code
            for _ in range(6)
        ]

        assert statuses == [401] * 5 + [429]
        response = limited_client.post("/api/auth/login", json={"email": email, "password": PASSWORD})
        assert response.status_code == 429


class TestListAndGeneralRateLimits:
    """Test cases for the listing, search and app-wide limits."""

    def test_plain_listing_is_not_search_limited(self, limited_client):
        headers = login_headers(limited_client)

        statuses = {limited_client.get("/api/tasks", headers=headers).status_code for _ in range(60)}

        assert statuses == {200}

    def test_search_requests_are_limited(self, limited_client):
        headers = login_headers(limited_client)

        statuses = [
            limited_client.get("/api/tasks", params={"search": "doc"}, headers=headers).status_code
            for _ in range(51)
        ]

        assert statuses[:50] == [200] * 50
        assert statuses[50] == 429
        assert limited_client.get("/api/tasks", headers=headers).status_code == 200

    def test_general_limit_applies_to_every_route(self, limited_app):
        limits = limits_for_environment("testing")
        limits["general"] = RateLimit(requests=3, window=60)
        limited_app.state.rate_limiter = RateLimiter(limits=limits)

        with TestClient(limited_app) as client:
            statuses = [client.get("/api/health").status_code for _ in range(3)]
            response = client.get("/api/tags")

        assert statuses == [200, 200, 200]
        assert response.status_code == 429
        assert response.json()["message"] == "Too many requests from this IP, please try again in 15 minutes."
