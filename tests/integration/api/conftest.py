"""
Fixtures for API tests against a fresh in-memory application.
"""

import pytest
from fastapi.testclient import TestClient

from app.main import create_application
from api_helpers import login_headers


@pytest.fixture
def client(test_settings):
    app = create_application(test_settings)
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def auth_headers(client):
    return login_headers(client, "Alice")


@pytest.fixture
def other_headers(client):
    return login_headers(client, "Bob")
