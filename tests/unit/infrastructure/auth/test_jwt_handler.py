"""
Unit tests for JWT token handling.
"""

import pytest
from jose import jwt

from app.domain.models.base import AuthenticationError
from app.infrastructure.auth.jwt_handler import JWTHandler

SECRET = "unit-test-secret"


@pytest.fixture
def handler():
    return JWTHandler(secret_key=SECRET, algorithm="HS256", expire_minutes=60)


class TestJWTHandler:
    """Test cases for JWTHandler."""

    def test_round_trip(self, handler):
        token = handler.issue_token({"sub": 42, "email": "ada@example.com"})

        payload = handler.verify_token(token)

        assert payload["sub"] == "42"
        assert payload["email"] == "ada@example.com"
        assert payload["exp"] > payload["iat"]
        assert handler.get_user_id(token) == 42

    def test_bearer_prefix_accepted(self, handler):
        token = handler.issue_token({"sub": "7"})

        assert handler.get_user_id(f"Bearer {token}") == 7

    def test_sub_required(self, handler):
        with pytest.raises(ValueError):
            handler.issue_token({"email": "ada@example.com"})

    def test_wrong_secret(self, handler):
        token = JWTHandler(secret_key="other-secret", expire_minutes=60).issue_token({"sub": "1"})

        with pytest.raises(AuthenticationError):
            handler.verify_token(token)

    def test_expired_token(self):
        expired = JWTHandler(secret_key=SECRET, expire_minutes=-1).issue_token({"sub": "1"})

        with pytest.raises(AuthenticationError):
            JWTHandler(secret_key=SECRET).verify_token(expired)

    def test_garbage_token(self, handler):
        with pytest.raises(AuthenticationError):
            handler.verify_token("not.a.token")

    def test_token_without_exp(self, handler):
        token = jwt.encode({"sub": "1"}, SECRET, algorithm="HS256")

        with pytest.raises(AuthenticationError):
            handler.verify_token(token)

    def test_non_numeric_subject(self, handler):
        token = handler.issue_token({"sub": "abc"})

        with pytest.raises(AuthenticationError):
            handler.get_user_id(token)
