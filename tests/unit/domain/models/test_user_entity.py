"""
Unit tests for User domain model.
"""

import pytest

from app.domain.models.base import Email, ValidationError
from app.domain.models.user import User


class TestUser:
    """Test cases for User domain model."""

    def test_create_user(self):
        user = User(name="Ada Lovelace", email="ada@example.com", password_hash="hashed")

        assert user.name == "Ada Lovelace"
        assert user.email == "ada@example.com"
        assert user.id is None

    def test_email_normalized(self):
        """Test email is trimmed and lower-cased."""
        user = User(name="Ada", email="  Ada@Example.COM ", password_hash="hashed")

        assert user.email == "ada@example.com"

    def test_invalid_email_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            User(name="Ada", email="not-an-email", password_hash="hashed")

        assert exc_info.value.field == "email"

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError) as exc_info:
            User(name="  ", email="ada@example.com", password_hash="hashed")

        assert exc_info.value.field == "name"

    def test_password_hash_required(self):
        with pytest.raises(ValidationError):
            User(name="Ada", email="ada@example.com", password_hash="")

    def test_update_profile(self):
        user = User(name="Ada", email="ada@example.com", password_hash="hashed")

        user.update_profile("  Countess  ")

        assert user.name == "Countess"

    def test_update_profile_too_long(self):
        user = User(name="Ada", email="ada@example.com", password_hash="hashed")

        with pytest.raises(ValidationError):
            user.update_profile("x" * 101)


class TestEmail:
    """Test cases for Email value object."""

    def test_empty_email(self):
        with pytest.raises(ValidationError):
            Email("")

    def test_email_too_long(self):
        with pytest.raises(ValidationError):
            Email("a" * 250 + "@example.com")

    def test_email_is_immutable_value(self):
        assert Email("a@example.com") == Email("a@example.com")
        assert str(Email.normalized(" A@Example.com")) == "a@example.com"
