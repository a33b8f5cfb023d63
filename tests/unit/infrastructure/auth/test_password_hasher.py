"""
Unit tests for bcrypt password hashing.
"""

import pytest

from app.infrastructure.auth.password_hasher import BcryptPasswordHasher


@pytest.fixture
def hasher():
    return BcryptPasswordHasher(rounds=4)


class TestBcryptPasswordHasher:
    """Test cases for BcryptPasswordHasher."""

    def test_hash_and_verify(self, hasher):
        hashed = hasher.hash("secret123")

        assert hashed != "secret123"
        assert hashed.startswith("$2")
        assert hasher.verify("secret123", hashed)
        assert not hasher.verify("secret124", hashed)

    def test_salted(self, hasher):
        assert hasher.hash("secret123") != hasher.hash("secret123")

    def test_long_password(self, hasher):
        """Test passwords longer than 72 bytes are not truncated."""
        password = "a" * 100
        hashed = hasher.hash(password)

        assert hasher.verify(password, hashed)
        assert not hasher.verify("a" * 99 + "b", hashed)

    def test_malformed_hash(self, hasher):
        assert not hasher.verify("secret123", "not-a-bcrypt-hash")
        assert not hasher.verify("secret123", "")
