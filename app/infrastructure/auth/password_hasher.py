"""
Password hashing with bcrypt.
"""

import hashlib

import bcrypt

from app.config import get_settings
from app.domain.services.auth_service import PasswordHasher


def _prehash(password: str) -> bytes:
    """SHA-256 digest of the password; keeps bcrypt under its 72-byte input limit."""
    return hashlib.sha256(password.encode("utf-8")).digest()


class BcryptPasswordHasher(PasswordHasher):
    """bcrypt over a SHA-256 pre-hash, so passwords of any length are supported."""

    def __init__(self, rounds: int = None):
        self.rounds = rounds or get_settings().bcrypt_rounds

    def hash(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(_prehash(password), salt).decode("utf-8")

    def verify(self, password: str, hashed_password: str) -> bool:
        if not hashed_password:
            return False
        try:
            return bcrypt.checkpw(_prehash(password), hashed_password.encode("utf-8"))
        except ValueError:
            # Malformed hash
            return False
