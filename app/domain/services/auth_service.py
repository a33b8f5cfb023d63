"""
Authentication service ports.
Password hashing and token issuing are provided by infrastructure adapters.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict


class PasswordHasher(ABC):
    """
    Password hashing interface.
    """

    @abstractmethod
    def hash(self, password: str) -> str:
        """
        Hash a password using a secure hashing algorithm.
        """
        pass

    @abstractmethod
    def verify(self, password: str, hashed_password: str) -> bool:
        """
        Verify a password against its hash.
        """
        pass


class TokenService(ABC):
    """
    Access token interface.
    """

    @abstractmethod
    def issue_token(self, payload: Dict[str, Any]) -> str:
        """
        Generate a signed access token carrying the payload.
        The payload must contain the user id under "sub".
        """
        pass

    @abstractmethod
    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify a token and return its payload.
        Raises AuthenticationError if the token is invalid or expired.
        """
        pass
