"""
User repository interface.
Defines the contract for user data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.models.user import User


class UserRepository(ABC):
    """
    Repository interface for users.
    """

    @abstractmethod
    async def save(self, user: User) -> User:
        """
        Persist a new user and return it with its assigned id.
        Raises DuplicateEntityError when the email is already taken.
        """
        pass

    @abstractmethod
    async def update(self, user: User) -> User:
        """
        Update an existing user.
        """
        pass

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """
        Find a user by their ID.
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """
        Find a user by their email address.
        """
        pass
