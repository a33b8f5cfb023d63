"""
Category repository interface.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from app.domain.models.category import Category


class CategoryRepository(ABC):
    """Persistence contract for categories."""

    @abstractmethod
    async def save(self, category: Category) -> Category:
        """Persist a new category. Raises DuplicateEntityError on a name clash."""
        pass

    @abstractmethod
    async def update(self, category: Category) -> Category:
        """Persist changes to an existing category."""
        pass

    @abstractmethod
    async def delete(self, category_id: int) -> bool:
        """
        Delete a category and detach it from every task that referenced it.
        Returns False when nothing was deleted.
        """
        pass

    @abstractmethod
    async def find_by_id(self, category_id: int) -> Optional[Category]:
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: int) -> List[Category]:
        """All categories of a user ordered by name."""
        pass

    @abstractmethod
    async def find_by_name_and_user_id(self, name: str, user_id: int) -> Optional[Category]:
        pass
