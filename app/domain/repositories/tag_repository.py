"""
Tag repository interface.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from app.domain.models.tag import Tag


class TagRepository(ABC):
    """Persistence contract for tags."""

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Persist a new tag. Raises DuplicateEntityError on a name clash."""
        pass

    @abstractmethod
    async def find_by_id(self, tag_id: int) -> Optional[Tag]:
        pass

    @abstractmethod
    async def find_by_ids(self, tag_ids: Sequence[int]) -> List[Tag]:
        """Tags matching the given ids; unknown ids are skipped."""
        pass

    @abstractmethod
    async def find_by_user_id(self, user_id: int) -> List[Tag]:
        """All tags of a user ordered by name."""
        pass

    @abstractmethod
    async def find_by_name_and_user_id(self, name: str, user_id: int) -> Optional[Tag]:
        pass
