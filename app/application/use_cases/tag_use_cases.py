"""
Tag use cases for the application layer.
"""

from typing import List

from app.application.use_cases.base_use_case import AuthorizedUseCase
from app.application.dto.category_dto import CreateTagRequestDTO
from app.domain.models.base import DuplicateEntityError
from app.domain.models.tag import Tag
from app.domain.repositories.tag_repository import TagRepository


class TagUseCase(AuthorizedUseCase):
    entity_name = "Tag"
    entity_plural = "tags"

    def __init__(self, tag_repository: TagRepository):
        self.tag_repository = tag_repository


class CreateTagUseCase(TagUseCase):
    """Use case for creating a tag."""

    async def execute(self, user_id: int, request: CreateTagRequestDTO) -> Tag:
        existing = await self.tag_repository.find_by_name_and_user_id(request.name, user_id)
        if existing:
            raise DuplicateEntityError("Tag", "name", request.name)

        return await self.tag_repository.save(Tag(name=request.name, user_id=user_id))


class GetTagsByUserUseCase(TagUseCase):
    """Use case for listing the user's tags ordered by name."""

    async def execute(self, user_id: int) -> List[Tag]:
        return await self.tag_repository.find_by_user_id(user_id)


class GetTagByIdUseCase(TagUseCase):
    """Use case for reading one tag."""

    async def execute(self, user_id: int, tag_id: int) -> Tag:
        return await self._get_owned(self.tag_repository, tag_id, user_id, "view")
