"""
Tag repository implementation using SQLAlchemy.
"""

from typing import Optional, List, Sequence

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.models.tag import Tag
from app.domain.repositories.tag_repository import TagRepository as TagRepositoryInterface
from app.domain.models.base import DuplicateEntityError
from app.infrastructure.db.models import TagModel
from app.infrastructure.mappers.tag_mapper import TagMapper


class SQLAlchemyTagRepository(TagRepositoryInterface):
    """SQLAlchemy implementation of tag repository."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.mapper = TagMapper()
        self.model = TagModel

    async def save(self, tag: Tag) -> Tag:
        model = self.mapper.domain_to_model(tag)
        self.session.add(model)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise DuplicateEntityError("Tag", "name", tag.name)

        tag.id = model.id
        return tag

    async def find_by_id(self, tag_id: int) -> Optional[Tag]:
        model = await self.session.get(TagModel, tag_id)
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    async def find_by_ids(self, tag_ids: Sequence[int]) -> List[Tag]:
        if not tag_ids:
            return []
        result = await self.session.execute(
            select(TagModel).where(TagModel.id.in_(set(tag_ids))).order_by(TagModel.name.asc())
        )
        return [self.mapper.model_to_domain(model) for model in result.scalars().all()]

    async def find_by_user_id(self, user_id: int) -> List[Tag]:
        result = await self.session.execute(
            select(TagModel)
            .where(TagModel.user_id == user_id)
            .order_by(TagModel.name.asc())
        )
        return [self.mapper.model_to_domain(model) for model in result.scalars().all()]

    async def find_by_name_and_user_id(self, name: str, user_id: int) -> Optional[Tag]:
        result = await self.session.execute(
            select(TagModel).where(
                TagModel.user_id == user_id,
                TagModel.name == name.strip(),
            )
        )
        model = result.scalar_one_or_none()
        if not model:
            return None
        return self.mapper.model_to_domain(model)
