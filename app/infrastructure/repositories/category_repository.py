"""
Category repository implementation using SQLAlchemy.
"""

from typing import Optional, List

from sqlalchemy import select, update, delete
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.models.category import Category
from app.domain.repositories.category_repository import CategoryRepository as CategoryRepositoryInterface
from app.domain.models.base import EntityNotFoundError, DuplicateEntityError
from app.infrastructure.db.models import CategoryModel, TaskModel
from app.infrastructure.mappers.category_mapper import CategoryMapper


class SQLAlchemyCategoryRepository(CategoryRepositoryInterface):
    """SQLAlchemy implementation of category repository."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.mapper = CategoryMapper()
        self.model = CategoryModel

    async def save(self, category: Category) -> Category:
        model = self.mapper.domain_to_model(category)
        self.session.add(model)
        await self._commit(category.name)

        category.id = model.id
        return category

    async def update(self, category: Category) -> Category:
        model = await self.session.get(CategoryModel, category.id)
        if not model:
            raise EntityNotFoundError("Category", category.id)

        model.name = category.name
        model.updated_at = category.updated_at
        await self._commit(category.name)
        return self.mapper.model_to_domain(model)

    async def delete(self, category_id: int) -> bool:
        """Detach the category from its tasks, then remove it, in one transaction."""
        await self.session.execute(
            update(TaskModel)
            .where(TaskModel.category_id == category_id)
            .values(category_id=None)
        )
        result = await self.session.execute(
            delete(CategoryModel).where(CategoryModel.id == category_id)
        )
        await self.session.commit()
        return result.rowcount > 0

    async def find_by_id(self, category_id: int) -> Optional[Category]:
        model = await self.session.get(CategoryModel, category_id)
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    async def find_by_user_id(self, user_id: int) -> List[Category]:
        result = await self.session.execute(
            select(CategoryModel)
            .where(CategoryModel.user_id == user_id)
            .order_by(CategoryModel.name.asc())
        )
        return [self.mapper.model_to_domain(model) for model in result.scalars().all()]

    async def find_by_name_and_user_id(self, name: str, user_id: int) -> Optional[Category]:
        result = await self.session.execute(
            select(CategoryModel).where(
                CategoryModel.user_id == user_id,
                CategoryModel.name == name.strip(),
            )
        )
        model = result.scalar_one_or_none()
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    async def _commit(self, name: str) -> None:
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise DuplicateEntityError("Category", "name", name)
