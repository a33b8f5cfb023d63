"""
Category use cases for the application layer.
"""

from typing import List

from app.application.use_cases.base_use_case import AuthorizedUseCase
from app.application.dto.category_dto import CreateCategoryRequestDTO, UpdateCategoryRequestDTO
from app.domain.models.base import DuplicateEntityError
from app.domain.models.category import Category
from app.domain.repositories.category_repository import CategoryRepository


class CategoryUseCase(AuthorizedUseCase):
    entity_name = "Category"
    entity_plural = "categories"

    def __init__(self, category_repository: CategoryRepository):
        self.category_repository = category_repository


class CreateCategoryUseCase(CategoryUseCase):
    """Use case for creating a category."""

    async def execute(self, user_id: int, request: CreateCategoryRequestDTO) -> Category:
        existing = await self.category_repository.find_by_name_and_user_id(request.name, user_id)
        if existing:
            raise DuplicateEntityError("Category", "name", request.name)

        category = Category(name=request.name, user_id=user_id)
        return await self.category_repository.save(category)


class GetCategoriesByUserUseCase(CategoryUseCase):
    """Use case for listing the user's categories ordered by name."""

    async def execute(self, user_id: int) -> List[Category]:
        return await self.category_repository.find_by_user_id(user_id)


class GetCategoryByIdUseCase(CategoryUseCase):
    """Use case for reading one category."""

    async def execute(self, user_id: int, category_id: int) -> Category:
        return await self._get_owned(self.category_repository, category_id, user_id, "view")


class UpdateCategoryUseCase(CategoryUseCase):
    """Use case for renaming a category."""

    async def execute(self, user_id: int, category_id: int, request: UpdateCategoryRequestDTO) -> Category:
        category = await self._get_owned(self.category_repository, category_id, user_id, "update")

        existing = await self.category_repository.find_by_name_and_user_id(request.name, user_id)
        if existing and existing.id != category.id:
            raise DuplicateEntityError("Category", "name", request.name)

        category.rename(request.name)
        return await self.category_repository.update(category)


class DeleteCategoryUseCase(CategoryUseCase):
    """
    Use case for deleting a category.
    Tasks in the category are kept and lose their category.
    """

    async def execute(self, user_id: int, category_id: int) -> None:
        await self._get_owned(self.category_repository, category_id, user_id, "delete")
        await self.category_repository.delete(category_id)
