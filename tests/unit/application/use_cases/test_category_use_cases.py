"""
Unit tests for category and tag use cases.
"""

import pytest

from app.application.dto.category_dto import (
    CreateCategoryRequestDTO,
    UpdateCategoryRequestDTO,
    CreateTagRequestDTO,
)
from app.application.use_cases.category_use_cases import (
    CreateCategoryUseCase,
    GetCategoriesByUserUseCase,
    GetCategoryByIdUseCase,
    UpdateCategoryUseCase,
    DeleteCategoryUseCase,
)
from app.application.use_cases.tag_use_cases import (
    CreateTagUseCase,
    GetTagsByUserUseCase,
    GetTagByIdUseCase,
)
from app.domain.models.base import AccessDeniedError, DuplicateEntityError, EntityNotFoundError
from app.domain.models.category import Category
from app.domain.models.tag import Tag
from app.domain.models.task import Task


class TestCategoryUseCases:
    """Test cases for category use cases."""

    @pytest.mark.asyncio
    async def test_create_category(self, category_repository):
        category = await CreateCategoryUseCase(category_repository).execute(
            1, CreateCategoryRequestDTO(name="  Work ")
        )

        assert category.id is not None
        assert category.name == "Work"
        assert category.user_id == 1

    @pytest.mark.asyncio
    async def test_duplicate_name_for_same_user(self, category_repository):
        use_case = CreateCategoryUseCase(category_repository)
        await use_case.execute(1, CreateCategoryRequestDTO(name="Work"))

        with pytest.raises(DuplicateEntityError):
            await use_case.execute(1, CreateCategoryRequestDTO(name="Work"))

    @pytest.mark.asyncio
    async def test_same_name_for_other_user(self, category_repository):
        """Test names are only unique per user."""
        use_case = CreateCategoryUseCase(category_repository)
        await use_case.execute(1, CreateCategoryRequestDTO(name="Work"))

        category = await use_case.execute(2, CreateCategoryRequestDTO(name="Work"))

        assert category.user_id == 2

    @pytest.mark.asyncio
    async def test_list_sorted_by_name(self, category_repository):
        for name in ["Zeta", "Alpha", "Mid"]:
            await category_repository.save(Category(name=name, user_id=1))
        await category_repository.save(Category(name="Other", user_id=2))

        categories = await GetCategoriesByUserUseCase(category_repository).execute(1)

        assert [c.name for c in categories] == ["Alpha", "Mid", "Zeta"]

    @pytest.mark.asyncio
    async def test_get_foreign_category(self, category_repository):
        category = await category_repository.save(Category(name="Theirs", user_id=2))

        with pytest.raises(AccessDeniedError) as exc_info:
            await GetCategoryByIdUseCase(category_repository).execute(1, category.id)

        assert exc_info.value.message == "You can only view your own categories"

    @pytest.mark.asyncio
    async def test_rename(self, category_repository):
        category = await category_repository.save(Category(name="Work", user_id=1))

        renamed = await UpdateCategoryUseCase(category_repository).execute(
            1, category.id, UpdateCategoryRequestDTO(name="Job")
        )

        assert renamed.name == "Job"

    @pytest.mark.asyncio
    async def test_rename_to_own_name(self, category_repository):
        category = await category_repository.save(Category(name="Work", user_id=1))

        renamed = await UpdateCategoryUseCase(category_repository).execute(
            1, category.id, UpdateCategoryRequestDTO(name="Work")
        )

        assert renamed.name == "Work"

    @pytest.mark.asyncio
    async def test_rename_conflict(self, category_repository):
        await category_repository.save(Category(name="Home", user_id=1))
        category = await category_repository.save(Category(name="Work", user_id=1))

        with pytest.raises(DuplicateEntityError):
            await UpdateCategoryUseCase(category_repository).execute(
                1, category.id, UpdateCategoryRequestDTO(name="Home")
            )

    @pytest.mark.asyncio
    async def test_delete_detaches_tasks(self, category_repository, task_repository):
        category = await category_repository.save(Category(name="Work", user_id=1))
        task = await task_repository.save(Task(title="Task", user_id=1, category_id=category.id))

        await DeleteCategoryUseCase(category_repository).execute(1, category.id)

        assert await category_repository.find_by_id(category.id) is None
        assert (await task_repository.find_by_id(task.id)).category_id is None

    @pytest.mark.asyncio
    async def test_delete_missing(self, category_repository):
        with pytest.raises(EntityNotFoundError):
            await DeleteCategoryUseCase(category_repository).execute(1, 123)

    @pytest.mark.asyncio
    async def test_delete_foreign(self, category_repository):
        category = await category_repository.save(Category(name="Theirs", user_id=2))

        with pytest.raises(AccessDeniedError):
            await DeleteCategoryUseCase(category_repository).execute(1, category.id)


class TestTagUseCases:
    """Test cases for tag use cases."""

    @pytest.mark.asyncio
    async def test_create_tag(self, tag_repository):
        tag = await CreateTagUseCase(tag_repository).execute(1, CreateTagRequestDTO(name="urgent"))

        assert tag.id is not None
        assert tag.name == "urgent"

    @pytest.mark.asyncio
    async def test_duplicate_tag(self, tag_repository):
        use_case = CreateTagUseCase(tag_repository)
        await use_case.execute(1, CreateTagRequestDTO(name="urgent"))

        with pytest.raises(DuplicateEntityError):
            await use_case.execute(1, CreateTagRequestDTO(name=" urgent "))

    @pytest.mark.asyncio
    async def test_list_own_tags(self, tag_repository):
        await tag_repository.save(Tag(name="b", user_id=1))
        await tag_repository.save(Tag(name="a", user_id=1))
        await tag_repository.save(Tag(name="c", user_id=2))

        tags = await GetTagsByUserUseCase(tag_repository).execute(1)

        assert [t.name for t in tags] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_get_tag(self, tag_repository):
        tag = await tag_repository.save(Tag(name="a", user_id=1))

        assert (await GetTagByIdUseCase(tag_repository).execute(1, tag.id)).name == "a"

        with pytest.raises(AccessDeniedError):
            await GetTagByIdUseCase(tag_repository).execute(2, tag.id)
        with pytest.raises(EntityNotFoundError):
            await GetTagByIdUseCase(tag_repository).execute(1, 999)
