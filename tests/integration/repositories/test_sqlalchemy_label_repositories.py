"""
Integration tests for the user, category and tag repositories.
"""

import pytest
import pytest_asyncio

from app.domain.models.base import DuplicateEntityError
from app.domain.models.category import Category
from app.domain.models.tag import Tag
from app.domain.models.user import User
from app.infrastructure.repositories import (
    SQLAlchemyUserRepository,
    SQLAlchemyCategoryRepository,
    SQLAlchemyTagRepository,
)


@pytest_asyncio.fixture
async def owner(session):
    return await SQLAlchemyUserRepository(session).save(
        User(name="Owner", email="owner@example.com", password_hash="hashed")
    )


class TestUserRepository:
    """Test cases for SQLAlchemyUserRepository."""

    @pytest.mark.asyncio
    async def test_find_by_email_is_case_insensitive(self, session, owner):
        users = SQLAlchemyUserRepository(session)

        found = await users.find_by_email("OWNER@example.com")

        assert found.id == owner.id

    @pytest.mark.asyncio
    async def test_duplicate_email(self, session, owner):
        users = SQLAlchemyUserRepository(session)

        with pytest.raises(DuplicateEntityError):
            await users.save(User(name="Copy", email="owner@example.com", password_hash="hashed"))

    @pytest.mark.asyncio
    async def test_update(self, session, owner):
        users = SQLAlchemyUserRepository(session)

        owner.update_profile("Renamed")
        await users.update(owner)

        assert (await users.find_by_id(owner.id)).name == "Renamed"


class TestCategoryRepository:
    """Test cases for SQLAlchemyCategoryRepository."""

    @pytest.mark.asyncio
    async def test_unique_name_per_user(self, session, owner):
        categories = SQLAlchemyCategoryRepository(session)
        await categories.save(Category(name="Work", user_id=owner.id))

        with pytest.raises(DuplicateEntityError):
            await categories.save(Category(name="Work", user_id=owner.id))

    @pytest.mark.asyncio
    async def test_list_by_user_sorted(self, session, owner):
        categories = SQLAlchemyCategoryRepository(session)
        for name in ["Zeta", "Alpha"]:
            await categories.save(Category(name=name, user_id=owner.id))

        found = await categories.find_by_user_id(owner.id)

        assert [c.name for c in found] == ["Alpha", "Zeta"]

    @pytest.mark.asyncio
    async def test_rename(self, session, owner):
        categories = SQLAlchemyCategoryRepository(session)
        category = await categories.save(Category(name="Work", user_id=owner.id))

        category.rename("Job")
        await categories.update(category)

        assert (await categories.find_by_name_and_user_id("Job", owner.id)).id == category.id

    @pytest.mark.asyncio
    async def test_delete_missing(self, session):
        assert await SQLAlchemyCategoryRepository(session).delete(999) is False


class TestTagRepository:
    """Test cases for SQLAlchemyTagRepository."""

    @pytest.mark.asyncio
    async def test_unique_name_per_user(self, session, owner):
        tags = SQLAlchemyTagRepository(session)
        await tags.save(Tag(name="urgent", user_id=owner.id))

        with pytest.raises(DuplicateEntityError):
            await tags.save(Tag(name="urgent", user_id=owner.id))

    @pytest.mark.asyncio
    async def test_find_by_ids(self, session, owner):
        tags = SQLAlchemyTagRepository(session)
        a = await tags.save(Tag(name="a", user_id=owner.id))
        b = await tags.save(Tag(name="b", user_id=owner.id))

        found = await tags.find_by_ids([b.id, a.id, 999])

        assert sorted(t.id for t in found) == sorted([a.id, b.id])
