"""
In-memory repositories and auth doubles for use case tests.
"""

import itertools

import pytest

from app.domain.repositories.category_repository import CategoryRepository
from app.domain.repositories.tag_repository import TagRepository
from app.domain.repositories.task_repository import TaskRepository, TaskPage
from app.domain.repositories.user_repository import UserRepository
from app.domain.services.auth_service import PasswordHasher, TokenService


class MockRepository:
    """Dictionary-backed storage shared by the in-memory repositories."""

    def __init__(self):
        self.data = {}
        self._ids = itertools.count(1)

    async def save(self, entity):
        if entity.id is None:
            entity.id = next(self._ids)
        self.data[entity.id] = entity
        return entity

    async def update(self, entity):
        self.data[entity.id] = entity
        return entity

    async def delete(self, entity_id):
        return self.data.pop(entity_id, None) is not None

    async def find_by_id(self, entity_id):
        return self.data.get(entity_id)

    async def find_by_user_id(self, user_id):
        return sorted(
            (e for e in self.data.values() if e.user_id == user_id), key=lambda e: e.name
        )

    async def find_by_name_and_user_id(self, name, user_id):
        for entity in self.data.values():
            if entity.user_id == user_id and entity.name == name.strip():
                return entity
        return None


class InMemoryUserRepository(MockRepository, UserRepository):
    async def find_by_email(self, email):
        for user in self.data.values():
            if user.email == email.strip().lower():
                return user
        return None


class InMemoryCategoryRepository(MockRepository, CategoryRepository):
    def __init__(self, task_repository=None):
        super().__init__()
        self.task_repository = task_repository

    async def delete(self, category_id):
        if self.task_repository is not None:
            for task in self.task_repository.data.values():
                if task.category_id == category_id:
                    task.category_id = None
        return await super().delete(category_id)


class InMemoryTagRepository(MockRepository, TagRepository):
    async def find_by_ids(self, tag_ids):
        return [self.data[tag_id] for tag_id in tag_ids if tag_id in self.data]


class InMemoryTaskRepository(MockRepository, TaskRepository):
    """Supports the owner, completion and priority filters plus paging."""

    async def find_with_filters(self, user_id, criteria):
        tasks = [t for t in self.data.values() if t.user_id == user_id]
        if criteria.completed is not None:
            tasks = [t for t in tasks if t.completed == criteria.completed]
        if criteria.priority is not None:
            tasks = [t for t in tasks if t.priority == criteria.priority]
        tasks.sort(key=lambda t: t.id)
        page_items = tasks[criteria.offset:criteria.offset + criteria.limit]
        return TaskPage(items=page_items, total=len(tasks), page=criteria.page, limit=criteria.limit)


class FakePasswordHasher(PasswordHasher):
    def hash(self, password):
        return f"hashed:{password}"

    def verify(self, password, hashed_password):
        return hashed_password == f"hashed:{password}"


class FakeTokenService(TokenService):
    def issue_token(self, payload):
        return f"token-for-{payload['sub']}"

    def verify_token(self, token):
        return {"sub": token.rsplit("-", 1)[-1]}


@pytest.fixture
def user_repository():
    return InMemoryUserRepository()


@pytest.fixture
def task_repository():
    return InMemoryTaskRepository()


@pytest.fixture
def category_repository(task_repository):
    return InMemoryCategoryRepository(task_repository)


@pytest.fixture
def tag_repository():
    return InMemoryTagRepository()


@pytest.fixture
def password_hasher():
    return FakePasswordHasher()


@pytest.fixture
def token_service():
    return FakeTokenService()
