"""
Task use cases for the application layer.
Implements business logic for task operations.
"""

import logging
from typing import List, Optional

from app.application.use_cases.base_use_case import AuthorizedUseCase, BaseUseCase
from app.application.dto.task_dto import (
    CreateTaskRequestDTO,
    UpdateTaskRequestDTO,
    ListTasksRequestDTO,
)
from app.domain.models.base import AccessDeniedError, EntityNotFoundError
from app.domain.models.tag import Tag
from app.domain.models.task import Task, TaskPriority
from app.domain.repositories.category_repository import CategoryRepository
from app.domain.repositories.tag_repository import TagRepository
from app.domain.repositories.task_repository import TaskRepository, TaskFilter, TaskPage

logger = logging.getLogger(__name__)


class TaskUseCase(AuthorizedUseCase):
    """Shared lookups for task use cases."""

    entity_name = "Task"
    entity_plural = "tasks"

    def __init__(
        self,
        task_repository: TaskRepository,
        category_repository: Optional[CategoryRepository] = None,
        tag_repository: Optional[TagRepository] = None,
    ):
        self.task_repository = task_repository
        self.category_repository = category_repository
        self.tag_repository = tag_repository

    async def _check_category(self, category_id: Optional[int], user_id: int) -> None:
        """The category must exist and belong to the user."""
        if category_id is None:
            return
        category = await self.category_repository.find_by_id(category_id)
        if category is None:
            raise EntityNotFoundError("Category", category_id)
        if not category.is_owned_by(user_id):
            raise AccessDeniedError("You can only use your own categories")

    async def _resolve_tags(self, tag_ids: List[int], user_id: int) -> List[Tag]:
        """Load the tags in request order; each must exist and belong to the user."""
        if not tag_ids:
            return []
        found = {tag.id: tag for tag in await self.tag_repository.find_by_ids(tag_ids)}
        tags = []
        for tag_id in dict.fromkeys(tag_ids):
            tag = found.get(tag_id)
            if tag is None:
                raise EntityNotFoundError("Tag", tag_id)
            if not tag.is_owned_by(user_id):
                raise AccessDeniedError("You can only use your own tags")
            tags.append(tag)
        return tags


class CreateTaskUseCase(TaskUseCase):
    """Use case for creating a new task."""

    async def execute(self, user_id: int, request: CreateTaskRequestDTO) -> Task:
        await self._check_category(request.category_id, user_id)
        tags = await self._resolve_tags(request.tag_ids, user_id)

        task = Task(
            title=request.title,
            description=request.description,
            priority=TaskPriority(request.priority),
            due_date=request.due_date,
            user_id=user_id,
            category_id=request.category_id,
            tags=tags,
        )

        saved_task = await self.task_repository.save(task)
        logger.debug("User %s created task %s", user_id, saved_task.id)
        return saved_task


class GetTaskByIdUseCase(TaskUseCase):
    """Use case for reading a single task."""

    async def execute(self, user_id: int, task_id: int) -> Task:
        return await self._get_owned(self.task_repository, task_id, user_id, "view")


class GetTasksByUserUseCase(BaseUseCase):
    """
    Use case for listing the user's tasks.

    Applies the optional filters, a single sort field and offset
    pagination. A page past the end yields no items but the real totals.
    """

    entity_name = "Task"
    entity_plural = "tasks"

    def __init__(self, task_repository: TaskRepository, default_page_size: int = 10, max_page_size: int = 100):
        self.task_repository = task_repository
        self.default_page_size = default_page_size
        self.max_page_size = max_page_size

    async def execute(self, user_id: int, request: Optional[ListTasksRequestDTO] = None) -> TaskPage:
        criteria = request.to_filter() if request is not None else TaskFilter(limit=self.default_page_size)
        criteria.validate(self.max_page_size)
        return await self.task_repository.find_with_filters(user_id, criteria)


class UpdateTaskUseCase(TaskUseCase):
    """Use case for updating a task with merge-patch semantics."""

    async def execute(self, user_id: int, task_id: int, request: UpdateTaskRequestDTO) -> Task:
        task = await self._get_owned(self.task_repository, task_id, user_id, "update")
        changes = request.changes()

        task.update_details(
            title=changes.get("title"),
            priority=changes.get("priority"),
        )
        if "description" in changes:
            task.description = changes["description"]
        if "due_date" in changes:
            task.due_date = changes["due_date"]

        if changes.get("completed") is True:
            task.complete()
        elif changes.get("completed") is False:
            task.mark_incomplete()

        if "category_id" in changes:
            await self._check_category(changes["category_id"], user_id)
            task.assign_to_category(changes["category_id"])

        if "tag_ids" in changes:
            task.replace_tags(await self._resolve_tags(changes["tag_ids"] or [], user_id))

        task.validate()
        task.mark_as_updated()
        return await self.task_repository.update(task)


class DeleteTaskUseCase(TaskUseCase):
    """Use case for deleting a task."""

    async def execute(self, user_id: int, task_id: int) -> None:
        await self._get_owned(self.task_repository, task_id, user_id, "delete")
        await self.task_repository.delete(task_id)
        logger.debug("User %s deleted task %s", user_id, task_id)


class CompleteTaskUseCase(TaskUseCase):
    """Use case for marking a task as completed. Idempotent."""

    async def execute(self, user_id: int, task_id: int) -> Task:
        task = await self._get_owned(self.task_repository, task_id, user_id, "complete")
        task.complete()
        return await self.task_repository.update(task)
