"""
Task DTOs for the application layer.
Data Transfer Objects for task-related operations.
"""

from typing import Optional, List, Dict, Any
from datetime import date
from pydantic import Field, field_validator, model_validator

from app.domain.models.task import TaskPriority
from app.domain.repositories.task_repository import (
    TaskFilter,
    TaskOrderField,
    SortDirection,
)
from .base_dto import BaseDTO, RequestDTO, ResponseDTO, PaginationDTO

MAX_PAGE_SIZE = 100


def _unique_ids(ids: Optional[List[int]]) -> Optional[List[int]]:
    if ids is None:
        return None
    return list(dict.fromkeys(ids))


def _clean_title(value: Any) -> Any:
    # Runs before the length check; other types fail the str check afterwards
    if not isinstance(value, str):
        return value
    value = value.strip()
    if not value:
        raise ValueError("Title is required")
    return value


# Request DTOs
class CreateTaskRequestDTO(RequestDTO):
    """DTO for task creation requests."""

    title: str = Field(max_length=255, description="Task title")
    description: Optional[str] = Field(default=None, max_length=5000, description="Task description")
    priority: TaskPriority = Field(default=TaskPriority.MEDIUM, description="low, medium or high")
    due_date: Optional[date] = Field(default=None, description="Due date (YYYY-MM-DD)")
    category_id: Optional[int] = Field(default=None, gt=0, description="Category ID")
    tag_ids: List[int] = Field(default_factory=list, description="Tag IDs; duplicates are ignored")

    @field_validator('title', mode='before')
    @classmethod
    def validate_title(cls, v):
        return _clean_title(v)

    @field_validator('tag_ids')
    @classmethod
    def dedupe_tag_ids(cls, v):
        return _unique_ids(v) or []


class UpdateTaskRequestDTO(RequestDTO):
    """
    DTO for task update requests.

    Only fields present in the body are applied. Sending null clears
    description, dueDate and categoryId; tagIds replaces the tag set.
    """

    title: Optional[str] = Field(default=None, max_length=255, description="Task title")
    description: Optional[str] = Field(default=None, max_length=5000, description="Task description")
    completed: Optional[bool] = Field(default=None, description="Completion flag")
    priority: Optional[TaskPriority] = Field(default=None, description="low, medium or high")
    due_date: Optional[date] = Field(default=None, description="Due date (YYYY-MM-DD)")
    category_id: Optional[int] = Field(default=None, gt=0, description="Category ID")
    tag_ids: Optional[List[int]] = Field(default=None, description="Replacement tag IDs")

    @field_validator('title', mode='before')
    @classmethod
    def validate_title(cls, v):
        return _clean_title(v)

    @field_validator('tag_ids')
    @classmethod
    def dedupe_tag_ids(cls, v):
        return _unique_ids(v)

    def changes(self) -> Dict[str, Any]:
        """Fields explicitly sent by the client, keyed by attribute name."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class ListTasksRequestDTO(RequestDTO):
    """Filters, ordering and paging for the task list."""

    completed: Optional[bool] = Field(default=None, description="Filter by completion")
    priority: Optional[TaskPriority] = Field(default=None, description="Filter by priority")
    category_id: Optional[int] = Field(default=None, description="Filter by category")
    due_date_from: Optional[date] = Field(default=None, description="Due on or after")
    due_date_to: Optional[date] = Field(default=None, description="Due on or before")
    search: Optional[str] = Field(default=None, max_length=255, description="Text in title or description")
    order_by: TaskOrderField = Field(default=TaskOrderField.CREATED_AT, description="Sort field")
    order_direction: SortDirection = Field(default=SortDirection.DESC, description="asc or desc")
    page: int = Field(default=1, ge=1, description="Page number")
    limit: int = Field(default=10, ge=1, le=MAX_PAGE_SIZE, description="Items per page")

    @model_validator(mode='after')
    def validate_date_range(self):
        """Validate that due_date_to is not before due_date_from."""
        if self.due_date_from and self.due_date_to and self.due_date_to < self.due_date_from:
            raise ValueError('dueDateFrom must be on or before dueDateTo')
        return self

    def to_filter(self) -> TaskFilter:
        return TaskFilter(
            completed=self.completed,
            priority=TaskPriority(self.priority) if self.priority else None,
            category_id=self.category_id,
            due_date_from=self.due_date_from,
            due_date_to=self.due_date_to,
            search=self.search,
            order_by=TaskOrderField(self.order_by),
            order_direction=SortDirection(self.order_direction),
            page=self.page,
            limit=self.limit,
        )


# Response DTOs
class TaskTagDTO(BaseDTO):
    """Tag as embedded in a task."""

    id: int
    name: str
    user_id: int


class TaskResponseDTO(ResponseDTO):
    """DTO for task responses."""

    title: str
    description: Optional[str] = None
    completed: bool
    priority: TaskPriority
    due_date: Optional[date] = None
    user_id: int
    category_id: Optional[int] = None
    tags: List[TaskTagDTO] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, task) -> "TaskResponseDTO":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            completed=task.completed,
            priority=task.priority,
            due_date=task.due_date,
            user_id=task.user_id,
            category_id=task.category_id,
            tags=[TaskTagDTO(id=tag.id, name=tag.name, user_id=tag.user_id) for tag in task.tags],
            created_at=task.created_at,
            updated_at=task.updated_at,
        )


class TaskListResponseDTO(BaseDTO):
    """DTO for a page of tasks."""

    tasks: List[TaskResponseDTO]
    pagination: PaginationDTO

    @classmethod
    def from_page(cls, page) -> "TaskListResponseDTO":
        return cls(
            tasks=[TaskResponseDTO.from_domain(task) for task in page.items],
            pagination=PaginationDTO(
                page=page.page,
                limit=page.limit,
                total=page.total,
                total_pages=page.total_pages,
            ),
        )
