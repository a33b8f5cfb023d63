"""
Task repository interface.
Defines the contract for task data persistence operations, including the
criteria used to filter, order and paginate a user's tasks.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from datetime import date
from enum import Enum
from math import ceil
from typing import List, Optional

from app.domain.models.base import ValidationError
from app.domain.models.task import Task, TaskPriority


class TaskOrderField(str, Enum):
    """Fields a task list can be ordered by."""
    TITLE = "title"
    PRIORITY = "priority"
    DUE_DATE = "dueDate"
    CREATED_AT = "createdAt"


class SortDirection(str, Enum):
    """Sort order options."""
    ASC = "asc"
    DESC = "desc"


@dataclass
class TaskFilter:
    """
    Criteria for listing a user's tasks.

    Every supplied filter narrows the result (they are combined with AND).
    The date range is inclusive on both ends.
    """

    completed: Optional[bool] = None
    priority: Optional[TaskPriority] = None
    category_id: Optional[int] = None
    due_date_from: Optional[date] = None
    due_date_to: Optional[date] = None
    search: Optional[str] = None
    order_by: TaskOrderField = TaskOrderField.CREATED_AT
    order_direction: SortDirection = SortDirection.DESC
    page: int = 1
    limit: int = 10

    @property
    def offset(self) -> int:
        """Number of rows to skip for the requested page."""
        return (self.page - 1) * self.limit

    def validate(self, max_limit: int = 100) -> None:
        if self.page < 1:
            raise ValidationError("Page must be greater than or equal to 1", "page")
        if self.limit < 1 or self.limit > max_limit:
            raise ValidationError(f"Limit must be between 1 and {max_limit}", "limit")
        if (
            self.due_date_from is not None
            and self.due_date_to is not None
            and self.due_date_from > self.due_date_to
        ):
            raise ValidationError(
                "dueDateFrom must be on or before dueDateTo", "dueDateFrom"
            )


@dataclass
class TaskPage:
    """One page of tasks plus the size of the whole filtered set."""

    items: List[Task] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10

    @property
    def total_pages(self) -> int:
        return ceil(self.total / self.limit) if self.limit > 0 else 0


class TaskRepository(ABC):
    """
    Repository interface for Task entity.
    Defines all operations needed for task data persistence.
    """

    @abstractmethod
    async def save(self, task: Task) -> Task:
        """
        Persist a new task together with its tag associations.
        Returns the saved task with its id.
        """
        pass

    @abstractmethod
    async def update(self, task: Task) -> Task:
        """
        Persist changes to an existing task, replacing its tag associations.
        """
        pass

    @abstractmethod
    async def delete(self, task_id: int) -> bool:
        """
        Delete a task and its tag associations.
        Returns False when the task did not exist.
        """
        pass

    @abstractmethod
    async def find_by_id(self, task_id: int) -> Optional[Task]:
        """
        Find a task by its ID.
        Returns None if not found.
        """
        pass

    @abstractmethod
    async def find_with_filters(self, user_id: int, criteria: TaskFilter) -> TaskPage:
        """
        Return the requested page of the user's tasks matching the criteria.
        """
        pass
