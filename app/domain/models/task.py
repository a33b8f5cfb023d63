"""
Task domain model.
Represents a to-do item on a user's board with priority, due date,
an optional category and a set of tags.
"""

from dataclasses import dataclass, field
from datetime import date
from typing import Optional, List, Iterable
from enum import Enum

from app.domain.models.base import BaseEntity, ValidationError
from app.domain.models.tag import Tag


class TaskPriority(str, Enum):
    """Task priority levels."""
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"

    @property
    def rank(self) -> int:
        """Numeric rank used when ordering by priority."""
        return PRIORITY_RANKS[self]


PRIORITY_RANKS = {
    TaskPriority.LOW: 1,
    TaskPriority.MEDIUM: 2,
    TaskPriority.HIGH: 3,
}


@dataclass(kw_only=True, eq=False)
class Task(BaseEntity):
    """
    Task owned by a single user.

    A task starts incomplete. Completing it is idempotent. Tags are kept
    unique by id.
    """

    title: str
    user_id: int
    description: Optional[str] = None
    completed: bool = False
    priority: TaskPriority = TaskPriority.MEDIUM
    due_date: Optional[date] = None
    category_id: Optional[int] = None
    tags: List[Tag] = field(default_factory=list)

    def __post_init__(self):
        self.title = (self.title or "").strip()
        if self.priority is not None and not isinstance(self.priority, TaskPriority):
            try:
                self.priority = TaskPriority(self.priority)
            except ValueError:
                raise ValidationError(f"Invalid priority: {self.priority}", "priority")
        self.tags = _unique_tags(self.tags)
        super().__post_init__()

    def validate(self) -> None:
        """Validate task data."""
        if not self.title:
            raise ValidationError("Title is required", "title")
        if len(self.title) > 255:
            raise ValidationError("Title too long (max 255 characters)", "title")
        if self.user_id is None:
            raise ValidationError("Task must belong to a user", "user_id")
        if self.priority is None:
            raise ValidationError("Priority is required", "priority")

    # State transitions

    def complete(self) -> None:
        """Mark the task as completed. Completing twice is a no-op."""
        if self.completed:
            return
        self.completed = True
        self.mark_as_updated()

    def mark_incomplete(self) -> None:
        if not self.completed:
            return
        self.completed = False
        self.mark_as_updated()

    # Mutations

    def update_details(
        self,
        title: Optional[str] = None,
        description: Optional[str] = None,
        priority: Optional[TaskPriority] = None,
    ) -> None:
        if title is not None:
            title = title.strip()
            if not title:
                raise ValidationError("Title is required", "title")
            self.title = title
        if description is not None:
            self.description = description
        if priority is not None:
            self.priority = TaskPriority(priority)
        self.validate()
        self.mark_as_updated()

    def assign_to_category(self, category_id: Optional[int]) -> None:
        self.category_id = category_id
        self.mark_as_updated()

    def replace_tags(self, tags: Iterable[Tag]) -> None:
        """Replace the whole tag set."""
        self.tags = _unique_tags(tags)
        self.mark_as_updated()

    @property
    def tag_ids(self) -> List[int]:
        return [t.id for t in self.tags]


def _unique_tags(tags: Iterable[Tag]) -> List[Tag]:
    unique: List[Tag] = []
    seen = set()
    for tag in tags or []:
        if tag.id is not None:
            if tag.id in seen:
                continue
            seen.add(tag.id)
        unique.append(tag)
    return unique
