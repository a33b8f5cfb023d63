"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from .user_repository import UserRepository
from .category_repository import CategoryRepository
from .tag_repository import TagRepository
from .task_repository import (
    TaskRepository,
    TaskFilter,
    TaskPage,
    TaskOrderField,
    SortDirection,
)

__all__ = [
    "UserRepository",
    "CategoryRepository",
    "TagRepository",
    "TaskRepository",
    "TaskFilter",
    "TaskPage",
    "TaskOrderField",
    "SortDirection",
]
