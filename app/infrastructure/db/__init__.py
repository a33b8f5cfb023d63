"""
Database infrastructure for the task board.
"""

from .database import Base, Database, get_db
from .models import UserModel, CategoryModel, TagModel, TaskModel, task_tags

__all__ = [
    "Base",
    "Database",
    "get_db",
    "UserModel",
    "CategoryModel",
    "TagModel",
    "TaskModel",
    "task_tags",
]
