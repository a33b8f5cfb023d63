"""
Infrastructure mappers module.
Contains mappers for converting between domain entities and database models.
"""

from .user_mapper import UserMapper
from .category_mapper import CategoryMapper
from .tag_mapper import TagMapper
from .task_mapper import TaskMapper

__all__ = [
    "UserMapper",
    "CategoryMapper",
    "TagMapper",
    "TaskMapper",
]
