"""
Infrastructure repositories module.
Contains SQLAlchemy implementations of domain repositories.
"""

from .user_repository import SQLAlchemyUserRepository
from .category_repository import SQLAlchemyCategoryRepository
from .tag_repository import SQLAlchemyTagRepository
from .task_repository import SQLAlchemyTaskRepository

__all__ = [
    "SQLAlchemyUserRepository",
    "SQLAlchemyCategoryRepository",
    "SQLAlchemyTagRepository",
    "SQLAlchemyTaskRepository",
]
