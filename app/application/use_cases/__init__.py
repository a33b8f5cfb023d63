"""
Application layer use cases.
Business logic for the task board.
"""

from .base_use_case import *
from .user_use_cases import *
from .category_use_cases import *
from .tag_use_cases import *
from .task_use_cases import *

__all__ = [
    # Base Use Cases
    "BaseUseCase",
    "AuthorizedUseCase",

    # User Use Cases
    "AuthenticatedUser",
    "RegisterUserUseCase",
    "LoginUseCase",
    "GetUserProfileUseCase",
    "UpdateUserProfileUseCase",

    # Category Use Cases
    "CreateCategoryUseCase",
    "GetCategoriesByUserUseCase",
    "GetCategoryByIdUseCase",
    "UpdateCategoryUseCase",
    "DeleteCategoryUseCase",

    # Tag Use Cases
    "CreateTagUseCase",
    "GetTagsByUserUseCase",
    "GetTagByIdUseCase",

    # Task Use Cases
    "CreateTaskUseCase",
    "GetTaskByIdUseCase",
    "GetTasksByUserUseCase",
    "UpdateTaskUseCase",
    "DeleteTaskUseCase",
    "CompleteTaskUseCase",
]
