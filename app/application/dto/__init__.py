"""
Application layer DTOs.
Data Transfer Objects for API requests and responses.
"""

from .base_dto import *
from .user_dto import *
from .category_dto import *
from .task_dto import *

__all__ = [
    # Base DTOs
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "PaginationDTO",
    "FieldErrorDTO",
    "ErrorResponseDTO",
    "HealthCheckResponseDTO",

    # User DTOs
    "RegisterUserRequestDTO",
    "LoginRequestDTO",
    "UpdateProfileRequestDTO",
    "UserResponseDTO",
    "LoginResponseDTO",
    "ProfileResponseDTO",

    # Category and tag DTOs
    "CreateCategoryRequestDTO",
    "UpdateCategoryRequestDTO",
    "CreateTagRequestDTO",
    "CategoryResponseDTO",
    "TagResponseDTO",

    # Task DTOs
    "CreateTaskRequestDTO",
    "UpdateTaskRequestDTO",
    "ListTasksRequestDTO",
    "TaskTagDTO",
    "TaskResponseDTO",
    "TaskListResponseDTO",
]
