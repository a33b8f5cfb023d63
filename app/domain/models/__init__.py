"""
Domain models for the task board.
This module exports all domain entities and value objects.
"""

# Base classes
from .base import (
    BaseEntity,
    DomainException,
    ValidationError,
    BusinessRuleViolation,
    AuthenticationError,
    AccessDeniedError,
    EntityNotFoundError,
    DuplicateEntityError,
    ValueObject,
    Email,
)

# Domain entities
from .user import User
from .category import Category
from .tag import Tag
from .task import Task, TaskPriority

__all__ = [
    # Base classes
    "BaseEntity",
    "DomainException",
    "ValidationError",
    "BusinessRuleViolation",
    "AuthenticationError",
    "AccessDeniedError",
    "EntityNotFoundError",
    "DuplicateEntityError",
    "ValueObject",
    "Email",

    # Entities
    "User",
    "Category",
    "Tag",
    "Task",
    "TaskPriority",
]
