"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from typing import Any, Dict, List, Optional
from datetime import datetime
from pydantic import BaseModel, Field, ConfigDict
from pydantic.alias_generators import to_camel


class BaseDTO(BaseModel):
    """Base DTO with common configuration."""

    model_config = ConfigDict(
        # JSON uses camelCase, Python uses snake_case
        alias_generator=to_camel,
        # Allow population by field name or alias
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
        # Validate assignment
        validate_assignment=True,
        # Unknown fields are rejected
        extra="forbid",
    )


class RequestDTO(BaseDTO):
    """Base class for request DTOs."""
    pass


class ResponseDTO(BaseDTO):
    """Base class for response DTOs."""

    id: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PaginationDTO(BaseDTO):
    """Pagination block of list responses."""

    page: int = Field(description="Current page number")
    limit: int = Field(description="Items per page")
    total: int = Field(description="Total number of matching items")
    total_pages: int = Field(description="Total number of pages")


class FieldErrorDTO(BaseDTO):
    """A single field-level validation failure."""

    field: str = Field(description="Offending field, dotted for nested fields")
    message: str = Field(description="What is wrong with it")


class ErrorResponseDTO(BaseDTO):
    """Error response DTO."""

    status: str = Field(default="error", description="Always 'error'")
    message: str = Field(description="Error message")
    errors: Optional[List[FieldErrorDTO]] = Field(default=None, description="Field errors")


class HealthCheckResponseDTO(BaseDTO):
    """Health check response DTO."""

    status: str = Field(description="Service status")
    environment: str = Field(description="Deployment environment")
    version: Optional[str] = Field(default=None, description="Application version")


# Utility functions
def to_dict(obj: Any, exclude_none: bool = True) -> Dict[str, Any]:
    """Convert a DTO to a camelCase dictionary, optionally excluding None values."""
    return obj.model_dump(by_alias=True, exclude_none=exclude_none)
