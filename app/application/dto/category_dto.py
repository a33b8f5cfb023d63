"""
Category and tag DTOs for the application layer.
"""

from pydantic import Field, field_validator

from .base_dto import RequestDTO, ResponseDTO


class NameRequestDTO(RequestDTO):
    """Request carrying a single category or tag name."""

    name: str = Field(max_length=50, description="Name, unique per user")

    @field_validator('name', mode='before')
    @classmethod
    def validate_name(cls, v):
        if not isinstance(v, str):
            return v
        v = v.strip()
        if not v:
            raise ValueError("Name is required")
        return v


class CreateCategoryRequestDTO(NameRequestDTO):
    """DTO for category creation requests."""


class UpdateCategoryRequestDTO(NameRequestDTO):
    """DTO for category rename requests."""


class CreateTagRequestDTO(NameRequestDTO):
    """DTO for tag creation requests."""


class CategoryResponseDTO(ResponseDTO):
    """DTO for category responses."""

    name: str
    user_id: int

    @classmethod
    def from_domain(cls, category) -> "CategoryResponseDTO":
        return cls(
            id=category.id,
            name=category.name,
            user_id=category.user_id,
            created_at=category.created_at,
            updated_at=category.updated_at,
        )


class TagResponseDTO(ResponseDTO):
    """DTO for tag responses."""

    name: str
    user_id: int

    @classmethod
    def from_domain(cls, tag) -> "TagResponseDTO":
        return cls(
            id=tag.id,
            name=tag.name,
            user_id=tag.user_id,
            created_at=tag.created_at,
            updated_at=tag.updated_at,
        )
