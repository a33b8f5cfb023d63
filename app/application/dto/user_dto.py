"""
User and authentication DTOs for the application layer.
"""

from typing import Any

from pydantic import Field, EmailStr, field_validator

from .base_dto import BaseDTO, RequestDTO


def _strip_name(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    value = value.strip()
    if len(value) < 2:
        raise ValueError("Name must be at least 2 characters long")
    return value


# Request DTOs
class RegisterUserRequestDTO(RequestDTO):
    """DTO for user registration requests."""

    name: str = Field(max_length=100, description="Display name")
    email: EmailStr = Field(description="User email address")
    password: str = Field(min_length=6, max_length=128, description="Password")

    @field_validator('name', mode='before')
    @classmethod
    def validate_name(cls, v):
        return _strip_name(v)


class LoginRequestDTO(RequestDTO):
    """DTO for login requests."""

    email: EmailStr = Field(description="User email address")
    password: str = Field(min_length=1, max_length=128, description="Password")


class UpdateProfileRequestDTO(RequestDTO):
    """DTO for profile update requests."""

    name: str = Field(max_length=100, description="New display name")

    @field_validator('name', mode='before')
    @classmethod
    def validate_name(cls, v):
        return _strip_name(v)


# Response DTOs
class UserResponseDTO(BaseDTO):
    """Public view of a user; never includes the password hash."""

    id: int
    name: str
    email: str

    @classmethod
    def from_domain(cls, user) -> "UserResponseDTO":
        return cls(id=user.id, name=user.name, email=user.email)


class LoginResponseDTO(BaseDTO):
    """DTO for a successful login."""

    user: UserResponseDTO
    token: str


class ProfileResponseDTO(BaseDTO):
    """DTO wrapping the current user's profile."""

    user: UserResponseDTO
