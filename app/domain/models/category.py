"""
Category domain model.
Groups a user's tasks into columns of the board.
"""

from dataclasses import dataclass

from app.domain.models.base import BaseEntity, ValidationError

NAME_MAX_LENGTH = 50


def validate_label_name(name: str, field_name: str = "name") -> str:
    """Trim a category or tag name and check its length."""
    name = (name or "").strip()
    if not name:
        raise ValidationError("Name is required", field_name)
    if len(name) > NAME_MAX_LENGTH:
        raise ValidationError(
            f"Name too long (max {NAME_MAX_LENGTH} characters)", field_name
        )
    return name


@dataclass(kw_only=True, eq=False)
class Category(BaseEntity):
    """Category owned by a single user; names are unique per user."""

    name: str
    user_id: int

    def __post_init__(self):
        self.name = (self.name or "").strip()
        super().__post_init__()

    def validate(self) -> None:
        validate_label_name(self.name)
        if self.user_id is None:
            raise ValidationError("Category must belong to a user", "user_id")

    def rename(self, name: str) -> None:
        self.name = validate_label_name(name)
        self.mark_as_updated()
