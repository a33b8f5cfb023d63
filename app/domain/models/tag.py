"""
Tag domain model.
"""

from dataclasses import dataclass

from app.domain.models.base import BaseEntity, ValidationError
from app.domain.models.category import validate_label_name


@dataclass(kw_only=True, eq=False)
class Tag(BaseEntity):
    """Free-form label attached to tasks; names are unique per user."""

    name: str
    user_id: int

    def __post_init__(self):
        self.name = (self.name or "").strip()
        super().__post_init__()

    def validate(self) -> None:
        validate_label_name(self.name)
        if self.user_id is None:
            raise ValidationError("Tag must belong to a user", "user_id")
