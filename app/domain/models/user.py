"""
User domain model.
Represents an account that owns tasks, categories and tags.
"""

from dataclasses import dataclass

from app.domain.models.base import BaseEntity, Email, ValidationError


@dataclass(kw_only=True, eq=False)
class User(BaseEntity):
    """
    Registered user.

    The email is unique across the system and is stored lower-cased.
    Only the hashed password is ever kept on the entity.
    """

    name: str
    email: str
    password_hash: str

    def __post_init__(self):
        self.name = (self.name or "").strip()
        self.email = Email.normalized(self.email).value
        super().__post_init__()

    def validate(self) -> None:
        """Validate user data."""
        if not self.name:
            raise ValidationError("Name is required", "name")
        if len(self.name) > 100:
            raise ValidationError("Name too long (max 100 characters)", "name")
        Email(self.email)
        if not self.password_hash:
            raise ValidationError("Password hash is required", "password")

    def update_profile(self, name: str) -> None:
        """Rename the user."""
        name = (name or "").strip()
        if not name:
            raise ValidationError("Name is required", "name")
        if len(name) > 100:
            raise ValidationError("Name too long (max 100 characters)", "name")
        self.name = name
        self.mark_as_updated()
