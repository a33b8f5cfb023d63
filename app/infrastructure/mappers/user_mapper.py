"""
User mapper for converting between domain entities and database models.
"""

from app.domain.models.user import User
from app.infrastructure.db.models import UserModel


class UserMapper:
    """Maps between User domain entity and UserModel database model."""

    def domain_to_model(self, user: User) -> UserModel:
        """Convert User domain entity to UserModel."""
        return UserModel(
            id=user.id,
            email=user.email,
            name=user.name,
            password_hash=user.password_hash,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )

    def model_to_domain(self, model: UserModel) -> User:
        """Convert UserModel to User domain entity."""
        return User(
            id=model.id,
            email=model.email,
            name=model.name,
            password_hash=model.password_hash,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    def update_model(self, model: UserModel, user: User) -> None:
        """Copy mutable fields from the entity onto an existing row."""
        model.name = user.name
        model.email = user.email
        model.password_hash = user.password_hash
        model.updated_at = user.updated_at
