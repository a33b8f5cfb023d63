"""
User repository implementation using SQLAlchemy.
"""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository as UserRepositoryInterface
from app.domain.models.base import EntityNotFoundError, DuplicateEntityError
from app.infrastructure.db.models import UserModel
from app.infrastructure.mappers.user_mapper import UserMapper


class SQLAlchemyUserRepository(UserRepositoryInterface):
    """SQLAlchemy implementation of user repository."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.mapper = UserMapper()
        self.model = UserModel

    async def save(self, user: User) -> User:
        """Insert a new user; a taken email surfaces as DuplicateEntityError."""
        model = self.mapper.domain_to_model(user)
        self.session.add(model)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise DuplicateEntityError("User", "email", user.email)

        user.id = model.id
        return user

    async def update(self, user: User) -> User:
        model = await self.session.get(UserModel, user.id)
        if not model:
            raise EntityNotFoundError("User", user.id)

        self.mapper.update_model(model, user)
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise DuplicateEntityError("User", "email", user.email)
        return self.mapper.model_to_domain(model)

    async def find_by_id(self, user_id: int) -> Optional[User]:
        """Get user by ID."""
        model = await self.session.get(UserModel, user_id)
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    async def find_by_email(self, email: str) -> Optional[User]:
        """Get user by email, compared lower-cased."""
        result = await self.session.execute(
            select(UserModel).where(UserModel.email == email.strip().lower())
        )
        model = result.scalar_one_or_none()
        if not model:
            return None
        return self.mapper.model_to_domain(model)
