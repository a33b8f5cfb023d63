"""
User use cases for the application layer.
Implements registration, login and profile operations.
"""

import logging
from dataclasses import dataclass

from app.application.use_cases.base_use_case import BaseUseCase
from app.application.dto.user_dto import (
    RegisterUserRequestDTO,
    LoginRequestDTO,
    UpdateProfileRequestDTO,
)
from app.domain.models.base import AuthenticationError, DuplicateEntityError, EntityNotFoundError
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepository
from app.domain.services.auth_service import PasswordHasher, TokenService

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


@dataclass
class AuthenticatedUser:
    """Result of a successful login."""

    user: User
    token: str


class RegisterUserUseCase(BaseUseCase):
    """Use case for registering a new user."""

    entity_name = "User"

    def __init__(self, user_repository: UserRepository, password_hasher: PasswordHasher):
        self.user_repository = user_repository
        self.password_hasher = password_hasher

    async def execute(self, request: RegisterUserRequestDTO) -> User:
        email = str(request.email).strip().lower()

        # Check if user already exists
        existing_user = await self.user_repository.find_by_email(email)
        if existing_user:
            raise DuplicateEntityError("User", "email", email)

        user = User(
            name=request.name,
            email=email,
            password_hash=self.password_hasher.hash(request.password),
        )

        saved_user = await self.user_repository.save(user)
        logger.info("Registered user %s", saved_user.id)
        return saved_user


class LoginUseCase(BaseUseCase):
    """
    Use case for logging in with email and password.
    Unknown email and wrong password fail with the same message.
    """

    entity_name = "User"

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: PasswordHasher,
        token_service: TokenService,
    ):
        self.user_repository = user_repository
        self.password_hasher = password_hasher
        self.token_service = token_service

    async def execute(self, request: LoginRequestDTO) -> AuthenticatedUser:
        user = await self.user_repository.find_by_email(str(request.email))
        if user is None or not self.password_hasher.verify(request.password, user.password_hash):
            logger.info("Failed login attempt")
            raise AuthenticationError(INVALID_CREDENTIALS)

        token = self.token_service.issue_token({"sub": str(user.id), "email": user.email})
        logger.info("User %s logged in", user.id)
        return AuthenticatedUser(user=user, token=token)


class GetUserProfileUseCase(BaseUseCase):
    """Use case for reading the authenticated user's profile."""

    entity_name = "User"

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, user_id: int) -> User:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(self.entity_name, user_id)
        return user


class UpdateUserProfileUseCase(BaseUseCase):
    """Use case for renaming the authenticated user."""

    entity_name = "User"

    def __init__(self, user_repository: UserRepository):
        self.user_repository = user_repository

    async def execute(self, user_id: int, request: UpdateProfileRequestDTO) -> User:
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise EntityNotFoundError(self.entity_name, user_id)

        user.update_profile(request.name)
        return await self.user_repository.update(user)
