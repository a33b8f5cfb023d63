"""
Authentication router for user authentication endpoints.
Handles user registration, login and profile management.
"""

from fastapi import APIRouter, Depends, status

from app.container import UseCasesDep
from app.application.dto.user_dto import (
    RegisterUserRequestDTO,
    LoginRequestDTO,
    UpdateProfileRequestDTO,
    UserResponseDTO,
    LoginResponseDTO,
    ProfileResponseDTO,
)
from app.infrastructure.auth import CurrentUserId
from app.infrastructure.rate_limiting import auth_rate_limit, registration_rate_limit


router = APIRouter()


@router.post(
    "/register",
    status_code=status.HTTP_201_CREATED,
    response_model=UserResponseDTO,
    dependencies=[Depends(registration_rate_limit)],
)
async def register(request: RegisterUserRequestDTO, use_cases: UseCasesDep):
    """
    Register a new user account.

    - **name**: Display name (at least 2 characters)
    - **email**: Valid email address, not yet registered
    - **password**: Password with at least 6 characters
    """
    user = await use_cases.register_user.execute(request)
    return UserResponseDTO.from_domain(user)


@router.post(
    "/login",
    response_model=LoginResponseDTO,
    dependencies=[Depends(auth_rate_limit)],
)
async def login(request: LoginRequestDTO, use_cases: UseCasesDep):
    """
    Authenticate user and return an access token.

    - **email**: User email address
    - **password**: User password
    """
    result = await use_cases.login.execute(request)
    return LoginResponseDTO(user=UserResponseDTO.from_domain(result.user), token=result.token)


@router.get("/profile", response_model=ProfileResponseDTO)
async def get_profile(user_id: CurrentUserId, use_cases: UseCasesDep):
    """
    Get the current user's profile.
    """
    user = await use_cases.get_user_profile.execute(user_id)
    return ProfileResponseDTO(user=UserResponseDTO.from_domain(user))


@router.put("/profile", response_model=ProfileResponseDTO)
async def update_profile(
    request: UpdateProfileRequestDTO,
    user_id: CurrentUserId,
    use_cases: UseCasesDep,
):
    """
    Update the current user's profile.

    - **name**: New display name
    """
    user = await use_cases.update_user_profile.execute(user_id, request)
    return ProfileResponseDTO(user=UserResponseDTO.from_domain(user))
