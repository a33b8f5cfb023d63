"""
Authentication dependencies for FastAPI.
Resolve the authenticated user from the Authorization header.
"""

from typing import Optional, Annotated
from fastapi import Depends, HTTPException, status, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.domain.models.base import AuthenticationError
from app.infrastructure.auth.jwt_handler import JWTHandler


# Security scheme; missing credentials are reported as 401 below
security = HTTPBearer(auto_error=False)


def get_jwt_handler(request: Request) -> JWTHandler:
    """Dependency to get the application's JWT handler."""
    return request.app.state.token_service


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_current_user_id(
    request: Request,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    jwt_handler: Annotated[JWTHandler, Depends(get_jwt_handler)]
) -> int:
    """
    FastAPI dependency to get current authenticated user ID.

    Args:
        request: Incoming request; the user id is stored on its state
        credentials: Bearer token credentials
        jwt_handler: JWT handler instance

    Returns:
        User ID

    Raises:
        HTTPException: If authentication fails
    """
    if credentials is None or not credentials.credentials:
        raise _unauthorized("Authentication required")

    try:
        user_id = jwt_handler.get_user_id(credentials.credentials)
    except AuthenticationError as e:
        raise _unauthorized(e.message)

    request.state.user_id = user_id
    return user_id


CurrentUserId = Annotated[int, Depends(get_current_user_id)]
