"""
Authentication infrastructure module.
Handles JWT issuing and validation, password hashing and the current user dependency.
"""

from .jwt_handler import JWTHandler
from .password_hasher import BcryptPasswordHasher
from .dependencies import (
    CurrentUserId,
    get_current_user_id,
    get_jwt_handler,
)

__all__ = [
    "JWTHandler",
    "BcryptPasswordHasher",
    "CurrentUserId",
    "get_current_user_id",
    "get_jwt_handler",
]
