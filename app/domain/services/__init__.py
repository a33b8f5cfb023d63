"""
Domain service ports for the task board.
"""

from .auth_service import PasswordHasher, TokenService

__all__ = [
    "PasswordHasher",
    "TokenService",
]
