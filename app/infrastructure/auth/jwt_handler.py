"""
JWT token handler.
Issues and validates access tokens and extracts user information.
"""

from typing import Optional, Dict, Any
from datetime import datetime, timedelta, timezone
from jose import JWTError, jwt as jose_jwt

from app.config import get_settings
from app.domain.models.base import AuthenticationError
from app.domain.services.auth_service import TokenService


class JWTHandler(TokenService):
    """Handles JWT token creation, validation and user extraction."""

    def __init__(
        self,
        secret_key: Optional[str] = None,
        algorithm: Optional[str] = None,
        expire_minutes: Optional[int] = None,
    ):
        settings = get_settings()
        self.jwt_secret = secret_key or settings.jwt_secret_key
        self.jwt_algorithm = algorithm or settings.jwt_algorithm
        self.expire_minutes = expire_minutes or settings.jwt_access_token_expire_minutes

    def issue_token(self, payload: Dict[str, Any]) -> str:
        """
        Create a signed token for the payload.

        Args:
            payload: Claims to embed; must contain "sub"

        Returns:
            Encoded JWT string
        """
        if "sub" not in payload:
            raise ValueError("Token payload requires a 'sub' claim")

        now = datetime.now(timezone.utc)
        claims = dict(payload)
        claims["sub"] = str(claims["sub"])
        claims["iat"] = now
        claims["exp"] = now + timedelta(minutes=self.expire_minutes)
        return jose_jwt.encode(claims, self.jwt_secret, algorithm=self.jwt_algorithm)

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        Verify and decode a JWT token.

        Args:
            token: JWT token string

        Returns:
            Dict containing token payload

        Raises:
            AuthenticationError: If token is invalid or expired
        """
        # Remove 'Bearer ' prefix if present
        if token.startswith('Bearer '):
            token = token[7:]

        try:
            payload = jose_jwt.decode(
                token,
                self.jwt_secret,
                algorithms=[self.jwt_algorithm],
                options={"verify_exp": True, "verify_aud": False},
            )
        except JWTError as e:
            raise AuthenticationError(f"Invalid or expired token: {str(e)}")

        # Validate required claims
        if 'sub' not in payload:
            raise AuthenticationError("Token missing user ID (sub claim)")
        if 'exp' not in payload:
            raise AuthenticationError("Token missing expiration (exp claim)")

        return payload

    def get_user_id(self, token: str) -> int:
        """
        Extract user ID from JWT token.

        Raises:
            AuthenticationError: If token is invalid
        """
        payload = self.verify_token(token)
        try:
            return int(payload['sub'])
        except (TypeError, ValueError):
            raise AuthenticationError("Token carries an invalid user ID")
