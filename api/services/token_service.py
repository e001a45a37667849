"""
Token Service

JWT token generation and validation for wallet sessions.
A session token binds every request to one wallet address.
"""

import secrets
from datetime import datetime, timedelta, timezone

import jwt
from jwt.exceptions import DecodeError, ExpiredSignatureError

from api.config import settings
from api.enums import CallerRole


class TokenServiceError(Exception):
    """Base exception for token service errors"""

    pass


class InvalidTokenError(TokenServiceError):
    """Invalid or expired token"""

    pass


class TokenService:
    """
    Service for JWT token management

    Handles creation and validation of wallet session tokens.
    """

    @staticmethod
    def create_session_token(
        address: str,
        role: CallerRole,
        expires_minutes: int | None = None
    ) -> tuple[str, str, datetime]:
        """
        Create a wallet session token (JWT).

        Args:
            address: Wallet address the session acts as
            role: Caller role (HOLDER or ADMIN)
            expires_minutes: Token expiration in minutes (default: from settings)

        Returns:
            Tuple of (token, jti, expires_at)

        Example:
            >>> token, jti, expires_at = TokenService.create_session_token("addr_test1...", CallerRole.HOLDER)
            >>> # Use token in Authorization header
        """
        if expires_minutes is None:
            expires_minutes = settings.session_timeout_minutes

        jti = secrets.token_urlsafe(32)
        now = datetime.now(timezone.utc)
        expires_at = now + timedelta(minutes=expires_minutes)

        payload = {
            "sub": address,  # Subject: wallet address
            "role": role.value,
            "jti": jti,
            "iat": now,
            "exp": expires_at,
            "type": "access"
        }

        token = jwt.encode(payload, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)

        return token, jti, expires_at

    @staticmethod
    def verify_token(token: str, expected_type: str = "access") -> dict:
        """
        Verify and decode a JWT token.

        Args:
            token: JWT token string
            expected_type: Expected token type

        Returns:
            Decoded token payload

        Raises:
            InvalidTokenError: If token is invalid, expired, or wrong type
        """
        try:
            payload = jwt.decode(
                token,
                settings.jwt_secret_key,
                algorithms=[settings.jwt_algorithm]
            )

            if payload.get("type") != expected_type:
                raise InvalidTokenError(
                    f"Invalid token type. Expected '{expected_type}', got '{payload.get('type')}'"
                )

            return payload

        except ExpiredSignatureError:
            raise InvalidTokenError("Token has expired")
        except DecodeError:
            raise InvalidTokenError("Invalid token format")
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Token validation failed: {str(e)}")
