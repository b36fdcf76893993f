"""JWT token domain service."""

from datetime import datetime, timedelta, timezone

import jwt
import logfire
from pydantic import BaseModel, ValidationError

from leaf.config import AuthSettings
from leaf.domain.value import UserRole

from .base import Service


class TokenPayload(BaseModel):
    """Claims the blog's auth system puts in an access token."""

    user_id: str
    handle: str  # Display name copied onto new comments
    role: UserRole = UserRole.USER
    exp: datetime

    @property
    def is_admin(self) -> bool:
        """Whether the bearer may moderate comments."""
        return self.role == UserRole.ADMIN


class JWTError(Exception):
    """Token is missing claims, expired or wrongly signed."""

    pass


class JWTService(Service):
    """Domain service for JWT token operations.

    Tokens are issued elsewhere; this service signs test and tooling tokens
    and verifies the ones sent with blog requests.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(
        self, user_id: str, handle: str, role: UserRole = UserRole.USER
    ) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            handle: Display name
            role: User role

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id, role=role.value):
            expiry = datetime.now(timezone.utc) + timedelta(
                days=self.auth_settings.jwt_expiry_days
            )
            claims = {
                "user_id": user_id,
                "handle": handle,
                "role": role.value,
                "exp": expiry,
            }
            return jwt.encode(
                claims,
                self.auth_settings.jwt_secret,
                algorithm=self.auth_settings.jwt_algorithm,
            )

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Raises:
            JWTError: If token is invalid, expired or lacks comment claims
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                claims = jwt.decode(
                    token,
                    self.auth_settings.jwt_secret,
                    algorithms=[self.auth_settings.jwt_algorithm],
                )
                return TokenPayload(**claims)
            except jwt.ExpiredSignatureError:
                logfire.warn("JWT token expired")
                raise JWTError("Token has expired")
            except jwt.InvalidTokenError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise JWTError("Invalid token")
            except ValidationError as e:
                logfire.warn("JWT token has unusable claims", error=str(e))
                raise JWTError("Invalid token claims")

    def get_payload_from_token(self, token: str | None) -> TokenPayload | None:
        """Decode a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Payload if token is valid, None if missing or invalid
        """
        if not token:
            return None

        try:
            return self.verify_token(token)
        except JWTError as e:
            # Invalid or expired token, treat as unauthenticated
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None

    def get_user_id_from_token(self, token: str | None) -> str | None:
        """Extract user ID from a token, None for anonymous or invalid tokens."""
        payload = self.get_payload_from_token(token)
        return payload.user_id if payload else None
