"""JWT session token domain service."""

from uuid import UUID

import logfire

from gallery.config import AuthSettings
from gallery.domain.error import InvalidTokenError
from gallery.domain.repository import UserRepository
from gallery.domain.value import UserId
from gallery.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Issues and checks stateless session tokens.

    Tokens are self-contained (user id, issued-at, expiry). There is no
    server-side revocation; expiry bounds a token's lifetime. The only store
    access is the existence check in `authenticate`, done on every call.
    """

    def __init__(
        self, auth_settings: AuthSettings, user_repository: UserRepository
    ) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
            user_repository: Store used to re-check that the user still exists
        """
        self.auth_settings = auth_settings
        self.user_repository = user_repository

    def create_token(self, user_id: UserId) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID

        Returns:
            JWT token string

        Raises:
            ConfigurationError: If no signing secret is configured
        """
        with logfire.span("jwt_service.create_token", user_id=str(user_id)):
            token = create_token(str(user_id), self.auth_settings)
            logfire.info("JWT token created", user_id=str(user_id))
            return token

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT signature and expiry, without touching the store.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            InvalidTokenError: If token is invalid or expired
        """
        try:
            return verify_token(token, self.auth_settings)
        except JWTError as e:
            logfire.info("JWT token rejected", error=str(e))
            raise InvalidTokenError(str(e)) from e

    async def authenticate(self, token: str | None) -> UserId:
        """Resolve a request's token to a user that still exists.

        Args:
            token: Token from the cookie or Authorization header, if any

        Returns:
            ID of the authenticated user

        Raises:
            InvalidTokenError: If the token is missing, malformed, expired,
                or names a user that no longer exists
        """
        if not token:
            raise InvalidTokenError("Missing token")

        payload = self.verify_token(token)

        try:
            user_id = UserId(UUID(payload.user_id))
        except ValueError as e:
            raise InvalidTokenError("Malformed user id in token") from e

        if not await self.user_repository.exists(user_id):
            logfire.warn("Token for missing user", user_id=str(user_id))
            raise InvalidTokenError("User no longer exists")

        return user_id
