"""OAuth callback use cases.

Each provider has a login callback and a register callback. Both complete
the code exchange the same way and differ only in which verifier entry
point receives the profile.
"""

from typing import Literal

import logfire
from pydantic import BaseModel

from gallery.application.usecase.auth.local import AuthTokenResponse
from gallery.application.usecase.base import BaseUseCase
from gallery.domain.service import AuthService, JWTService, VerifierRegistry
from gallery.domain.value import AuthProvider, OAuthProviderInfo, UserId

OAuthIntent = Literal["login", "register"]


class OAuthCallbackRequest(BaseModel):
    """Parameters of a provider redirect back to this API."""

    provider: AuthProvider
    code: str  # OAuth authorization code
    state: str  # Already checked against the state cookie
    redirect_uri: str  # Callback URL used to start the flow


class _OAuthCallbackUseCase(BaseUseCase):
    intent: OAuthIntent

    def __init__(
        self,
        auth_service: AuthService,
        verifiers: VerifierRegistry,
        jwt_service: JWTService,
    ) -> None:
        """Initialize OAuth callback use case.

        Args:
            auth_service: Multi-provider OAuth domain service
            verifiers: Provider to verifier mapping
            jwt_service: JWT token domain service
        """
        self.auth_service = auth_service
        self.verifiers = verifiers
        self.jwt_service = jwt_service

    async def execute(self, request: OAuthCallbackRequest) -> AuthTokenResponse:
        """Complete the exchange, verify the profile and issue a token.

        Raises:
            ProviderError: If the provider exchange fails
            AuthenticationError: If the verifier rejects the profile
        """
        with logfire.span(
            f"oauth_{self.intent}", provider=request.provider.value
        ):
            profile = await self.auth_service.complete_login(
                request.provider, request.code, request.state, request.redirect_uri
            )
            user_id = await self._verify(profile)
            token = self.jwt_service.create_token(user_id)
            return AuthTokenResponse(token=token, user_id=str(user_id))

    async def _verify(self, profile: OAuthProviderInfo) -> UserId:
        raise NotImplementedError


class OAuthLoginUseCase(_OAuthCallbackUseCase):
    """Log in an existing identity through an OAuth provider."""

    intent = "login"

    async def _verify(self, profile: OAuthProviderInfo) -> UserId:
        return await self.verifiers.oauth(profile.provider).login(profile)


class OAuthRegisterUseCase(_OAuthCallbackUseCase):
    """Create an identity from an OAuth provider profile."""

    intent = "register"

    async def _verify(self, profile: OAuthProviderInfo) -> UserId:
        return await self.verifiers.oauth(profile.provider).register(profile)
