"""Domain layer DI providers."""

from dishka import Scope, provide

from gallery.config import AuthSettings
from gallery.domain.repository import UserRepository
from gallery.domain.service import (
    AuthService,
    DiscordVerifier,
    GithubVerifier,
    GoogleVerifier,
    JWTService,
    LocalVerifier,
    OAuthClient,
    UserService,
    VerifierRegistry,
)
from gallery.domain.value import AuthProvider
from gallery.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Domain services and verifiers.

    REQUEST-scoped to share the request's repository and session.
    """

    scope = Scope.REQUEST

    @provide
    def get_auth_service(
        self, oauth_clients: dict[AuthProvider, OAuthClient]
    ) -> AuthService:
        """Provide multi-provider OAuth domain service."""
        return AuthService(oauth_clients=oauth_clients)

    @provide
    def get_jwt_service(
        self, auth_settings: AuthSettings, user_repository: UserRepository
    ) -> JWTService:
        """Provide session token domain service."""
        return JWTService(auth_settings=auth_settings, user_repository=user_repository)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_verifier_registry(
        self, user_service: UserService, auth_settings: AuthSettings
    ) -> VerifierRegistry:
        """Provide the provider -> verifier mapping.

        Every supported provider gets exactly one verifier here.
        """
        return VerifierRegistry(
            [
                LocalVerifier(user_service, auth_settings),
                DiscordVerifier(user_service),
                GithubVerifier(user_service),
                GoogleVerifier(user_service),
            ]
        )
