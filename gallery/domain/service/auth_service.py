"""Authentication domain service."""

import logfire

from gallery.domain.value import AuthProvider, OAuthProviderInfo

from .base import Service


class OAuthClient:
    """Generic OAuth client interface for all providers."""

    async def initiate_authorization(self, state: str, redirect_uri: str) -> str:
        """Initiate OAuth authorization flow.

        Args:
            state: State parameter for CSRF protection
            redirect_uri: Callback URL the provider redirects back to

        Returns:
            Authorization URL to redirect user to
        """
        raise NotImplementedError

    async def complete_authorization(
        self, code: str, state: str, redirect_uri: str
    ) -> OAuthProviderInfo:
        """Complete OAuth authorization flow.

        Args:
            code: Authorization code from OAuth callback
            state: State parameter echoed by the provider
            redirect_uri: Same callback URL used to initiate the flow

        Returns:
            Provider user information

        Raises:
            ProviderError: If the code exchange or profile fetch fails
        """
        raise NotImplementedError


class AuthService(Service):
    """Domain service for multi-provider OAuth operations.

    Coordinates authorization across Discord, GitHub and Google.
    """

    def __init__(self, oauth_clients: dict[AuthProvider, OAuthClient]) -> None:
        """Initialize auth service.

        Args:
            oauth_clients: Map of provider to OAuth client implementation
        """
        self.oauth_clients = oauth_clients

    def _client(self, provider: AuthProvider) -> OAuthClient:
        client = self.oauth_clients.get(provider)
        if not client:
            raise ValueError(f"Unsupported provider: {provider}")
        return client

    async def initiate_login(
        self, provider: AuthProvider, state: str, redirect_uri: str
    ) -> str:
        """Initiate OAuth flow for any provider.

        Args:
            provider: Authentication provider to use
            state: State parameter for CSRF protection
            redirect_uri: Login or register callback URL

        Returns:
            Authorization URL to redirect user to

        Raises:
            ValueError: If provider not supported
        """
        client = self._client(provider)
        logfire.info("OAuth flow initiated", provider=provider.value)
        return await client.initiate_authorization(state, redirect_uri)

    async def complete_login(
        self, provider: AuthProvider, code: str, state: str, redirect_uri: str
    ) -> OAuthProviderInfo:
        """Complete OAuth flow for any provider.

        Args:
            provider: Authentication provider used
            code: Authorization code from OAuth callback
            state: State parameter for verification
            redirect_uri: Callback URL used when the flow was initiated

        Returns:
            User profile from the provider

        Raises:
            ValueError: If provider not supported
            ProviderError: If the provider exchange fails
        """
        client = self._client(provider)
        with logfire.span("auth_service.complete_login", provider=provider.value):
            return await client.complete_authorization(code, state, redirect_uri)
