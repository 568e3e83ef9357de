"""Shared OAuth 2.0 authorization code flow over httpx.

Discord, GitHub and Google all use the plain confidential-client code
flow, so the HTTP plumbing lives here and each provider only supplies its
endpoints and profile mapping.
"""

from typing import Any
from urllib.parse import urlencode

import httpx
import logfire

from gallery.adapter.error import ProviderError
from gallery.domain.service.auth_service import OAuthClient
from gallery.domain.value import AuthProvider, OAuthProviderInfo


class OAuth2CodeFlowClient(OAuthClient):
    """Confidential-client authorization code flow.

    Subclasses set the endpoint attributes and implement `_fetch_profile`.
    """

    provider: AuthProvider
    authorize_url: str
    token_url: str
    scope: str

    def __init__(
        self,
        client_id: str,
        client_secret: str,
        timeout: float = 30.0,
    ) -> None:
        """Initialize OAuth client.

        Args:
            client_id: OAuth client ID issued by the provider
            client_secret: OAuth client secret issued by the provider
            timeout: Per-request HTTP timeout in seconds
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.timeout = timeout

    def _authorize_params(self, state: str, redirect_uri: str) -> dict[str, str]:
        return {
            "response_type": "code",
            "client_id": self.client_id,
            "redirect_uri": redirect_uri,
            "scope": self.scope,
            "state": state,
        }

    async def initiate_authorization(self, state: str, redirect_uri: str) -> str:
        """Build the provider consent URL.

        Args:
            state: State parameter for CSRF protection
            redirect_uri: Login or register callback on this API

        Returns:
            Authorization URL to redirect user to
        """
        params = self._authorize_params(state, redirect_uri)
        auth_url = f"{self.authorize_url}?{urlencode(params)}"

        logfire.info(
            "OAuth authorization initiated",
            provider=self.provider.value,
            redirect_uri=redirect_uri,
        )

        return auth_url

    async def complete_authorization(
        self, code: str, state: str, redirect_uri: str
    ) -> OAuthProviderInfo:
        """Exchange the code and fetch the provider profile.

        Raises:
            ProviderError: If the exchange or profile request fails
        """
        _ = state  # Checked against the state cookie by the route
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            access_token = await self._exchange_code_for_token(
                client, code, redirect_uri
            )
            info = await self._fetch_profile(client, access_token)

        logfire.info(
            "OAuth authorization completed",
            provider=self.provider.value,
            provider_user_id=info.provider_user_id,
        )
        return info

    async def _exchange_code_for_token(
        self, client: httpx.AsyncClient, code: str, redirect_uri: str
    ) -> str:
        """Exchange authorization code for access token.

        Raises:
            ProviderError: If token exchange fails
        """
        data = {
            "grant_type": "authorization_code",
            "code": code,
            "redirect_uri": redirect_uri,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
        }

        try:
            response = await client.post(
                self.token_url,
                data=data,
                headers={"Accept": "application/json"},
            )
        except httpx.HTTPError as e:
            logfire.error(
                "OAuth token exchange HTTP error",
                provider=self.provider.value,
                error=str(e),
            )
            raise ProviderError(
                self.provider.value, f"HTTP error during token exchange: {e}"
            ) from e

        if response.status_code != 200:
            logfire.error(
                "OAuth token exchange failed",
                provider=self.provider.value,
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderError(
                self.provider.value, f"Token exchange failed: {response.status_code}"
            )

        # GitHub reports some failures as 200 with an "error" body
        result = self._decode(response, dict)
        access_token = result.get("access_token")
        if not access_token:
            raise ProviderError(
                self.provider.value,
                f"Token exchange failed: {result.get('error', 'no access_token')}",
            )
        return access_token

    def _decode(self, response: httpx.Response, expected: type) -> Any:
        """Parse a JSON body of the expected shape.

        Raises:
            ProviderError: If the body is not JSON or not of type `expected`
        """
        try:
            data = response.json()
        except ValueError as e:
            logfire.error(
                "OAuth provider returned a non-JSON body",
                provider=self.provider.value,
                url=str(response.request.url),
                content_type=response.headers.get("content-type"),
            )
            raise ProviderError(
                self.provider.value, "Provider returned a non-JSON response"
            ) from e

        if not isinstance(data, expected):
            raise ProviderError(
                self.provider.value,
                f"Expected a JSON {expected.__name__}, got {type(data).__name__}",
            )
        return data

    async def _get_json(
        self,
        client: httpx.AsyncClient,
        url: str,
        access_token: str,
        expected: type = dict,
    ) -> Any:
        """GET a provider API resource with the bearer token.

        Raises:
            ProviderError: If the request fails or the body is malformed
        """
        try:
            response = await client.get(
                url,
                headers={
                    "Authorization": f"Bearer {access_token}",
                    "Accept": "application/json",
                },
            )
        except httpx.HTTPError as e:
            logfire.error(
                "OAuth profile HTTP error", provider=self.provider.value, error=str(e)
            )
            raise ProviderError(
                self.provider.value, f"HTTP error fetching profile: {e}"
            ) from e

        if response.status_code != 200:
            logfire.error(
                "OAuth profile request failed",
                provider=self.provider.value,
                status_code=response.status_code,
                error=response.text,
            )
            raise ProviderError(
                self.provider.value,
                f"Profile request failed: {response.status_code}",
            )
        return self._decode(response, expected)

    async def _fetch_profile(
        self, client: httpx.AsyncClient, access_token: str
    ) -> OAuthProviderInfo:
        raise NotImplementedError


class MockOAuthClientMixin:
    """Deterministic stand-in for a provider, used by the test container.

    Tests set `profile` to control what the callback yields, or `error`
    to simulate a provider failure.
    """

    provider: AuthProvider
    authorize_url: str

    def __init__(self, profile: OAuthProviderInfo | None = None) -> None:
        self.profile = profile or self.default_profile()
        self.error: Exception | None = None

    def default_profile(self) -> OAuthProviderInfo:
        raise NotImplementedError

    async def initiate_authorization(self, state: str, redirect_uri: str) -> str:
        params = {"state": state, "redirect_uri": redirect_uri, "mock": "true"}
        return f"{self.authorize_url}?{urlencode(params)}"

    async def complete_authorization(
        self, code: str, state: str, redirect_uri: str
    ) -> OAuthProviderInfo:
        if self.error is not None:
            raise self.error
        return self.profile
