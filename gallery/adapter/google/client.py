"""Google OAuth 2.0 / OpenID Connect client implementation."""

from typing import Any

import httpx

from gallery.adapter.error import ProviderError
from gallery.adapter.oauth2 import MockOAuthClientMixin, OAuth2CodeFlowClient
from gallery.domain.service.auth_service import OAuthClient
from gallery.domain.value import AuthProvider, OAuthProviderInfo


class GoogleOAuthClient(OAuthClient):
    """Base class for Google OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGoogleOAuthClient(OAuth2CodeFlowClient, GoogleOAuthClient):
    """Google OAuth 2.0 client reading the OpenID Connect userinfo endpoint."""

    provider = AuthProvider.GOOGLE
    authorize_url = "https://accounts.google.com/o/oauth2/v2/auth"
    token_url = "https://oauth2.googleapis.com/token"
    user_info_url = "https://openidconnect.googleapis.com/v1/userinfo"
    scope = "openid email profile"

    async def _fetch_profile(
        self, client: httpx.AsyncClient, access_token: str
    ) -> OAuthProviderInfo:
        data = await self._get_json(client, self.user_info_url, access_token)
        return self.profile_to_info(data)

    @staticmethod
    def profile_to_info(data: dict[str, Any]) -> OAuthProviderInfo:
        """Map a userinfo payload to provider info.

        `email_verified` is sometimes serialized as the string "true"/"false".

        Raises:
            ProviderError: If the payload has no subject
        """
        subject = data.get("sub")
        if not subject:
            raise ProviderError("google", "Profile has no sub")

        verified = data.get("email_verified", False)
        if isinstance(verified, str):
            verified = verified.lower() == "true"

        return OAuthProviderInfo(
            provider=AuthProvider.GOOGLE,
            provider_user_id=str(subject),
            email=data.get("email"),
            email_verified=bool(verified),
            display_name=data.get("name"),
            first_name=data.get("given_name"),
            last_name=data.get("family_name"),
            avatar_url=data.get("picture"),
        )


class MockGoogleOAuthClient(MockOAuthClientMixin, GoogleOAuthClient):
    """Mock Google OAuth client for testing."""

    provider = AuthProvider.GOOGLE
    authorize_url = "https://accounts.google.com/o/oauth2/v2/auth"

    def default_profile(self) -> OAuthProviderInfo:
        return OAuthProviderInfo(
            provider=AuthProvider.GOOGLE,
            provider_user_id="109876543210987654321",
            email="mock@google.test",
            email_verified=True,
            display_name="Mock Google",
            first_name="Mock",
            last_name="Google",
            avatar_url="https://lh3.googleusercontent.com/a/mock",
        )
