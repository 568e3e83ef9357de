"""Discord OAuth 2.0 client implementation."""

from typing import Any

import httpx

from gallery.adapter.error import ProviderError
from gallery.adapter.oauth2 import MockOAuthClientMixin, OAuth2CodeFlowClient
from gallery.domain.service.auth_service import OAuthClient
from gallery.domain.value import AuthProvider, OAuthProviderInfo

CDN_URL = "https://cdn.discordapp.com"


class DiscordOAuthClient(OAuthClient):
    """Base class for Discord OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealDiscordOAuthClient(OAuth2CodeFlowClient, DiscordOAuthClient):
    """Discord OAuth 2.0 client (authorization code grant)."""

    provider = AuthProvider.DISCORD
    authorize_url = "https://discord.com/oauth2/authorize"
    token_url = "https://discord.com/api/oauth2/token"
    user_info_url = "https://discord.com/api/users/@me"
    scope = "identify email"

    async def _fetch_profile(
        self, client: httpx.AsyncClient, access_token: str
    ) -> OAuthProviderInfo:
        data = await self._get_json(client, self.user_info_url, access_token)
        return self.profile_to_info(data)

    @staticmethod
    def profile_to_info(data: dict[str, Any]) -> OAuthProviderInfo:
        """Map a `/users/@me` payload to provider info.

        Discord only returns an avatar hash; animated hashes start with "a_".

        Raises:
            ProviderError: If the payload has no user id
        """
        user_id = data.get("id")
        if not user_id:
            raise ProviderError("discord", "Profile has no id")

        avatar_url = None
        avatar_hash = data.get("avatar")
        if avatar_hash:
            extension = "gif" if avatar_hash.startswith("a_") else "png"
            avatar_url = f"{CDN_URL}/avatars/{user_id}/{avatar_hash}.{extension}"

        return OAuthProviderInfo(
            provider=AuthProvider.DISCORD,
            provider_user_id=str(user_id),
            email=data.get("email"),
            email_verified=bool(data.get("verified", False)),
            display_name=data.get("global_name") or data.get("username"),
            avatar_url=avatar_url,
        )


class MockDiscordOAuthClient(MockOAuthClientMixin, DiscordOAuthClient):
    """Mock Discord OAuth client for testing."""

    provider = AuthProvider.DISCORD
    authorize_url = "https://discord.com/oauth2/authorize"

    def default_profile(self) -> OAuthProviderInfo:
        return OAuthProviderInfo(
            provider=AuthProvider.DISCORD,
            provider_user_id="80351110224678912",
            email="mock@discord.test",
            email_verified=True,
            display_name="Mock Discord User",
            avatar_url=f"{CDN_URL}/avatars/80351110224678912/abc123.png",
        )
