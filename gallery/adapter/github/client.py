"""GitHub OAuth client implementation.

GitHub omits the email from `/user` when the user keeps it private, so the
client falls back to the primary verified address from `/user/emails`.
"""

from typing import Any

import httpx
import logfire

from gallery.adapter.error import ProviderError
from gallery.adapter.oauth2 import MockOAuthClientMixin, OAuth2CodeFlowClient
from gallery.domain.service.auth_service import OAuthClient
from gallery.domain.value import AuthProvider, OAuthProviderInfo


class GithubOAuthClient(OAuthClient):
    """Base class for GitHub OAuth clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGithubOAuthClient(OAuth2CodeFlowClient, GithubOAuthClient):
    """GitHub OAuth app client."""

    provider = AuthProvider.GITHUB
    authorize_url = "https://github.com/login/oauth/authorize"
    token_url = "https://github.com/login/oauth/access_token"
    user_info_url = "https://api.github.com/user"
    emails_url = "https://api.github.com/user/emails"
    scope = "read:user user:email"

    async def _fetch_profile(
        self, client: httpx.AsyncClient, access_token: str
    ) -> OAuthProviderInfo:
        data = await self._get_json(client, self.user_info_url, access_token)
        if not data.get("email"):
            emails = await self._get_json(
                client, self.emails_url, access_token, expected=list
            )
            data = {**data, "email": self.primary_email(emails)}
            logfire.debug(
                "GitHub email resolved from /user/emails",
                found=data["email"] is not None,
            )
        return self.profile_to_info(data)

    @staticmethod
    def primary_email(emails: list[dict[str, Any]]) -> str | None:
        """Pick the primary verified address, if GitHub lists one."""
        for entry in emails:
            if entry.get("primary") and entry.get("verified"):
                return entry.get("email")
        return None

    @staticmethod
    def profile_to_info(data: dict[str, Any]) -> OAuthProviderInfo:
        """Map a `/user` payload to provider info.

        GitHub gives no verification flag for the profile email, so
        `email_verified` stays None.

        Raises:
            ProviderError: If the payload has no user id
        """
        user_id = data.get("id")
        if user_id is None:
            raise ProviderError("github", "Profile has no id")

        return OAuthProviderInfo(
            provider=AuthProvider.GITHUB,
            provider_user_id=str(user_id),
            email=data.get("email"),
            email_verified=None,
            display_name=data.get("name") or data.get("login"),
            avatar_url=data.get("avatar_url"),
        )


class MockGithubOAuthClient(MockOAuthClientMixin, GithubOAuthClient):
    """Mock GitHub OAuth client for testing."""

    provider = AuthProvider.GITHUB
    authorize_url = "https://github.com/login/oauth/authorize"

    def default_profile(self) -> OAuthProviderInfo:
        return OAuthProviderInfo(
            provider=AuthProvider.GITHUB,
            provider_user_id="583231",
            email="mock@github.test",
            display_name="mockcat",
            avatar_url="https://avatars.githubusercontent.com/u/583231",
        )
