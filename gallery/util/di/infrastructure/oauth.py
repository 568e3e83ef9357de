"""OAuth infrastructure provider for multi-provider authentication."""

from dishka import Scope, provide

from gallery.adapter.discord.client import DiscordOAuthClient
from gallery.adapter.github.client import GithubOAuthClient
from gallery.adapter.google.client import GoogleOAuthClient
from gallery.domain.service.auth_service import OAuthClient
from gallery.domain.value import AuthProvider
from gallery.util.di.base import ProviderBase


class OAuthAggregatorProvider(ProviderBase):
    """Provider that aggregates all OAuth clients into a dictionary."""

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_oauth_clients(
        self,
        discord_oauth_client: DiscordOAuthClient,
        github_oauth_client: GithubOAuthClient,
        google_oauth_client: GoogleOAuthClient,
    ) -> dict[AuthProvider, OAuthClient]:
        """Provide dictionary of all OAuth clients by provider.

        Args:
            discord_oauth_client: Discord OAuth client (specific type)
            github_oauth_client: GitHub OAuth client (specific type)
            google_oauth_client: Google OAuth client (specific type)

        Returns:
            Dictionary mapping AuthProvider to OAuthClient
        """
        return {
            AuthProvider.DISCORD: discord_oauth_client,
            AuthProvider.GITHUB: github_oauth_client,
            AuthProvider.GOOGLE: google_oauth_client,
        }
