"""Discord infrastructure providers."""

from dishka import Scope, provide

from gallery.adapter.discord.client import (
    DiscordOAuthClient,
    RealDiscordOAuthClient,
)
from gallery.config import Settings
from gallery.util.di.base import ProviderBase
from gallery.util.error import ConfigurationError


class DiscordProvider(ProviderBase):
    """Discord component base."""

    __mock_component__ = "discord"


class ProdDiscordProvider(DiscordProvider):
    """Production Discord provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_discord_oauth_client(self, settings: Settings) -> DiscordOAuthClient:
        """Provide Discord OAuth client.

        Raises:
            ConfigurationError: If Discord OAuth credentials are not configured
        """
        credentials = settings.auth.discord
        if not credentials.client_id or not credentials.client_secret:
            raise ConfigurationError(
                "AUTH__DISCORD__CLIENT_ID and AUTH__DISCORD__CLIENT_SECRET must be configured"
            )

        return RealDiscordOAuthClient(
            client_id=credentials.client_id,
            client_secret=credentials.client_secret,
        )
