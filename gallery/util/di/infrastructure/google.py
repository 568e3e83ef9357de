"""Google infrastructure providers."""

from dishka import Scope, provide

from gallery.adapter.google.client import (
    GoogleOAuthClient,
    RealGoogleOAuthClient,
)
from gallery.config import Settings
from gallery.util.di.base import ProviderBase
from gallery.util.error import ConfigurationError


class GoogleProvider(ProviderBase):
    """Google component base."""

    __mock_component__ = "google"


class ProdGoogleProvider(GoogleProvider):
    """Production Google provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_google_oauth_client(self, settings: Settings) -> GoogleOAuthClient:
        """Provide Google OAuth client.

        Raises:
            ConfigurationError: If Google OAuth credentials are not configured
        """
        credentials = settings.auth.google
        if not credentials.client_id or not credentials.client_secret:
            raise ConfigurationError(
                "AUTH__GOOGLE__CLIENT_ID and AUTH__GOOGLE__CLIENT_SECRET must be configured"
            )

        return RealGoogleOAuthClient(
            client_id=credentials.client_id,
            client_secret=credentials.client_secret,
        )
