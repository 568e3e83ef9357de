"""GitHub infrastructure providers."""

from dishka import Scope, provide

from gallery.adapter.github.client import (
    GithubOAuthClient,
    RealGithubOAuthClient,
)
from gallery.config import Settings
from gallery.util.di.base import ProviderBase
from gallery.util.error import ConfigurationError


class GithubProvider(ProviderBase):
    """GitHub component base."""

    __mock_component__ = "github"


class ProdGithubProvider(GithubProvider):
    """Production GitHub provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_github_oauth_client(self, settings: Settings) -> GithubOAuthClient:
        """Provide GitHub OAuth client.

        Raises:
            ConfigurationError: If GitHub OAuth credentials are not configured
        """
        credentials = settings.auth.github
        if not credentials.client_id or not credentials.client_secret:
            raise ConfigurationError(
                "AUTH__GITHUB__CLIENT_ID and AUTH__GITHUB__CLIENT_SECRET must be configured"
            )

        return RealGithubOAuthClient(
            client_id=credentials.client_id,
            client_secret=credentials.client_secret,
        )
