"""Mock GitHub providers for testing."""

from dishka import Scope, provide

from gallery.adapter.github.client import GithubOAuthClient, MockGithubOAuthClient
from gallery.util.di.infrastructure.github import GithubProvider


class MockGithubProvider(GithubProvider):
    """Mock GitHub provider using mock OAuth client."""

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_github_oauth_client(self) -> GithubOAuthClient:
        """Provide mock GitHub OAuth client."""
        return MockGithubOAuthClient()
