"""GitHub OAuth adapter."""

from .client import (
    MockGithubOAuthClient,
    RealGithubOAuthClient,
    GithubOAuthClient,
)

__all__ = ["GithubOAuthClient", "RealGithubOAuthClient", "MockGithubOAuthClient"]
