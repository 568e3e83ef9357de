"""Mock providers for testing."""

from .discord import MockDiscordProvider
from .github import MockGithubProvider
from .google import MockGoogleProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockDiscordProvider",
    "MockGithubProvider",
    "MockGoogleProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
