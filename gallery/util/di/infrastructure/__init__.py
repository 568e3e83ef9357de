"""Infrastructure providers."""

# Import bases
from .discord import DiscordProvider
from .github import GithubProvider
from .google import GoogleProvider
from .oauth import OAuthAggregatorProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .discord import ProdDiscordProvider  # noqa: F401
from .github import ProdGithubProvider  # noqa: F401
from .google import ProdGoogleProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "DiscordProvider",
    "GithubProvider",
    "GoogleProvider",
    "OAuthAggregatorProvider",
    "PersistenceProvider",
    "ProdDiscordProvider",
    "ProdGithubProvider",
    "ProdGoogleProvider",
    "ProdPersistenceProvider",
]
