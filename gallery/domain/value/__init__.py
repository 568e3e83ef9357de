"""Domain value objects for Gallery."""

from gallery.domain.value.identifiers import UserId
from gallery.domain.value.types import (
    OAUTH_PROVIDERS,
    AuthProvider,
    Email,
    LinkedProviders,
    OAuthProviderInfo,
)

__all__ = [
    # Identifiers
    "UserId",
    # Types
    "AuthProvider",
    "Email",
    "LinkedProviders",
    "OAUTH_PROVIDERS",
    "OAuthProviderInfo",
]
