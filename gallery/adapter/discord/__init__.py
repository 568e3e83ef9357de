"""Discord OAuth adapter."""

from .client import (
    MockDiscordOAuthClient,
    RealDiscordOAuthClient,
    DiscordOAuthClient,
)

__all__ = ["DiscordOAuthClient", "RealDiscordOAuthClient", "MockDiscordOAuthClient"]
