"""Google OAuth adapter."""

from .client import (
    MockGoogleOAuthClient,
    RealGoogleOAuthClient,
    GoogleOAuthClient,
)

__all__ = ["GoogleOAuthClient", "RealGoogleOAuthClient", "MockGoogleOAuthClient"]
