"""Domain services."""

from .auth_service import AuthService, OAuthClient
from .base import Service
from .jwt_service import JWTService
from .user_service import UserService
from .verifier import (
    DiscordVerifier,
    GithubVerifier,
    GoogleVerifier,
    LocalVerifier,
    OAuthVerifier,
    Verifier,
    VerifierRegistry,
)

__all__ = [
    "AuthService",
    "DiscordVerifier",
    "GithubVerifier",
    "GoogleVerifier",
    "JWTService",
    "LocalVerifier",
    "OAuthClient",
    "OAuthVerifier",
    "Service",
    "UserService",
    "Verifier",
    "VerifierRegistry",
]
