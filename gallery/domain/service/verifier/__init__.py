"""Credential verifiers, one per authentication provider."""

from .base import Verifier
from .local import LocalLoginProof, LocalRegistrationProof, LocalVerifier
from .oauth import DiscordVerifier, GithubVerifier, GoogleVerifier, OAuthVerifier
from .registry import VerifierRegistry

__all__ = [
    "DiscordVerifier",
    "GithubVerifier",
    "GoogleVerifier",
    "LocalLoginProof",
    "LocalRegistrationProof",
    "LocalVerifier",
    "OAuthVerifier",
    "Verifier",
    "VerifierRegistry",
]
