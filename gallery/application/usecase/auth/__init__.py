"""Authentication use cases."""

from .local import LocalLoginUseCase, LocalRegisterUseCase
from .oauth import OAuthLoginUseCase, OAuthRegisterUseCase

__all__ = [
    "LocalLoginUseCase",
    "LocalRegisterUseCase",
    "OAuthLoginUseCase",
    "OAuthRegisterUseCase",
]
