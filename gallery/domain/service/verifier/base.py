"""Credential verifier contract."""

from abc import ABC, abstractmethod
from typing import ClassVar, Generic, TypeVar

from gallery.domain.service.user_service import UserService
from gallery.domain.value import AuthProvider, UserId

LoginProofT = TypeVar("LoginProofT")
RegisterProofT = TypeVar("RegisterProofT")


class Verifier(ABC, Generic[LoginProofT, RegisterProofT]):
    """Turns a provider-specific proof into an identity decision.

    Login and registration are separate entry points. Login resolves an
    existing identity by email; registration refuses to create a second
    identity for an email that already has one.
    """

    provider: ClassVar[AuthProvider]

    def __init__(self, user_service: UserService) -> None:
        """Initialize verifier.

        Args:
            user_service: User domain service (identity store access)
        """
        self.user_service = user_service

    @abstractmethod
    async def login(self, proof: LoginProofT) -> UserId:
        """Authenticate an existing identity.

        Returns:
            ID of the authenticated user

        Raises:
            AuthenticationError: A subclass describing the rejection
        """
        pass

    @abstractmethod
    async def register(self, proof: RegisterProofT) -> UserId:
        """Create a new identity.

        Returns:
            ID of the created user

        Raises:
            AuthenticationError: A subclass describing the rejection
            ValidationError: If the registration input is malformed
        """
        pass
