"""User repository interface (the identity store)."""

from abc import ABC, abstractmethod
from typing import Optional

from gallery.domain.model.user import User
from gallery.domain.value import AuthProvider, Email, UserId


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for identity persistence operations.
    Implementations live in the persistence layer. Email uniqueness is
    enforced by the store itself, not by callers.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their (normalized) email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def exists(self, user_id: UserId) -> bool:
        """Check whether a user with this ID exists.

        Args:
            user_id: The user's unique identifier

        Returns:
            True if the user exists, False otherwise
        """
        pass

    @abstractmethod
    async def create(self, user: User) -> User:
        """Insert a new user.

        Args:
            user: The user to insert

        Returns:
            The created user

        Raises:
            IntegrityError: If a user with the same email already exists
        """
        pass

    @abstractmethod
    async def link_provider(self, user_id: UserId, provider: AuthProvider) -> None:
        """Mark a provider as linked without touching the other flags.

        Args:
            user_id: The user's unique identifier
            provider: The provider that just authenticated this user
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Update an existing user's profile.

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass

    @abstractmethod
    async def delete(self, user_id: UserId) -> None:
        """Delete a user.

        Args:
            user_id: The user to delete
        """
        pass
