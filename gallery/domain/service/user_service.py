"""User domain service."""

import logfire
from sqlalchemy.exc import IntegrityError

from gallery.domain.error import DuplicateIdentityError, NotFoundError
from gallery.domain.model import User
from gallery.domain.repository import UserRepository
from gallery.domain.value import AuthProvider, Email, UserId

from .base import Service


class UserService(Service):
    """Domain service for identity store operations."""

    def __init__(self, user_repository: UserRepository) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
        """
        self.user_repository = user_repository

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def find_by_email(self, email: Email) -> User | None:
        """Get user by email.

        Args:
            email: Normalized email

        Returns:
            User if found, None otherwise
        """
        with logfire.span("user_service.find_by_email"):
            return await self.user_repository.find_by_email(email)

    async def exists(self, user_id: UserId) -> bool:
        """Check whether a user exists."""
        return await self.user_repository.exists(user_id)

    async def create_user(self, user: User) -> User:
        """Create a new identity.

        The store's unique email constraint decides races between two
        registrations of the same email.

        Args:
            user: Fully populated user with at least one linked provider

        Returns:
            Created user

        Raises:
            DuplicateIdentityError: If the email already has an identity
        """
        with logfire.span(
            "user_service.create_user",
            user_id=str(user.id),
            providers=[p.value for p in user.linked_providers.names()],
        ):
            try:
                created = await self.user_repository.create(user)
            except IntegrityError:
                logfire.warn("Duplicate identity", user_id=str(user.id))
                raise DuplicateIdentityError(user.email.root)

            logfire.info("User created", user_id=str(created.id))
            return created

    async def link_provider(self, user: User, provider: AuthProvider) -> None:
        """Record that `provider` authenticated this user.

        Args:
            user: Existing user
            provider: Provider to link (no-op when already linked)
        """
        if user.is_linked(provider):
            return

        with logfire.span(
            "user_service.link_provider",
            user_id=str(user.id),
            provider=provider.value,
        ):
            await self.user_repository.link_provider(user.id, provider)
            logfire.info(
                "Provider linked", user_id=str(user.id), provider=provider.value
            )

    async def save(self, user: User) -> User:
        """Save profile changes of an existing user."""
        with logfire.span("user_service.save", user_id=str(user.id)):
            return await self.user_repository.save(user)
