"""In-memory user repository for testing."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.exc import IntegrityError

from gallery.domain.model.user import User
from gallery.domain.repository.user import UserRepository
from gallery.domain.value import AuthProvider, Email, UserId


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing.

    Mirrors the unique constraint on email by raising the same
    IntegrityError the database driver would.
    """

    def __init__(self) -> None:
        self._users: dict[UserId, User] = {}

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their email."""
        for user in self._users.values():
            if user.email == email:
                return user
        return None

    async def exists(self, user_id: UserId) -> bool:
        return user_id in self._users

    async def create(self, user: User) -> User:
        """Insert a user, rejecting duplicate ids and emails."""
        if user.id in self._users or any(
            existing.email == user.email for existing in self._users.values()
        ):
            raise IntegrityError(
                "INSERT INTO users", {"email": user.email.root}, Exception("Duplicate email")
            )
        self._users[user.id] = user
        return user

    async def link_provider(self, user_id: UserId, provider: AuthProvider) -> None:
        user = self._users.get(user_id)
        if user:
            self._users[user_id] = user.model_copy(
                update={
                    "linked_providers": user.linked_providers.link(provider),
                    "updated_at": datetime.now(timezone.utc),
                }
            )

    async def save(self, user: User) -> User:
        """Update profile fields of an existing user."""
        existing = self._users.get(user.id)
        if existing:
            self._users[user.id] = existing.model_copy(
                update={
                    "display_name": user.display_name,
                    "first_name": user.first_name,
                    "last_name": user.last_name,
                    "avatar_url": user.avatar_url,
                    "phone": user.phone,
                    "updated_at": user.updated_at,
                }
            )
        return user

    async def delete(self, user_id: UserId) -> None:
        self._users.pop(user_id, None)
