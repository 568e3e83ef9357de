"""PostgreSQL implementation of the User repository."""

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import delete, exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from gallery.domain.model import User
from gallery.domain.repository import UserRepository
from gallery.domain.value import AuthProvider, Email, UserId
from gallery.persistence.mappers import profile_to_dict, row_to_user, user_to_dict
from gallery.persistence.tables import linked_column_name, users_table


class PostgresUserRepository(UserRepository):
    """PostgreSQL implementation of UserRepository.

    The unique constraint on `users.email` is what decides concurrent
    registrations for the same email: the losing INSERT raises
    IntegrityError, which the domain service translates.
    """

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        stmt = select(users_table).where(users_table.c.id == user_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their normalized email.

        Args:
            email: Email to search for

        Returns:
            User if found, None otherwise
        """
        stmt = select(users_table).where(users_table.c.email == email.root)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_user(dict(row)) if row else None

    async def exists(self, user_id: UserId) -> bool:
        stmt = select(exists().where(users_table.c.id == user_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def create(self, user: User) -> User:
        """Insert a new user.

        Runs inside a savepoint so a duplicate-email failure leaves the
        surrounding request transaction usable.

        Raises:
            IntegrityError: If the email is already taken
        """
        async with self.session.begin_nested():
            stmt = users_table.insert().values(**user_to_dict(user))
            await self.session.execute(stmt)
        return user

    async def link_provider(self, user_id: UserId, provider: AuthProvider) -> None:
        """Set one provider flag, leaving the others untouched.

        Runs inside a savepoint so a failed UPDATE rolls back alone and the
        login that triggered it can still commit.
        """
        stmt = (
            users_table.update()
            .where(users_table.c.id == user_id)
            .values(
                **{linked_column_name(provider): True},
                updated_at=datetime.now(timezone.utc),
            )
        )
        async with self.session.begin_nested():
            await self.session.execute(stmt)

    async def save(self, user: User) -> User:
        """Update profile columns of an existing user.

        Email, password hash and linked flags are not written here.
        """
        stmt = (
            users_table.update()
            .where(users_table.c.id == user.id)
            .values(**profile_to_dict(user))
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return user

    async def delete(self, user_id: UserId) -> None:
        stmt = delete(users_table).where(users_table.c.id == user_id)
        await self.session.execute(stmt)
        await self.session.flush()
