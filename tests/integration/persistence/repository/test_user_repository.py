"""Integration tests for PostgresUserRepository.

These tests need the migrated schema in the database at DATABASE__URL.
Each test runs in a request scope whose session is rolled back when the
test raises, and committed otherwise, so emails are made unique per run.
"""

from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from gallery.domain.repository import UserRepository
from gallery.domain.value import AuthProvider, Email, LinkedProviders
from tests.conftest import make_user
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})


def unique_email() -> str:
    return f"it-{uuid4().hex[:12]}@gallery.test"


class TestUserRepositoryIntegration:
    """Integration tests for PostgresUserRepository."""

    @pytest.mark.asyncio
    async def test_create_and_find_by_email(self, integration_env):
        # Arrange
        user_repo = await integration_env.get(UserRepository)
        user = make_user(email=unique_email(), password_hash="hash")

        # Act
        await user_repo.create(user)

        # Assert
        found = await user_repo.find_by_email(user.email)
        assert found is not None
        assert found.id == user.id
        assert found.password_hash == "hash"
        assert await user_repo.exists(user.id)

        await user_repo.delete(user.id)

    @pytest.mark.asyncio
    async def test_duplicate_email_violates_constraint(self, integration_env):
        """The unique constraint must reject a second identity for an email."""
        user_repo = await integration_env.get(UserRepository)
        email = unique_email()
        first = await user_repo.create(make_user(email=email))

        with pytest.raises(IntegrityError):
            await user_repo.create(make_user(email=email))

        # The savepoint keeps the session usable
        assert await user_repo.find_by_email(Email(email)) is not None
        await user_repo.delete(first.id)

    @pytest.mark.asyncio
    async def test_link_provider_keeps_other_flags(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        user = await user_repo.create(make_user(email=unique_email()))

        await user_repo.link_provider(user.id, AuthProvider.DISCORD)

        found = await user_repo.find_by_id(user.id)
        assert found.linked_providers == LinkedProviders(local=True, discord=True)
        await user_repo.delete(user.id)

    @pytest.mark.asyncio
    async def test_delete(self, integration_env):
        user_repo = await integration_env.get(UserRepository)
        user = await user_repo.create(make_user(email=unique_email()))

        await user_repo.delete(user.id)

        assert not await user_repo.exists(user.id)
        assert await user_repo.find_by_id(user.id) is None
