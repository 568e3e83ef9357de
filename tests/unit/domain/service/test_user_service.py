"""Unit tests for UserService."""

from uuid import uuid4

import pytest

from gallery.domain.error import DuplicateIdentityError, NotFoundError
from gallery.domain.service import UserService
from gallery.domain.value import AuthProvider, Email, LinkedProviders, UserId
from gallery.persistence.repository.inmemory import InMemoryUserRepository
from tests.conftest import make_user


class TestCreateUser:
    """Tests for UserService.create_user()."""

    @pytest.mark.asyncio
    async def test_create_and_find_by_email(self):
        """Should store the user under its normalized email."""
        service = UserService(InMemoryUserRepository())
        user = make_user(email="A@X.com")

        await service.create_user(user)

        found = await service.find_by_email(Email("a@x.com"))
        assert found is not None
        assert found.id == user.id

    @pytest.mark.asyncio
    async def test_store_constraint_becomes_duplicate_identity(self):
        """Should translate the store's unique violation, not leak it."""
        service = UserService(InMemoryUserRepository())
        await service.create_user(make_user(email="a@x.com"))

        with pytest.raises(DuplicateIdentityError):
            await service.create_user(make_user(email="a@x.com"))


class TestLinkProvider:
    """Tests for UserService.link_provider()."""

    @pytest.mark.asyncio
    async def test_adds_provider_keeps_others(self):
        """Should add the new provider flag without clearing existing ones."""
        repo = InMemoryUserRepository()
        service = UserService(repo)
        user = await service.create_user(make_user())

        await service.link_provider(user, AuthProvider.GITHUB)

        stored = await repo.find_by_id(user.id)
        assert stored.linked_providers == LinkedProviders(local=True, github=True)

    @pytest.mark.asyncio
    async def test_already_linked_is_noop(self):
        repo = InMemoryUserRepository()
        service = UserService(repo)
        user = await service.create_user(make_user())

        await service.link_provider(user, AuthProvider.LOCAL)

        stored = await repo.find_by_id(user.id)
        assert stored.updated_at == user.updated_at


class TestGetById:
    """Tests for UserService.get_by_id()."""

    @pytest.mark.asyncio
    async def test_missing_user(self):
        service = UserService(InMemoryUserRepository())

        with pytest.raises(NotFoundError):
            await service.get_by_id(UserId(uuid4()))
