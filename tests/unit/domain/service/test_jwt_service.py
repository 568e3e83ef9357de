"""Unit tests for JWTService (session codec)."""

from uuid import uuid4

import pytest

from gallery.domain.error import InvalidTokenError
from gallery.domain.service import JWTService
from gallery.domain.value import UserId
from gallery.persistence.repository.inmemory import InMemoryUserRepository
from gallery.util.jwt import create_token
from tests.conftest import make_user


@pytest.fixture
def repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


@pytest.fixture
def jwt_service(auth_settings, repo) -> JWTService:
    return JWTService(auth_settings=auth_settings, user_repository=repo)


class TestAuthenticate:
    """Tests for JWTService.authenticate()."""

    @pytest.mark.asyncio
    async def test_round_trip(self, jwt_service, repo):
        """Should resolve an issued token to the same user id."""
        user = await repo.create(make_user())

        token = jwt_service.create_token(user.id)

        assert await jwt_service.authenticate(token) == user.id

    @pytest.mark.asyncio
    async def test_deleted_user_rejected_immediately(self, jwt_service, repo):
        """Should reject a valid token on the first request after deletion."""
        user = await repo.create(make_user())
        token = jwt_service.create_token(user.id)
        assert await jwt_service.authenticate(token) == user.id

        await repo.delete(user.id)

        with pytest.raises(InvalidTokenError):
            await jwt_service.authenticate(token)

    @pytest.mark.asyncio
    async def test_never_existing_user(self, jwt_service):
        token = jwt_service.create_token(UserId(uuid4()))

        with pytest.raises(InvalidTokenError):
            await jwt_service.authenticate(token)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, "", "garbage"])
    async def test_missing_or_malformed(self, jwt_service, token):
        with pytest.raises(InvalidTokenError):
            await jwt_service.authenticate(token)

    @pytest.mark.asyncio
    async def test_expired(self, auth_settings, jwt_service, repo):
        """Should reject a token past its expiry even if the user exists."""
        user = await repo.create(make_user())
        expired = create_token(
            str(user.id), auth_settings.model_copy(update={"jwt_expiry_days": -1})
        )

        with pytest.raises(InvalidTokenError):
            await jwt_service.authenticate(expired)

    @pytest.mark.asyncio
    async def test_non_uuid_subject(self, auth_settings, jwt_service):
        """Should reject a signed token whose user id is not a UUID."""
        token = create_token("not-a-uuid", auth_settings)

        with pytest.raises(InvalidTokenError):
            await jwt_service.authenticate(token)
