"""Unit tests for the user profile use cases."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from gallery.application.usecase.user import (
    GetCurrentUserUseCase,
    UpdateUserProfileUseCase,
)
from gallery.application.usecase.user.get_current_user import GetCurrentUserRequest
from gallery.application.usecase.user.update_user_profile import (
    UpdateUserProfileRequest,
)
from gallery.domain.error import NotFoundError
from gallery.domain.repository import UserRepository
from gallery.domain.service import UserService
from gallery.domain.value import AuthProvider, LinkedProviders, UserId
from tests.conftest import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_returns_profile(self, unit_env):
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.create(
            make_user(
                linked=LinkedProviders(local=True, discord=True),
                password_hash="pbkdf2:sha256:1000$salt$hash",
                display_name="A B",
            )
        )
        use_case = GetCurrentUserUseCase(await unit_env.get(UserService))

        # Act
        response = await use_case.execute(GetCurrentUserRequest(user_id=user.id))

        # Assert
        assert response.user_id == str(user.id)
        assert response.email == "a@x.com"
        assert response.linked_providers == [AuthProvider.LOCAL, AuthProvider.DISCORD]
        assert "password_hash" not in response.model_dump()

    @pytest.mark.asyncio
    async def test_missing_user(self, unit_env):
        use_case = GetCurrentUserUseCase(await unit_env.get(UserService))

        with pytest.raises(NotFoundError):
            await use_case.execute(GetCurrentUserRequest(user_id=UserId(uuid4())))


class TestUpdateUserProfileUseCase:
    """Tests for UpdateUserProfileUseCase."""

    @pytest.mark.asyncio
    async def test_update_display_name(self, unit_env):
        """Should update only the given fields."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.create(make_user(first_name="A", display_name="A B"))
        use_case = UpdateUserProfileUseCase(await unit_env.get(UserService))

        # Act
        response = await use_case.execute(
            UpdateUserProfileRequest(user_id=user.id, display_name="Alice")
        )

        # Assert
        assert response.display_name == "Alice"
        assert response.first_name == "A"

        # Verify persistence
        updated_user = await user_repo.find_by_id(user.id)
        assert updated_user.display_name == "Alice"
        assert updated_user.updated_at >= user.updated_at

    @pytest.mark.asyncio
    async def test_update_keeps_email_and_providers(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.create(make_user(linked=LinkedProviders(github=True)))
        use_case = UpdateUserProfileUseCase(await unit_env.get(UserService))

        await use_case.execute(
            UpdateUserProfileRequest(user_id=user.id, avatar_url="https://img.test/a")
        )

        updated_user = await user_repo.find_by_id(user.id)
        assert updated_user.avatar_url == "https://img.test/a"
        assert updated_user.email == user.email
        assert updated_user.linked_providers == LinkedProviders(github=True)

    @pytest.mark.asyncio
    async def test_update_missing_user(self, unit_env):
        use_case = UpdateUserProfileUseCase(await unit_env.get(UserService))

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateUserProfileRequest(user_id=UserId(uuid4()), display_name="X")
            )

    @pytest.mark.asyncio
    async def test_update_phone(self, unit_env):
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.create(make_user())
        use_case = UpdateUserProfileUseCase(await unit_env.get(UserService))

        response = await use_case.execute(
            UpdateUserProfileRequest(user_id=user.id, phone="+15550100")
        )

        assert response.phone == "+15550100"
        assert (await user_repo.find_by_id(user.id)).phone == "+15550100"


class TestUpdateUserProfileRequest:
    """Validation of UpdateUserProfileRequest."""

    @pytest.mark.parametrize(
        "fields",
        [
            {"first_name": ""},
            {"last_name": ""},
            {"display_name": ""},
            {"phone": "12-34"},
            {"phone": ""},
        ],
    )
    def test_rejects(self, fields):
        with pytest.raises(ValidationError):
            UpdateUserProfileRequest(user_id=UserId(uuid4()), **fields)

    def test_omitted_fields_allowed(self):
        request = UpdateUserProfileRequest(user_id=UserId(uuid4()))

        assert request.model_dump(exclude={"user_id"}, exclude_none=True) == {}
