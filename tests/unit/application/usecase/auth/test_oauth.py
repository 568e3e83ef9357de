"""Unit tests for the OAuth callback use cases."""

import pytest
from dishka import AsyncContainer

from gallery.adapter.error import ProviderError
from gallery.adapter.github.client import GithubOAuthClient
from gallery.adapter.google.client import GoogleOAuthClient
from gallery.application.usecase.auth import OAuthLoginUseCase, OAuthRegisterUseCase
from gallery.application.usecase.auth.oauth import OAuthCallbackRequest
from gallery.domain.error import (
    EmailUnverifiedError,
    IdentityNotFoundError,
)
from gallery.domain.repository import UserRepository
from gallery.domain.value import AuthProvider, Email, LinkedProviders
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def callback(provider: AuthProvider, intent: str = "login") -> OAuthCallbackRequest:
    return OAuthCallbackRequest(
        provider=provider,
        code="mock-code",
        state="mock-state",
        redirect_uri=f"http://localhost:8000/auth/{provider.value}/{intent}/callback",
    )


class TestOAuthRegisterUseCase:
    """Tests for OAuthRegisterUseCase."""

    @pytest.mark.asyncio
    async def test_register_with_google(self, unit_env: AsyncContainer):
        # Arrange
        use_case = await unit_env.get(OAuthRegisterUseCase)
        user_repo = await unit_env.get(UserRepository)

        # Act
        response = await use_case.execute(callback(AuthProvider.GOOGLE, "register"))

        # Assert
        user = await user_repo.find_by_email(Email("mock@google.test"))
        assert str(user.id) == response.user_id
        assert user.linked_providers == LinkedProviders(google=True)
        assert (user.first_name, user.last_name) == ("Mock", "Google")

    @pytest.mark.asyncio
    async def test_unverified_google_email(self, unit_env: AsyncContainer):
        google = await unit_env.get(GoogleOAuthClient)
        google.profile = google.profile.model_copy(update={"email_verified": False})
        use_case = await unit_env.get(OAuthRegisterUseCase)

        with pytest.raises(EmailUnverifiedError):
            await use_case.execute(callback(AuthProvider.GOOGLE, "register"))

    @pytest.mark.asyncio
    async def test_provider_failure(self, unit_env: AsyncContainer):
        google = await unit_env.get(GoogleOAuthClient)
        google.error = ProviderError("google", "invalid_grant")
        use_case = await unit_env.get(OAuthRegisterUseCase)

        with pytest.raises(ProviderError):
            await use_case.execute(callback(AuthProvider.GOOGLE, "register"))


class TestOAuthLoginUseCase:
    """Tests for OAuthLoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_without_identity(self, unit_env: AsyncContainer):
        use_case = await unit_env.get(OAuthLoginUseCase)

        with pytest.raises(IdentityNotFoundError):
            await use_case.execute(callback(AuthProvider.GITHUB))

    @pytest.mark.asyncio
    async def test_login_with_second_provider_links_it(self, unit_env: AsyncContainer):
        """GitHub login for a Google-registered email reaches the same user."""
        # Arrange
        registered = await (await unit_env.get(OAuthRegisterUseCase)).execute(
            callback(AuthProvider.GOOGLE, "register")
        )
        github = await unit_env.get(GithubOAuthClient)
        github.profile = github.profile.model_copy(update={"email": "Mock@Google.test"})

        # Act
        response = await (await unit_env.get(OAuthLoginUseCase)).execute(
            callback(AuthProvider.GITHUB)
        )

        # Assert
        assert response.user_id == registered.user_id
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.find_by_email(Email("mock@google.test"))
        assert user.linked_providers == LinkedProviders(google=True, github=True)
