"""Unit tests for VerifierRegistry."""

import pytest

from gallery.domain.service import (
    DiscordVerifier,
    GithubVerifier,
    GoogleVerifier,
    LocalVerifier,
    UserService,
    VerifierRegistry,
)
from gallery.domain.value import AuthProvider
from gallery.persistence.repository.inmemory import InMemoryUserRepository


@pytest.fixture
def user_service() -> UserService:
    return UserService(InMemoryUserRepository())


def test_maps_every_provider(user_service, auth_settings):
    registry = VerifierRegistry(
        [
            LocalVerifier(user_service, auth_settings),
            DiscordVerifier(user_service),
            GithubVerifier(user_service),
            GoogleVerifier(user_service),
        ]
    )

    assert set(registry.providers) == set(AuthProvider)
    assert isinstance(registry.local, LocalVerifier)
    assert isinstance(registry.oauth(AuthProvider.GITHUB), GithubVerifier)


def test_rejects_duplicate_provider(user_service):
    with pytest.raises(ValueError):
        VerifierRegistry([GoogleVerifier(user_service), GoogleVerifier(user_service)])


def test_local_is_not_oauth(user_service, auth_settings):
    registry = VerifierRegistry([LocalVerifier(user_service, auth_settings)])

    with pytest.raises(ValueError):
        registry.oauth(AuthProvider.LOCAL)


def test_unsupported_provider(user_service):
    registry = VerifierRegistry([DiscordVerifier(user_service)])

    with pytest.raises(ValueError):
        registry.get(AuthProvider.GOOGLE)
