"""Unit tests for the route whitelist and gate."""

import pytest

from gallery.config import WhitelistSettings
from gallery.domain.error import InvalidTokenError
from gallery.domain.service import JWTService
from gallery.interface.api.gate import RouteGate, RouteWhitelist
from gallery.persistence.repository.inmemory import InMemoryUserRepository
from tests.conftest import make_user


class TestRouteWhitelist:
    """Tests for RouteWhitelist.is_whitelisted()."""

    def test_root_always_whitelisted(self):
        assert RouteWhitelist().is_whitelisted("/")

    def test_root_is_exact_match_only(self):
        assert not RouteWhitelist().is_whitelisted("/users/me")

    @pytest.mark.parametrize(
        "path, expected",
        [
            ("/health", True),
            ("/health/sub", True),
            ("/healthcheck", False),
            ("/Health", False),
            ("/api/health", False),
        ],
    )
    def test_segment_matching(self, path, expected):
        whitelist = RouteWhitelist(prefixes=["/health"])

        assert whitelist.is_whitelisted(path) is expected

    def test_raw_prefix_matching(self):
        whitelist = RouteWhitelist(prefixes=["/auth"], segment_boundary=False)

        assert whitelist.is_whitelisted("/auth/local/login")
        assert whitelist.is_whitelisted("/authadmin")

    def test_trailing_slash_prefix(self):
        whitelist = RouteWhitelist(prefixes=["/docs/"])

        assert whitelist.is_whitelisted("/docs/")
        assert whitelist.is_whitelisted("/docs/oauth2-redirect")

    def test_entries_are_normalized(self):
        whitelist = RouteWhitelist(prefixes=["health", "  /docs "])

        assert whitelist.prefixes == ("/health", "/docs")

    def test_root_entry_does_not_open_everything(self):
        whitelist = RouteWhitelist(prefixes=["/"])

        assert whitelist.prefixes == ()
        assert not whitelist.is_whitelisted("/users/me")

    def test_with_route(self):
        whitelist = RouteWhitelist(prefixes=["/health"])

        extended = whitelist.with_route("metrics")

        assert extended.is_whitelisted("/metrics")
        assert not whitelist.is_whitelisted("/metrics")

    def test_from_settings(self):
        settings = WhitelistSettings(routes=["/health"], extra_routes=["/status"])

        whitelist = RouteWhitelist.from_settings(settings)

        assert whitelist.is_whitelisted("/status/deep")
        assert not whitelist.is_whitelisted("/users/me")

    def test_default_settings(self):
        whitelist = RouteWhitelist.from_settings(WhitelistSettings())

        assert whitelist.is_whitelisted("/auth/local/login")
        assert whitelist.is_whitelisted("/auth/google/register/callback")
        assert not whitelist.is_whitelisted("/auth/logout")
        assert not whitelist.is_whitelisted("/users/me")


class TestRouteGate:
    """Tests for RouteGate.authenticate()."""

    @pytest.fixture
    def repo(self) -> InMemoryUserRepository:
        return InMemoryUserRepository()

    @pytest.fixture
    def jwt_service(self, auth_settings, repo) -> JWTService:
        return JWTService(auth_settings=auth_settings, user_repository=repo)

    @pytest.fixture
    def gate(self) -> RouteGate:
        return RouteGate(RouteWhitelist(prefixes=["/health"]))

    @pytest.mark.asyncio
    async def test_whitelisted_path_resolves_no_identity(self, gate, jwt_service, repo):
        """Should not attach an identity even when a valid token is sent."""
        user = await repo.create(make_user())
        token = jwt_service.create_token(user.id)

        assert await gate.authenticate("/health", token, jwt_service) is None
        assert await gate.authenticate("/", None, jwt_service) is None

    @pytest.mark.asyncio
    async def test_protected_path_with_valid_token(self, gate, jwt_service, repo):
        user = await repo.create(make_user())
        token = jwt_service.create_token(user.id)

        assert await gate.authenticate("/users/me", token, jwt_service) == user.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, "not-a-jwt"])
    async def test_protected_path_without_valid_token(self, gate, jwt_service, token):
        with pytest.raises(InvalidTokenError):
            await gate.authenticate("/healthcheck", token, jwt_service)

    @pytest.mark.asyncio
    async def test_protected_path_for_deleted_user(self, gate, jwt_service, repo):
        user = await repo.create(make_user())
        token = jwt_service.create_token(user.id)
        await repo.delete(user.id)

        with pytest.raises(InvalidTokenError):
            await gate.authenticate("/users/me", token, jwt_service)
