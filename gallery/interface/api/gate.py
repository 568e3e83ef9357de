"""Route gate: decides which requests need a session token.

Every HTTP request passes through `AuthenticationMiddleware`. Whitelisted
paths go straight to their handler with no identity attached. Everything
else must carry a valid token for a user that still exists, or gets a 401
before any handler runs.
"""

import logging
from typing import Iterable

from fastapi import Request, status
from fastapi.responses import JSONResponse
from pydantic import field_validator
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response
from starlette.types import ASGIApp

from gallery.config import WhitelistSettings
from gallery.domain.error import InvalidTokenError
from gallery.domain.service import JWTService
from gallery.domain.value import UserId
from gallery.domain.value.common import ValueObject

logger = logging.getLogger(__name__)

ROOT_PATH = "/"
AUTH_COOKIE = "auth_token"


def normalize_route(route: str) -> str:
    """Ensure a whitelist entry starts with "/"."""
    route = route.strip()
    if not route.startswith("/"):
        route = "/" + route
    return route


class RouteWhitelist(ValueObject):
    """Path prefixes reachable without authentication.

    The root path is always whitelisted, by exact match only. With
    `segment_boundary` (the default) a prefix matches whole path segments:
    "/health" admits "/health" and "/health/sub" but not "/healthcheck".
    Without it, matching is plain string prefix: "/auth" also admits
    "/authadmin". Matching is case-sensitive.
    """

    prefixes: tuple[str, ...] = ()
    segment_boundary: bool = True

    @field_validator("prefixes", mode="before")
    @classmethod
    def normalize_prefixes(cls, v: Iterable[str]) -> tuple[str, ...]:
        normalized = (normalize_route(route) for route in v)
        # "/" as a prefix would admit everything; root is handled separately
        return tuple(route for route in normalized if route != ROOT_PATH)

    @classmethod
    def from_settings(cls, settings: WhitelistSettings) -> "RouteWhitelist":
        return cls(
            prefixes=[*settings.routes, *settings.extra_routes],
            segment_boundary=settings.segment_boundary,
        )

    def with_route(self, route: str) -> "RouteWhitelist":
        """Return a copy that also whitelists `route`."""
        return RouteWhitelist(
            prefixes=[*self.prefixes, route], segment_boundary=self.segment_boundary
        )

    def _matches(self, path: str, prefix: str) -> bool:
        if not self.segment_boundary:
            return path.startswith(prefix)
        if path == prefix:
            return True
        return path.startswith(prefix.rstrip("/") + "/")

    def is_whitelisted(self, path: str) -> bool:
        if path == ROOT_PATH:
            return True
        return any(self._matches(path, prefix) for prefix in self.prefixes)


class RouteGate:
    """Applies the whitelist and the session check to one request path."""

    def __init__(self, whitelist: RouteWhitelist) -> None:
        self.whitelist = whitelist

    def is_whitelisted(self, path: str) -> bool:
        return self.whitelist.is_whitelisted(path)

    async def authenticate(
        self, path: str, token: str | None, jwt_service: JWTService
    ) -> UserId | None:
        """Resolve the caller for a path.

        Args:
            path: Request path (no query string)
            token: Session token from the request, if any
            jwt_service: Session codec bound to the request's store

        Returns:
            None for whitelisted paths (no identity is resolved), otherwise
            the authenticated user ID

        Raises:
            InvalidTokenError: If the path is protected and the token is
                missing, invalid, or names a deleted user
        """
        if self.is_whitelisted(path):
            return None
        return await jwt_service.authenticate(token)


def extract_token(request: Request) -> str | None:
    """Session token from the auth cookie, else from a Bearer header."""
    token = request.cookies.get(AUTH_COOKIE)
    if token:
        return token

    authorization = request.headers.get("authorization", "")
    scheme, _, credentials = authorization.partition(" ")
    if scheme.lower() == "bearer" and credentials.strip():
        return credentials.strip()
    return None


def get_user_id(request: Request) -> UserId:
    """ID attached by `AuthenticationMiddleware` for protected routes."""
    return request.state.user_id


class AuthenticationMiddleware(BaseHTTPMiddleware):
    """Starlette middleware enforcing the route gate.

    Must run inside dishka's container middleware, which provides the
    request-scoped container used to resolve `JWTService`.
    """

    def __init__(self, app: ASGIApp, gate: RouteGate) -> None:
        super().__init__(app)
        self.gate = gate

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        path = request.url.path

        if self.gate.is_whitelisted(path):
            return await call_next(request)

        jwt_service = await request.state.dishka_container.get(JWTService)
        try:
            user_id = await self.gate.authenticate(
                path, extract_token(request), jwt_service
            )
        except InvalidTokenError as e:
            logger.info(f"Rejected unauthenticated request to {path}: {e}")
            return JSONResponse(
                status_code=status.HTTP_401_UNAUTHORIZED,
                content={"detail": "Not authenticated"},
            )

        request.state.user_id = user_id
        return await call_next(request)
