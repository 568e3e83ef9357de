"""FastAPI application."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from dishka import AsyncContainer
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from gallery.config import Settings
from gallery.domain.service import OAuthClient
from gallery.domain.value import AuthProvider
from gallery.interface.api.errors import register_exception_handlers
from gallery.interface.api.gate import (
    AuthenticationMiddleware,
    RouteGate,
    RouteWhitelist,
)
from gallery.interface.api.routes import auth, health, users
from gallery.util.di.container import create_container, setup_di
from gallery.util.observability import instrument_fastapi, instrument_httpx


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Resolve OAuth clients at startup so missing credentials fail fast."""
    container: AsyncContainer = app.state.dishka_container
    await container.get(dict[AuthProvider, OAuthClient])
    yield
    await container.close()


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Logfire should be configured before calling this function; in
    production `scripts/start_app.py` does it.

    Args:
        container: Prebuilt DI container (tests pass one with mocks),
            defaults to the production container

    Raises:
        ConfigurationError: If required settings are missing
    """
    settings = Settings()
    settings.check_startup()

    if settings.environment != "test":
        instrument_httpx()

    app_instance = FastAPI(
        title="Gallery API",
        description="Backend API for Gallery - image sharing with local and OAuth accounts",
        version="0.1.0",
        lifespan=lifespan,
    )

    if settings.environment != "test":
        instrument_fastapi(app_instance)

    register_exception_handlers(app_instance)

    # Middleware order: the last added runs first. CORS wraps dishka, which
    # wraps the gate, so the gate can resolve request-scoped services.
    app_instance.add_middleware(
        AuthenticationMiddleware,
        gate=RouteGate(RouteWhitelist.from_settings(settings.whitelist)),
    )

    setup_di(app_instance, container or create_container())

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",
            "http://localhost:5173",
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "PUT", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
            "X-Requested-With",
        ],
        max_age=600,
    )

    app_instance.include_router(health.router)
    app_instance.include_router(auth.router)
    app_instance.include_router(users.router)

    return app_instance
