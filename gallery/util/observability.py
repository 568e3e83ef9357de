"""Logfire setup and instrumentation.

Services and use cases call logfire directly:

    with logfire.span("local_verifier.register"):
        logfire.info("User created", user_id=str(user.id))
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from gallery.config import Settings

SERVICE_NAME = "gallery-backend"
SERVICE_VERSION = "0.1.0"

# Scrubbed from span attributes in addition to logfire's defaults
SENSITIVE_ATTRIBUTES = ["password_hash", "oauth_state", "client_secret"]


def should_send(settings: Settings) -> bool:
    """An explicit OBSERVABILITY__SEND_TO_LOGFIRE wins, else a token enables it."""
    observability = settings.observability
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once at process start.

    Without a token, spans only go to the console. The console is off in
    the test environment.

    Args:
        settings: Application settings
    """
    send_to_logfire = should_send(settings)

    console: logfire.ConsoleOptions | bool = False
    if settings.environment != "test":
        console = logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        )

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version=SERVICE_VERSION,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        token=settings.observability.logfire_token,
        console=console,
        scrubbing=logfire.ScrubbingOptions(extra_patterns=SENSITIVE_ATTRIBUTES),
    )

    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
        git_sha=settings.git_sha,
    )


def _request_attributes(request, attributes):
    # Headers are never captured: they carry the auth cookie and bearer tokens
    mapped = dict(attributes)
    mapped["path"] = request.url.path
    if getattr(request, "method", None):
        mapped["method"] = request.method
    if request.client:
        mapped["client_host"] = request.client.host
    return mapped


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every request handled by `app`."""
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace identity store queries."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine)


def instrument_httpx() -> None:
    """Trace outbound calls to the OAuth providers."""
    logfire.instrument_httpx()
