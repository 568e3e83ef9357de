"""Authentication routes.

Local identities use JSON endpoints. Discord, GitHub and Google use the
OAuth redirect dance: `/auth/{provider}/{login|register}` sends the browser
to the provider, and the matching `/callback` finishes the flow and
redirects to the frontend with the session cookie set.
"""

import logging
import secrets
from typing import Literal
from urllib.parse import urlencode

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Response, status
from fastapi.responses import RedirectResponse
from pydantic import BaseModel

from gallery.adapter.error import ProviderError
from gallery.application.usecase.auth import (
    LocalLoginUseCase,
    LocalRegisterUseCase,
    OAuthLoginUseCase,
    OAuthRegisterUseCase,
)
from gallery.application.usecase.auth.local import (
    AuthTokenResponse,
    LocalLoginRequest,
    LocalRegisterRequest,
)
from gallery.application.usecase.auth.oauth import OAuthCallbackRequest
from gallery.config import Settings
from gallery.domain.error import AuthenticationError
from gallery.domain.service import AuthService
from gallery.domain.value import OAUTH_PROVIDERS, AuthProvider
from gallery.interface.api.gate import AUTH_COOKIE

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["authentication"], route_class=DishkaRoute)

STATE_COOKIE = "oauth_state"

OAuthIntent = Literal["login", "register"]


class LogoutResponse(BaseModel):
    """Logout response."""

    success: bool
    message: str


def set_auth_cookie(response: Response, token: str, settings: Settings) -> None:
    """Attach the session token as an HTTP-only cookie.

    Production serves the frontend and API from different hosts, so the
    cookie is cross-site (SameSite=None, Secure). Development stays lax.
    """
    is_production = settings.is_production
    response.set_cookie(
        key=AUTH_COOKIE,
        value=token,
        httponly=True,
        secure=is_production,
        samesite="none" if is_production else "lax",
        domain=settings.auth.cookie_domain if is_production else None,
        path="/",
        max_age=settings.auth.jwt_expiry_days * 24 * 60 * 60,
    )


def _failure_redirect(settings: Settings, code: str) -> RedirectResponse:
    response = RedirectResponse(
        url=f"{settings.auth.failure_url}?{urlencode({'error': code})}",
        status_code=status.HTTP_302_FOUND,
    )
    response.delete_cookie(STATE_COOKIE, path="/auth")
    return response


def _require_oauth_provider(provider: AuthProvider) -> None:
    if provider not in OAUTH_PROVIDERS:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{provider.value} does not use OAuth",
        )


# ============================================================================
# LOCAL (email + password)
# ============================================================================
@router.post(
    "/local/register",
    response_model=AuthTokenResponse,
    status_code=status.HTTP_201_CREATED,
)
async def local_register(
    request: LocalRegisterRequest,
    response: Response,
    register_use_case: FromDishka[LocalRegisterUseCase],
    settings: FromDishka[Settings],
) -> AuthTokenResponse:
    """Register a password identity and log it in.

    Errors (via exception handlers): 400 malformed input, 409 email taken.
    """
    result = await register_use_case.execute(request)
    set_auth_cookie(response, result.token, settings)
    logger.info(f"Local registration succeeded for user {result.user_id}")
    return result


@router.post("/local/login", response_model=AuthTokenResponse)
async def local_login(
    request: LocalLoginRequest,
    response: Response,
    login_use_case: FromDishka[LocalLoginUseCase],
    settings: FromDishka[Settings],
) -> AuthTokenResponse:
    """Log in with email and password.

    Any failure is a 401 "Invalid credentials", whichever part was wrong.
    """
    result = await login_use_case.execute(request)
    set_auth_cookie(response, result.token, settings)
    return result


# ============================================================================
# OAUTH (discord, github, google)
# ============================================================================
@router.get("/{provider}/{intent}")
async def start_oauth(
    provider: AuthProvider,
    intent: OAuthIntent,
    auth_service: FromDishka[AuthService],
    settings: FromDishka[Settings],
) -> RedirectResponse:
    """Redirect the browser to the provider's consent screen.

    A random `state` is stored in a short-lived cookie, bound to the
    provider and intent, and checked again on the callback.

    Example:
        GET /auth/google/register

        Redirects to: https://accounts.google.com/o/oauth2/v2/auth?...
        Sets cookie: oauth_state
    """
    _require_oauth_provider(provider)

    state = secrets.token_urlsafe(32)
    redirect_uri = settings.oauth_callback_url(provider.value, intent)
    auth_url = await auth_service.initiate_login(provider, state, redirect_uri)

    logger.info(f"Starting {provider.value} {intent} flow")

    response = RedirectResponse(url=auth_url, status_code=status.HTTP_302_FOUND)
    response.set_cookie(
        key=STATE_COOKIE,
        value=f"{provider.value}:{intent}:{state}",
        httponly=True,
        secure=settings.is_production,
        samesite="lax",  # Sent on the provider's top-level redirect back
        path="/auth",
        max_age=settings.auth.state_max_age_seconds,
    )
    return response


@router.get("/{provider}/{intent}/callback")
async def oauth_callback(
    provider: AuthProvider,
    intent: OAuthIntent,
    login_use_case: FromDishka[OAuthLoginUseCase],
    register_use_case: FromDishka[OAuthRegisterUseCase],
    settings: FromDishka[Settings],
    code: str | None = None,
    state: str | None = None,
    error: str | None = None,
    oauth_state: str | None = Cookie(default=None),
) -> RedirectResponse:
    """Finish an OAuth flow started by `start_oauth`.

    Success sets the session cookie and redirects to `auth.success_url`.
    Every failure redirects to `auth.failure_url?error=<code>`.

    Example:
        GET /auth/discord/login/callback?code=abc123&state=xyz789

        Redirects to: http://localhost:3000/auth/success
        Sets cookie: auth_token
    """
    _require_oauth_provider(provider)

    if error:
        logger.info(f"{provider.value} returned error on callback: {error}")
        return _failure_redirect(settings, "provider_error")

    expected = f"{provider.value}:{intent}:{state}"
    if (
        not code
        or not state
        or not oauth_state
        or not secrets.compare_digest(oauth_state, expected)
    ):
        logger.warning(f"OAuth state mismatch on {provider.value} {intent} callback")
        return _failure_redirect(settings, "invalid_state")

    use_case = login_use_case if intent == "login" else register_use_case
    try:
        result = await use_case.execute(
            OAuthCallbackRequest(
                provider=provider,
                code=code,
                state=state,
                redirect_uri=settings.oauth_callback_url(provider.value, intent),
            )
        )
    except AuthenticationError as e:
        logger.info(f"{provider.value} {intent} rejected: {e}")
        return _failure_redirect(settings, e.code)
    except ProviderError as e:
        logger.error(f"{provider.value} provider error during {intent}: {e}")
        return _failure_redirect(settings, "provider_error")

    logger.info(f"{provider.value} {intent} succeeded for user {result.user_id}")

    response = RedirectResponse(
        url=settings.auth.success_url or "/", status_code=status.HTTP_302_FOUND
    )
    set_auth_cookie(response, result.token, settings)
    response.delete_cookie(STATE_COOKIE, path="/auth")
    return response


# ============================================================================
# LOGOUT
# ============================================================================
@router.post("/logout", response_model=LogoutResponse)
async def logout(
    response: Response,
    settings: FromDishka[Settings],
) -> LogoutResponse:
    """Clear the session cookie.

    Tokens are stateless: a copy of the token kept elsewhere stays valid
    until it expires.
    """
    response.delete_cookie(
        key=AUTH_COOKIE,
        domain=settings.auth.cookie_domain if settings.is_production else None,
        path="/",
    )
    return LogoutResponse(success=True, message="Successfully logged out")
