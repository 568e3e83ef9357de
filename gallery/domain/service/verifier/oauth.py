"""OAuth profile verifiers for Discord, GitHub and Google."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError

from gallery.domain.error import (
    DuplicateIdentityError,
    EmailUnverifiedError,
    IdentityNotFoundError,
    MissingProfileFieldError,
)
from gallery.domain.model import User
from gallery.domain.value import (
    AuthProvider,
    Email,
    LinkedProviders,
    OAuthProviderInfo,
    UserId,
)

from .base import Verifier


class OAuthVerifier(Verifier[OAuthProviderInfo, OAuthProviderInfo]):
    """Shared login/register rules for OAuth providers.

    Subclasses pick the provider and whether the provider's email
    verification flag must be true to register.
    """

    requires_verified_email: bool = True

    def _email(self, profile: OAuthProviderInfo) -> Email:
        if profile.provider != self.provider:
            raise ValueError(
                f"{self.provider.value} verifier got a {profile.provider.value} profile"
            )
        if not profile.email:
            raise MissingProfileFieldError(self.provider.value, "email")
        try:
            return Email(profile.email)
        except PydanticValidationError:
            raise MissingProfileFieldError(self.provider.value, "valid email")

    async def login(self, proof: OAuthProviderInfo) -> UserId:
        """Resolve the identity owning the profile's email.

        Links this provider to the identity when it is the first login
        through it. A failed link is logged and does not block the login.

        Raises:
            MissingProfileFieldError: If the profile has no email
            IdentityNotFoundError: If no identity has this email
        """
        email = self._email(proof)

        with logfire.span("oauth_verifier.login", provider=self.provider.value):
            user = await self.user_service.find_by_email(email)
            if user is None:
                logfire.info("OAuth login for unknown email", provider=self.provider.value)
                raise IdentityNotFoundError(email.root)

            if not user.is_linked(self.provider):
                try:
                    await self.user_service.link_provider(user, self.provider)
                except SQLAlchemyError as e:
                    logfire.error(
                        "Failed to link provider",
                        user_id=str(user.id),
                        provider=self.provider.value,
                        error=str(e),
                    )

            logfire.info(
                "OAuth login succeeded",
                user_id=str(user.id),
                provider=self.provider.value,
            )
            return user.id

    async def register(self, proof: OAuthProviderInfo) -> UserId:
        """Create an identity from the provider profile.

        Raises:
            MissingProfileFieldError: If the profile has no email
            EmailUnverifiedError: If the provider says the email is unverified
            DuplicateIdentityError: If the email already has an identity
        """
        email = self._email(proof)

        if self.requires_verified_email and proof.email_verified is not True:
            raise EmailUnverifiedError(self.provider.value)

        with logfire.span("oauth_verifier.register", provider=self.provider.value):
            # Best-effort only; the store's unique constraint settles races
            if await self.user_service.find_by_email(email):
                raise DuplicateIdentityError(email.root)

            now = datetime.now(timezone.utc)
            user = User(
                id=UserId(uuid4()),
                email=email,
                display_name=proof.display_name,
                first_name=proof.first_name,
                last_name=proof.last_name,
                avatar_url=proof.avatar_url,
                linked_providers=LinkedProviders().link(self.provider),
                created_at=now,
                updated_at=now,
            )
            created = await self.user_service.create_user(user)
            return created.id


class DiscordVerifier(OAuthVerifier):
    """Discord accounts must have a verified email to register."""

    provider = AuthProvider.DISCORD
    requires_verified_email = True


class GithubVerifier(OAuthVerifier):
    """GitHub gives no verification signal; registration is accepted."""

    provider = AuthProvider.GITHUB
    requires_verified_email = False


class GoogleVerifier(OAuthVerifier):
    """Google accounts must have a verified email to register."""

    provider = AuthProvider.GOOGLE
    requires_verified_email = True
