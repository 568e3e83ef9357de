"""Domain value objects for Gallery.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from enum import Enum

from pydantic import field_validator

from gallery.domain.value.common import RootValueObject, ValueObject

EMAIL_PATTERN = re.compile(r"^[a-z0-9._%+-]+@[a-z0-9.-]+\.[a-z]{2,}$")


class AuthProvider(str, Enum):
    """Supported authentication providers."""

    LOCAL = "local"
    DISCORD = "discord"
    GITHUB = "github"
    GOOGLE = "google"


OAUTH_PROVIDERS = (AuthProvider.DISCORD, AuthProvider.GITHUB, AuthProvider.GOOGLE)


class Email(RootValueObject[str]):
    """Email address, the join key between providers.

    Stored stripped and lower-cased so that "A@X.com" and "a@x.com"
    resolve to the same identity.
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize(cls, v: object) -> object:
        """Strip and lower-case before validation."""
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("root")
    @classmethod
    def validate_email_format(cls, v: str) -> str:
        """Validate email shape and length."""
        if len(v) > 255 or not EMAIL_PATTERN.match(v):
            raise ValueError("Invalid email address")
        return v


class LinkedProviders(ValueObject):
    """Which providers have authenticated an identity at least once."""

    local: bool = False
    discord: bool = False
    github: bool = False
    google: bool = False

    def is_linked(self, provider: AuthProvider) -> bool:
        return getattr(self, provider.value)

    def link(self, provider: AuthProvider) -> "LinkedProviders":
        """Return a copy with `provider` marked as linked."""
        return self.model_copy(update={provider.value: True})

    def any(self) -> bool:
        return any(self.is_linked(provider) for provider in AuthProvider)

    def names(self) -> list[AuthProvider]:
        return [provider for provider in AuthProvider if self.is_linked(provider)]


class OAuthProviderInfo(ValueObject):
    """Profile returned by an OAuth provider after the code exchange.

    Generic structure shared by Discord, GitHub and Google. `email_verified`
    is None when the provider gives no verification signal (GitHub).
    """

    provider: AuthProvider
    provider_user_id: str  # Permanent ID on the provider
    email: str | None = None
    email_verified: bool | None = None
    display_name: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    avatar_url: str | None = None
