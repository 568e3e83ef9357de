"""User aggregate root.

One user per distinct person, keyed by email. Local passwords and
Discord, GitHub and Google logins for the same email all resolve here.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, model_validator

from gallery.domain.model.common import DomainModel
from gallery.domain.value import AuthProvider, Email, LinkedProviders, UserId

# Digits with an optional leading "+"
PHONE_PATTERN = r"^\+?[0-9]+$"


class User(DomainModel):
    """User aggregate root - the canonical identity.

    `password_hash` is only set for identities that registered locally and
    is excluded from every serialization.
    """

    id: UserId
    email: Email
    display_name: Optional[str] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    avatar_url: Optional[str] = None
    phone: Optional[str] = Field(default=None, max_length=32, pattern=PHONE_PATTERN)
    password_hash: Optional[str] = Field(default=None, exclude=True, repr=False)
    linked_providers: LinkedProviders
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @model_validator(mode="after")
    def require_linked_provider(self) -> "User":
        """An identity nobody can log into is invalid."""
        if not self.linked_providers.any():
            raise ValueError("User must have at least one linked provider")
        return self

    def is_linked(self, provider: AuthProvider) -> bool:
        return self.linked_providers.is_linked(provider)
