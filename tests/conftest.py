"""Test configuration and fixtures."""

import os
from datetime import datetime, timezone
from uuid import uuid4

# Settings are read from the environment; these must be set before any
# Settings() is constructed.
os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("AUTH__JWT_SECRET", "test-secret-with-at-least-thirty-two-bytes")
# Fast hashing keeps the suite quick; production defaults to scrypt
os.environ.setdefault("AUTH__PASSWORD_HASH_METHOD", "pbkdf2:sha256:1000")

import logfire  # noqa: E402
import pytest  # noqa: E402

from gallery.config import AuthSettings  # noqa: E402
from gallery.domain.model import User  # noqa: E402
from gallery.domain.value import Email, LinkedProviders, UserId  # noqa: E402

logfire.configure(send_to_logfire=False, console=False)

TEST_SECRET = os.environ["AUTH__JWT_SECRET"]


def make_user(
    email: str = "a@x.com",
    linked: LinkedProviders | None = None,
    password_hash: str | None = None,
    **fields,
) -> User:
    """Build a valid User for tests."""
    now = datetime.now(timezone.utc)
    return User(
        id=UserId(uuid4()),
        email=Email(email),
        linked_providers=linked or LinkedProviders(local=True),
        password_hash=password_hash,
        created_at=now,
        updated_at=now,
        **fields,
    )


@pytest.fixture
def auth_settings() -> AuthSettings:
    """Auth settings with a test secret and cheap hashing."""
    return AuthSettings(
        jwt_secret=TEST_SECRET,
        password_hash_method="pbkdf2:sha256:1000",
    )
