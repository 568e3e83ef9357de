"""Unit tests for password hashing."""

import pytest
from pydantic import ValidationError

from gallery.config import AuthSettings
from gallery.util.password import (
    burn_verification,
    check_hash_method,
    hash_password,
    verify_password,
)

METHOD = "pbkdf2:sha256:1000"


def test_hash_is_salted():
    """Should produce different hashes for the same password."""
    first = hash_password("secret", METHOD)
    second = hash_password("secret", METHOD)

    assert first != second
    assert "secret" not in first


def test_verify():
    password_hash = hash_password("secret", METHOD)

    assert verify_password(password_hash, "secret")
    assert not verify_password(password_hash, "Secret")


def test_burn_verification_returns_nothing():
    """Should do the work of a check without raising."""
    assert burn_verification("whatever", METHOD) is None


@pytest.mark.parametrize(
    "method",
    ["scrypt", "scrypt:32768:8:1", "scrypt:1024", "pbkdf2", "pbkdf2:sha256", METHOD],
)
def test_accepted_hash_methods(method):
    assert check_hash_method(method) == method


@pytest.mark.parametrize(
    "method",
    ["pbkdf2:sha256:1", "pbkdf2:sha256:999", "scrypt:2:8:1", "md5", "plain", ""],
)
def test_weak_hash_methods_rejected(method):
    with pytest.raises(ValueError):
        check_hash_method(method)


def test_auth_settings_rejects_weak_method():
    """Should refuse a configured method below the work floor."""
    with pytest.raises(ValidationError, match="iterations"):
        AuthSettings(password_hash_method="pbkdf2:sha256:1")


def test_auth_settings_default_method():
    assert AuthSettings().password_hash_method == "scrypt"
