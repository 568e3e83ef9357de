"""Email and password verifier."""

import asyncio
from datetime import datetime, timezone
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from gallery.config import AuthSettings
from gallery.domain.error import (
    DuplicateIdentityError,
    InvalidCredentialsError,
    ValidationError,
)
from gallery.domain.model import User
from gallery.domain.service.user_service import UserService
from gallery.domain.value import AuthProvider, Email, LinkedProviders, UserId
from gallery.domain.value.common import ValueObject
from gallery.util.password import burn_verification, hash_password, verify_password

from .base import Verifier

MIN_PASSWORD_LENGTH = 5


class LocalLoginProof(ValueObject):
    """Credentials submitted to the local login endpoint."""

    email: str
    password: str


class LocalRegistrationProof(ValueObject):
    """Fields submitted to the local registration endpoint."""

    email: str
    password: str
    first_name: str
    last_name: str


class LocalVerifier(Verifier[LocalLoginProof, LocalRegistrationProof]):
    """Verifier for identities that own a password."""

    provider = AuthProvider.LOCAL

    def __init__(self, user_service: UserService, auth_settings: AuthSettings) -> None:
        """Initialize local verifier.

        Args:
            user_service: User domain service
            auth_settings: Authentication settings (hash method)
        """
        super().__init__(user_service)
        self.auth_settings = auth_settings

    async def login(self, proof: LocalLoginProof) -> UserId:
        """Check email and password.

        Raises:
            InvalidCredentialsError: For an unknown email, an identity without
                a password, or a wrong password alike
        """
        with logfire.span("local_verifier.login"):
            try:
                email = Email(proof.email)
            except PydanticValidationError:
                await asyncio.to_thread(
                    burn_verification,
                    proof.password,
                    self.auth_settings.password_hash_method,
                )
                raise InvalidCredentialsError()

            user = await self.user_service.find_by_email(email)

            if user is None or not user.password_hash:
                await asyncio.to_thread(
                    burn_verification,
                    proof.password,
                    self.auth_settings.password_hash_method,
                )
                logfire.info("Local login rejected")
                raise InvalidCredentialsError()

            if not await asyncio.to_thread(
                verify_password, user.password_hash, proof.password
            ):
                logfire.info("Local login rejected")
                raise InvalidCredentialsError()

            logfire.info("Local login succeeded", user_id=str(user.id))
            return user.id

    async def register(self, proof: LocalRegistrationProof) -> UserId:
        """Create a password identity.

        Raises:
            ValidationError: If email, password or names are malformed
            DuplicateIdentityError: If the email already has an identity
        """
        with logfire.span("local_verifier.register"):
            try:
                email = Email(proof.email)
            except PydanticValidationError:
                raise ValidationError("Invalid email address")

            if len(proof.password) < MIN_PASSWORD_LENGTH:
                raise ValidationError(
                    f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
                )
            first_name = proof.first_name.strip()
            last_name = proof.last_name.strip()
            if not first_name or not last_name:
                raise ValidationError("First name and last name are required")

            # Best-effort only; the store's unique constraint settles races
            if await self.user_service.find_by_email(email):
                raise DuplicateIdentityError(email.root)

            # scrypt is CPU-bound; keep it off the event loop
            password_hash = await asyncio.to_thread(
                hash_password, proof.password, self.auth_settings.password_hash_method
            )
            now = datetime.now(timezone.utc)
            user = User(
                id=UserId(uuid4()),
                email=email,
                first_name=first_name,
                last_name=last_name,
                display_name=f"{first_name} {last_name}",
                password_hash=password_hash,
                linked_providers=LinkedProviders(local=True),
                created_at=now,
                updated_at=now,
            )
            created = await self.user_service.create_user(user)
            return created.id
