"""Email and password login and registration use cases."""

import logfire
from pydantic import BaseModel

from gallery.application.usecase.base import BaseUseCase
from gallery.domain.service import JWTService, VerifierRegistry
from gallery.domain.service.verifier import LocalLoginProof, LocalRegistrationProof


class LocalLoginRequest(BaseModel):
    """Local login request."""

    email: str
    password: str


class LocalRegisterRequest(BaseModel):
    """Local registration request."""

    email: str
    password: str
    first_name: str
    last_name: str


class AuthTokenResponse(BaseModel):
    """Session token issued after a successful login or registration."""

    token: str
    user_id: str


class LocalLoginUseCase(BaseUseCase):
    """Use case for password login."""

    def __init__(self, verifiers: VerifierRegistry, jwt_service: JWTService) -> None:
        """Initialize local login use case.

        Args:
            verifiers: Provider to verifier mapping
            jwt_service: JWT token domain service
        """
        self.verifiers = verifiers
        self.jwt_service = jwt_service

    async def execute(self, request: LocalLoginRequest) -> AuthTokenResponse:
        """Verify the password and issue a session token.

        Raises:
            InvalidCredentialsError: If email or password is wrong
        """
        user_id = await self.verifiers.local.login(
            LocalLoginProof(email=request.email, password=request.password)
        )
        token = self.jwt_service.create_token(user_id)
        return AuthTokenResponse(token=token, user_id=str(user_id))


class LocalRegisterUseCase(BaseUseCase):
    """Use case for password registration.

    A successful registration also logs the user in.
    """

    def __init__(self, verifiers: VerifierRegistry, jwt_service: JWTService) -> None:
        self.verifiers = verifiers
        self.jwt_service = jwt_service

    async def execute(self, request: LocalRegisterRequest) -> AuthTokenResponse:
        """Create the identity and issue a session token.

        Raises:
            ValidationError: If the input is malformed
            DuplicateIdentityError: If the email is already registered
        """
        user_id = await self.verifiers.local.register(
            LocalRegistrationProof(
                email=request.email,
                password=request.password,
                first_name=request.first_name,
                last_name=request.last_name,
            )
        )
        logfire.info("Local registration completed", user_id=str(user_id))
        token = self.jwt_service.create_token(user_id)
        return AuthTokenResponse(token=token, user_id=str(user_id))
