"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (malformed registration input)."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class AuthenticationError(DomainError):
    """Base for login, registration and session failures.

    `code` is the machine-readable reason used in failure redirects.
    """

    code = "authentication_failed"


class InvalidCredentialsError(AuthenticationError):
    """Unknown email, no local password, or wrong password.

    Deliberately does not say which.
    """

    code = "invalid_credentials"

    def __init__(self) -> None:
        super().__init__("Invalid credentials")


class IdentityNotFoundError(AuthenticationError):
    """OAuth login for an email that has no identity yet."""

    code = "identity_not_found"

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"No account found for {email}")


class DuplicateIdentityError(AuthenticationError):
    """Registration for an email that already has an identity."""

    code = "duplicate_identity"

    def __init__(self, email: str):
        self.email = email
        super().__init__(f"An account already exists for {email}")


class EmailUnverifiedError(AuthenticationError):
    """Provider reports the email as unverified."""

    code = "email_unverified"

    def __init__(self, provider: str):
        self.provider = provider
        super().__init__(f"{provider} email address is not verified")


class MissingProfileFieldError(AuthenticationError):
    """Provider profile lacks a field the identity requires."""

    code = "missing_profile_field"

    def __init__(self, provider: str, field: str):
        self.provider = provider
        self.field = field
        super().__init__(f"{provider} profile has no {field}")


class InvalidTokenError(AuthenticationError):
    """Session token absent, malformed, expired, or for a deleted user."""

    code = "invalid_token"
