"""Provider to verifier mapping."""

from gallery.domain.value import AuthProvider

from .base import Verifier
from .local import LocalVerifier
from .oauth import OAuthVerifier


class VerifierRegistry:
    """Explicit provider -> verifier mapping built by the DI container."""

    def __init__(self, verifiers: list[Verifier]) -> None:
        """Initialize registry.

        Args:
            verifiers: One verifier per supported provider

        Raises:
            ValueError: If two verifiers claim the same provider
        """
        self._verifiers: dict[AuthProvider, Verifier] = {}
        for verifier in verifiers:
            if verifier.provider in self._verifiers:
                raise ValueError(f"Duplicate verifier for {verifier.provider.value}")
            self._verifiers[verifier.provider] = verifier

    @property
    def providers(self) -> list[AuthProvider]:
        return list(self._verifiers)

    def get(self, provider: AuthProvider) -> Verifier:
        """Get the verifier for a provider.

        Raises:
            ValueError: If provider not supported
        """
        verifier = self._verifiers.get(provider)
        if verifier is None:
            raise ValueError(f"Unsupported provider: {provider}")
        return verifier

    @property
    def local(self) -> LocalVerifier:
        verifier = self.get(AuthProvider.LOCAL)
        assert isinstance(verifier, LocalVerifier)
        return verifier

    def oauth(self, provider: AuthProvider) -> OAuthVerifier:
        """Get an OAuth verifier.

        Raises:
            ValueError: If provider is not an OAuth provider
        """
        verifier = self.get(provider)
        if not isinstance(verifier, OAuthVerifier):
            raise ValueError(f"{provider.value} is not an OAuth provider")
        return verifier
