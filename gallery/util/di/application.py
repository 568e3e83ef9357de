"""Application layer DI providers."""

from dishka import Scope, provide

from gallery.application.usecase.auth import (
    LocalLoginUseCase,
    LocalRegisterUseCase,
    OAuthLoginUseCase,
    OAuthRegisterUseCase,
)
from gallery.application.usecase.user import (
    GetCurrentUserUseCase,
    UpdateUserProfileUseCase,
)
from gallery.domain.service import (
    AuthService,
    JWTService,
    UserService,
    VerifierRegistry,
)
from gallery.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Auth use cases
    @provide(scope=Scope.REQUEST)
    def get_local_login_use_case(
        self, verifiers: VerifierRegistry, jwt_service: JWTService
    ) -> LocalLoginUseCase:
        return LocalLoginUseCase(verifiers=verifiers, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_local_register_use_case(
        self, verifiers: VerifierRegistry, jwt_service: JWTService
    ) -> LocalRegisterUseCase:
        return LocalRegisterUseCase(verifiers=verifiers, jwt_service=jwt_service)

    @provide(scope=Scope.REQUEST)
    def get_oauth_login_use_case(
        self,
        auth_service: AuthService,
        verifiers: VerifierRegistry,
        jwt_service: JWTService,
    ) -> OAuthLoginUseCase:
        return OAuthLoginUseCase(
            auth_service=auth_service, verifiers=verifiers, jwt_service=jwt_service
        )

    @provide(scope=Scope.REQUEST)
    def get_oauth_register_use_case(
        self,
        auth_service: AuthService,
        verifiers: VerifierRegistry,
        jwt_service: JWTService,
    ) -> OAuthRegisterUseCase:
        return OAuthRegisterUseCase(
            auth_service=auth_service, verifiers=verifiers, jwt_service=jwt_service
        )

    # User use cases
    @provide(scope=Scope.REQUEST)
    def get_current_user_use_case(
        self, user_service: UserService
    ) -> GetCurrentUserUseCase:
        return GetCurrentUserUseCase(user_service=user_service)

    @provide(scope=Scope.REQUEST)
    def get_update_user_profile_use_case(
        self, user_service: UserService
    ) -> UpdateUserProfileUseCase:
        return UpdateUserProfileUseCase(user_service=user_service)
