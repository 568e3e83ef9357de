"""Get current user use case."""

from datetime import datetime

from pydantic import BaseModel

from gallery.domain.model import User
from gallery.domain.service import UserService
from gallery.domain.value import AuthProvider, UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    user_id: UserId  # Set by the authentication middleware


class UserProfileResponse(BaseModel):
    """Profile of the authenticated user.

    Never includes the password hash.
    """

    user_id: str
    email: str
    display_name: str | None
    first_name: str | None
    last_name: str | None
    avatar_url: str | None
    phone: str | None
    linked_providers: list[AuthProvider]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "UserProfileResponse":
        return cls(
            user_id=str(user.id),
            email=user.email.root,
            display_name=user.display_name,
            first_name=user.first_name,
            last_name=user.last_name,
            avatar_url=user.avatar_url,
            phone=user.phone,
            linked_providers=user.linked_providers.names(),
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class GetCurrentUserUseCase:
    """Use case for getting the current authenticated user."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> UserProfileResponse:
        """Load the user the session token resolved to.

        Raises:
            NotFoundError: If the user was deleted mid-request
        """
        user = await self.user_service.get_by_id(request.user_id)
        return UserProfileResponse.from_user(user)
