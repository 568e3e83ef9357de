"""Update user profile use case."""

from datetime import datetime, timezone

from pydantic import BaseModel, Field

from gallery.application.usecase.user.get_current_user import UserProfileResponse
from gallery.domain.model import PHONE_PATTERN
from gallery.domain.service import UserService
from gallery.domain.value import UserId


class UpdateUserProfileRequest(BaseModel):
    """Update user profile request.

    Omitted fields keep their current value. Email, password and linked
    providers cannot be changed here.
    """

    user_id: UserId  # From authenticated user
    display_name: str | None = Field(default=None, min_length=1, max_length=255)
    first_name: str | None = Field(default=None, min_length=1, max_length=255)
    last_name: str | None = Field(default=None, min_length=1, max_length=255)
    avatar_url: str | None = Field(default=None)
    phone: str | None = Field(default=None, max_length=32, pattern=PHONE_PATTERN)


class UpdateUserProfileUseCase:
    """Use case for updating a user's profile."""

    def __init__(self, user_service: UserService) -> None:
        """Initialize update user profile use case.

        Args:
            user_service: User domain service
        """
        self.user_service = user_service

    async def execute(self, request: UpdateUserProfileRequest) -> UserProfileResponse:
        """Apply the provided fields and save.

        Raises:
            NotFoundError: If user not found
        """
        user = await self.user_service.get_by_id(request.user_id)

        changes = request.model_dump(exclude={"user_id"}, exclude_none=True)
        updated_user = user.model_copy(
            update={**changes, "updated_at": datetime.now(timezone.utc)}
        )

        saved_user = await self.user_service.save(updated_user)
        return UserProfileResponse.from_user(saved_user)
