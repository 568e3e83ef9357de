"""User profile routes.

Both routes sit behind the route gate, so the user ID is already resolved
and re-checked against the store when the handler runs.
"""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Request
from pydantic import BaseModel, Field

from gallery.application.usecase.user import (
    GetCurrentUserUseCase,
    UpdateUserProfileUseCase,
)
from gallery.application.usecase.user.get_current_user import (
    GetCurrentUserRequest,
    UserProfileResponse,
)
from gallery.application.usecase.user.update_user_profile import (
    UpdateUserProfileRequest,
)
from gallery.domain.model import PHONE_PATTERN
from gallery.interface.api.gate import get_user_id

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


class UpdateUserProfileAPIRequest(BaseModel):
    """API request for updating user profile."""

    display_name: str | None = Field(None, min_length=1, max_length=255)
    first_name: str | None = Field(None, min_length=1, max_length=255)
    last_name: str | None = Field(None, min_length=1, max_length=255)
    avatar_url: str | None = None
    phone: str | None = Field(None, max_length=32, pattern=PHONE_PATTERN)


@router.get("/me", response_model=UserProfileResponse)
async def get_my_profile(
    request: Request,
    get_current_user_use_case: FromDishka[GetCurrentUserUseCase],
) -> UserProfileResponse:
    """Get the authenticated user's profile.

    Example:
        GET /users/me
        Cookie: auth_token=...

        Response:
        {
            "user_id": "123e4567-e89b-12d3-a456-426614174000",
            "email": "a@x.com",
            "display_name": "A B",
            "first_name": "A",
            "last_name": "B",
            "avatar_url": null,
            "phone": null,
            "linked_providers": ["local", "google"],
            ...
        }
    """
    return await get_current_user_use_case.execute(
        GetCurrentUserRequest(user_id=get_user_id(request))
    )


@router.patch("/me", response_model=UserProfileResponse)
async def update_my_profile(
    body: UpdateUserProfileAPIRequest,
    request: Request,
    update_user_profile_use_case: FromDishka[UpdateUserProfileUseCase],
) -> UserProfileResponse:
    """Update the authenticated user's profile.

    Omitted fields are left unchanged. Email cannot be changed.
    """
    return await update_user_profile_use_case.execute(
        UpdateUserProfileRequest(
            user_id=get_user_id(request),
            **body.model_dump(exclude_none=True),
        )
    )
