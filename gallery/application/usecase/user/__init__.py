"""User profile use cases."""

from .get_current_user import GetCurrentUserUseCase
from .update_user_profile import UpdateUserProfileUseCase

__all__ = ["GetCurrentUserUseCase", "UpdateUserProfileUseCase"]
