"""Domain models."""

from gallery.domain.model.user import PHONE_PATTERN, User

__all__ = ["PHONE_PATTERN", "User"]
