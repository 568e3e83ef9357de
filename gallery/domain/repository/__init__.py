"""Repository interfaces for Gallery domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from gallery.domain.repository.user import UserRepository

__all__ = ["UserRepository"]
