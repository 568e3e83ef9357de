"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic objects, so rows are mapped by hand
instead of through SQLAlchemy's ORM.
"""

from typing import Any, Dict
from uuid import UUID

from gallery.domain.model import User
from gallery.domain.value import AuthProvider, Email, LinkedProviders, UserId
from gallery.persistence.tables import linked_column_name


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        email=Email(row["email"]),
        display_name=row.get("display_name"),
        first_name=row.get("first_name"),
        last_name=row.get("last_name"),
        avatar_url=row.get("avatar_url"),
        phone=row.get("phone"),
        password_hash=row.get("password_hash"),
        linked_providers=LinkedProviders(
            **{
                provider.value: bool(row[linked_column_name(provider)])
                for provider in AuthProvider
            }
        ),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    The password hash is excluded from `model_dump`, so it is added back
    explicitly here.

    Args:
        user: User domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = user.model_dump(exclude={"linked_providers"})
    data["password_hash"] = user.password_hash
    for provider in AuthProvider:
        data[linked_column_name(provider)] = user.linked_providers.is_linked(provider)
    return data


def profile_to_dict(user: User) -> Dict[str, Any]:
    """Columns a profile update may change."""
    return {
        "display_name": user.display_name,
        "first_name": user.first_name,
        "last_name": user.last_name,
        "avatar_url": user.avatar_url,
        "phone": user.phone,
        "updated_at": user.updated_at,
    }
