"""SQLAlchemy table definitions for Gallery.

These match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

from gallery.domain.value import AuthProvider

# Metadata object for all tables
metadata = MetaData()


def linked_column_name(provider: AuthProvider) -> str:
    """Column holding the linked flag for a provider."""
    return f"linked_{provider.value}"


# ============================================================================
# USERS TABLE (one row per email, all providers)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("email", String(255), nullable=False, unique=True),  # Normalized
    Column("display_name", String(255), nullable=True),
    Column("first_name", String(255), nullable=True),
    Column("last_name", String(255), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column("phone", String(32), nullable=True),
    Column("password_hash", String(255), nullable=True),  # Local identities only
    Column("linked_local", Boolean, nullable=False, server_default="false"),
    Column("linked_discord", Boolean, nullable=False, server_default="false"),
    Column("linked_github", Boolean, nullable=False, server_default="false"),
    Column("linked_google", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "linked_local OR linked_discord OR linked_github OR linked_google",
        name="users_linked_provider_required",
    ),
)
