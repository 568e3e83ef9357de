"""initial_schema

Create the identity schema for Gallery:
- Users (one row per email, shared by local, Discord, GitHub and Google)

Revision ID: 3f2c9a71d4e8
Revises:
Create Date: 2026-10-19 10:12:04.518233

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3f2c9a71d4e8"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table (identity store, keyed by normalized email)
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("email", sa.String(255), nullable=False),  # Lower-cased
        sa.Column("display_name", sa.String(255), nullable=True),
        sa.Column("first_name", sa.String(255), nullable=True),
        sa.Column("last_name", sa.String(255), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column("password_hash", sa.String(255), nullable=True),
        sa.Column("linked_local", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "linked_discord", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("linked_github", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("linked_google", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="users_email_key"),
        sa.CheckConstraint(
            "linked_local OR linked_discord OR linked_github OR linked_google",
            name="users_linked_provider_required",
        ),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("users")
