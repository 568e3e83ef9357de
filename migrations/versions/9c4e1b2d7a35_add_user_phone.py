"""add_user_phone

Optional contact number on the user profile.

Revision ID: 9c4e1b2d7a35
Revises: 3f2c9a71d4e8
Create Date: 2026-10-19 15:40:27.104391

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "9c4e1b2d7a35"
down_revision: Union[str, Sequence[str], None] = "3f2c9a71d4e8"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.add_column("users", sa.Column("phone", sa.String(32), nullable=True))


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_column("users", "phone")
