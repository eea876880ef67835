"""Create rsvps table.

Revision ID: 3f9c2a7d1b4e
Revises:
Create Date: 2026-10-19 12:00:00.000000

"""

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "3f9c2a7d1b4e"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create the rsvps table."""
    op.create_table(
        "rsvps",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("attending", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("guests", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("dietary_restrictions", sa.Text(), nullable=True),
        sa.Column("message", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.current_timestamp(),
            nullable=False,
        ),
    )
    op.create_index("ix_rsvps_email", "rsvps", ["email"])
    op.create_index("ix_rsvps_created_at", "rsvps", ["created_at"])


def downgrade() -> None:
    """Drop the rsvps table."""
    op.drop_index("ix_rsvps_created_at", table_name="rsvps")
    op.drop_index("ix_rsvps_email", table_name="rsvps")
    op.drop_table("rsvps")
