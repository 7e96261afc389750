"""add_reflections

Private reflections, kept per user under a profile name.

Revision ID: 5d2a8c41e7f3
Revises: 3c1f9e2a7b40
Create Date: 2026-10-20 09:31:07.204118

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "5d2a8c41e7f3"
down_revision: Union[str, Sequence[str], None] = "3c1f9e2a7b40"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "reflections",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "profile_name", sa.String(50), nullable=False, server_default="default"
        ),
        sa.Column("content", sa.Text(), nullable=False),
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
        sa.CheckConstraint(
            "char_length(content) <= 140", name="reflection_content_max_length"
        ),
    )
    op.create_index(
        "idx_reflections_user_profile",
        "reflections",
        ["user_id", sa.text("lower(profile_name)")],
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_reflections_user_profile", table_name="reflections")
    op.drop_table("reflections")
