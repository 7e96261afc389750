"""initial_schema

Create the schema for Fritter:
- Freets (short posts, grouped under a named profile)
- Engagements (one like/dislike record per freet)
- Profiles (named per user, with follow lists)

Revision ID: 3c1f9e2a7b40
Revises:
Create Date: 2026-10-19 10:12:44.518203

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f9e2a7b40"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # FREETS table
    # ========================================================================
    op.create_table(
        "freets",
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
        sa.CheckConstraint("char_length(content) <= 140", name="content_max_length"),
    )
    op.create_index(
        "idx_freets_updated_at", "freets", [sa.text("updated_at DESC")]
    )
    op.create_index("idx_freets_user_id", "freets", ["user_id"])
    op.create_index(
        "idx_freets_user_profile",
        "freets",
        ["user_id", sa.text("lower(profile_name)")],
    )

    # ========================================================================
    # ENGAGEMENTS table (exactly one row per freet)
    # ========================================================================
    op.create_table(
        "engagements",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("freet_id", sa.UUID(), nullable=False),
        sa.Column("likes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("dislikes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "liked",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "disliked",
            postgresql.ARRAY(sa.UUID()),
            nullable=False,
            server_default="{}",
        ),
        sa.Column(
            "is_controversial", sa.Boolean(), nullable=False, server_default="false"
        ),
        sa.Column("version", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["freet_id"], ["freets.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("freet_id"),
        sa.CheckConstraint("likes >= 0", name="likes_non_negative"),
        sa.CheckConstraint("dislikes >= 0", name="dislikes_non_negative"),
    )

    # ========================================================================
    # PROFILES table
    # ========================================================================
    op.create_table(
        "profiles",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("name", sa.String(50), nullable=False),
        sa.Column(
            "following",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "followers",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_profiles_user_name",
        "profiles",
        ["user_id", sa.text("lower(name)")],
        unique=True,
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_profiles_user_name", table_name="profiles")
    op.drop_table("profiles")

    op.drop_table("engagements")

    op.drop_index("idx_freets_user_profile", table_name="freets")
    op.drop_index("idx_freets_user_id", table_name="freets")
    op.drop_index("idx_freets_updated_at", table_name="freets")
    op.drop_table("freets")
