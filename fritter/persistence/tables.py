"""SQLAlchemy table definitions for Fritter.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    func,
)
from sqlalchemy.dialects.postgresql import ARRAY, JSONB, TIMESTAMP, UUID

metadata = MetaData()

# ============================================================================
# FREETS TABLE
# ============================================================================
freets_table = Table(
    "freets",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("user_id", UUID, nullable=False),
    Column("profile_name", String(50), nullable=False, server_default="default"),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("char_length(content) <= 140", name="content_max_length"),
)

Index("idx_freets_updated_at", freets_table.c.updated_at.desc())
Index("idx_freets_user_id", freets_table.c.user_id)
Index(
    "idx_freets_user_profile",
    freets_table.c.user_id,
    func.lower(freets_table.c.profile_name),
)

# ============================================================================
# ENGAGEMENTS TABLE (one row per freet)
# ============================================================================
engagements_table = Table(
    "engagements",
    metadata,
    Column("id", UUID, primary_key=True),
    # ON DELETE CASCADE is only a backstop; the service removes rows first
    Column(
        "freet_id",
        UUID,
        ForeignKey("freets.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    ),
    Column("likes", Integer, nullable=False, server_default="0"),
    Column("dislikes", Integer, nullable=False, server_default="0"),
    Column("liked", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("disliked", ARRAY(UUID), nullable=False, server_default="{}"),
    Column("is_controversial", Boolean, nullable=False, server_default="false"),
    Column("version", Integer, nullable=False, server_default="0"),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("likes >= 0", name="likes_non_negative"),
    CheckConstraint("dislikes >= 0", name="dislikes_non_negative"),
)

# ============================================================================
# PROFILES TABLE
# ============================================================================
profiles_table = Table(
    "profiles",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("user_id", UUID, nullable=False),
    Column("name", String(50), nullable=False),
    # Lists of {"user_id": ..., "name": ...}
    Column("following", JSONB, nullable=False, server_default="[]"),
    Column("followers", JSONB, nullable=False, server_default="[]"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index(
    "idx_profiles_user_name",
    profiles_table.c.user_id,
    func.lower(profiles_table.c.name),
    unique=True,
)

# ============================================================================
# REFLECTIONS TABLE (private, never engaged with)
# ============================================================================
reflections_table = Table(
    "reflections",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("user_id", UUID, nullable=False),
    Column("profile_name", String(50), nullable=False, server_default="default"),
    Column("content", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "char_length(content) <= 140", name="reflection_content_max_length"
    ),
)

Index(
    "idx_reflections_user_profile",
    reflections_table.c.user_id,
    func.lower(reflections_table.c.profile_name),
)
