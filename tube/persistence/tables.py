"""SQLAlchemy table definitions for Tube.

These Core tables are used by the repositories for queries. They match the
schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Enum,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(50), nullable=False),
    Column("email", String(255), nullable=False),  # Stored lower-cased
    Column("password_hash", String(255), nullable=False),  # bcrypt digest
    Column(
        "role",
        Enum("user", "admin", name="user_role", create_type=False),
        nullable=False,
        server_default="user",
    ),
    Column("is_active", Boolean, nullable=False, server_default="true"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("email", name="uq_users_email"),
    UniqueConstraint("username", name="uq_users_username"),
)

# ============================================================================
# VIDEOS TABLE (only the columns the engagement ledger touches)
# ============================================================================
videos_table = Table(
    "videos",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("title", String(255), nullable=False),
    Column("likes_count", Integer, nullable=False, server_default="0"),
    Column("dislikes_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("likes_count >= 0", name="ck_videos_likes_non_negative"),
    CheckConstraint("dislikes_count >= 0", name="ck_videos_dislikes_non_negative"),
)

Index("idx_videos_user_id", videos_table.c.user_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "video_id", UUID, ForeignKey("videos.id", ondelete="CASCADE"), nullable=False
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("content", Text, nullable=False),
    Column("likes_count", Integer, nullable=False, server_default="0"),
    Column("dislikes_count", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("likes_count >= 0", name="ck_comments_likes_non_negative"),
    CheckConstraint("dislikes_count >= 0", name="ck_comments_dislikes_non_negative"),
)

Index("idx_comments_video_id", comments_table.c.video_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "target_type",
        Enum("video", "comment", name="vote_target_type", create_type=False),
        nullable=False,
    ),
    Column("target_id", UUID, nullable=False),
    Column(
        "kind",
        Enum("like", "dislike", name="vote_kind", create_type=False),
        nullable=False,
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("user_id", "target_type", "target_id", name="uq_votes_user_target"),
)

Index("idx_votes_target", votes_table.c.target_type, votes_table.c.target_id)
