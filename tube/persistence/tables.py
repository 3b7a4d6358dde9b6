"""SQLAlchemy table definitions for Tube.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    Float,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()


def _likeable_columns() -> list[Column]:
    """Columns shared by every likeable table."""
    return [
        Column(
            "likes",
            postgresql.ARRAY(UUID(as_uuid=True)),
            nullable=False,
            server_default="{}",
        ),
        Column("version", Integer, nullable=False, server_default="1"),
        Column(
            "created_at",
            TIMESTAMP(timezone=True),
            nullable=False,
            server_default="NOW()",
        ),
        Column(
            "updated_at",
            TIMESTAMP(timezone=True),
            nullable=False,
            server_default="NOW()",
        ),
    ]


# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column("username", String(64), nullable=False, unique=True),  # Lower-case
    Column("email", String(255), nullable=False, unique=True),  # Lower-case
    Column("full_name", String(255), nullable=True),
    Column("avatar_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_username_email", users_table.c.username, users_table.c.email)

# ============================================================================
# VIDEOS TABLE
# ============================================================================
videos_table = Table(
    "videos",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "owner_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("title", String(300), nullable=False),
    Column("description", Text, nullable=False),
    Column("media_url", Text, nullable=False),
    Column("thumbnail_url", Text, nullable=False),
    Column("duration", Float, nullable=True),  # Seconds
    Column("views", Integer, nullable=False, server_default="0"),
    Column("is_published", Boolean, nullable=False, server_default="false"),
    *_likeable_columns(),
    CheckConstraint("views >= 0", name="videos_views_non_negative"),
    CheckConstraint("version >= 1", name="videos_version_positive"),
)

Index("idx_videos_owner_id", videos_table.c.owner_id)
Index("idx_videos_created_at", videos_table.c.created_at.desc())
Index("idx_videos_likes", videos_table.c.likes, postgresql_using="gin")

# ============================================================================
# COMMENTS TABLE (flat, no nesting)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "video_id",
        UUID(as_uuid=True),
        ForeignKey("videos.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "owner_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    *_likeable_columns(),
    CheckConstraint("version >= 1", name="comments_version_positive"),
)

Index("idx_comments_video_id", comments_table.c.video_id)
Index("idx_comments_created_at", comments_table.c.created_at)

# ============================================================================
# TWEETS TABLE
# ============================================================================
tweets_table = Table(
    "tweets",
    metadata,
    Column("id", UUID(as_uuid=True), primary_key=True),
    Column(
        "owner_id",
        UUID(as_uuid=True),
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", String(500), nullable=False),
    *_likeable_columns(),
    CheckConstraint("version >= 1", name="tweets_version_positive"),
)

Index("idx_tweets_owner_id", tweets_table.c.owner_id)
