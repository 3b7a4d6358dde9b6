"""initial_schema

Create the schema for Tube:
- Users (read-only here, owned by the identity service)
- Videos (likes stored as a UUID array, optimistic version stamp)
- Comments (flat, one level under a video)
- Tweets

Revision ID: 3f1c2b7d9a10
Revises:
Create Date: 2026-10-19 10:12:44.318204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c2b7d9a10"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _likeable_columns() -> list[sa.Column]:
    return [
        sa.Column(
            "likes",
            postgresql.ARRAY(postgresql.UUID(as_uuid=True)),
            nullable=False,
            server_default="{}",
        ),
        sa.Column("version", sa.Integer(), nullable=False, server_default="1"),
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
    ]


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "users",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("username", sa.String(64), nullable=False, unique=True),
        sa.Column("email", sa.String(255), nullable=False, unique=True),
        sa.Column("full_name", sa.String(255), nullable=True),
        sa.Column("avatar_url", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    )
    op.create_index("idx_users_username_email", "users", ["username", "email"])

    op.create_table(
        "videos",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "owner_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("media_url", sa.Text(), nullable=False),
        sa.Column("thumbnail_url", sa.Text(), nullable=False),
        sa.Column("duration", sa.Float(), nullable=True),
        sa.Column("views", sa.Integer(), nullable=False, server_default="0"),
        sa.Column(
            "is_published", sa.Boolean(), nullable=False, server_default="false"
        ),
        *_likeable_columns(),
        sa.CheckConstraint("views >= 0", name="videos_views_non_negative"),
        sa.CheckConstraint("version >= 1", name="videos_version_positive"),
    )
    op.create_index("idx_videos_owner_id", "videos", ["owner_id"])
    op.create_index(
        "idx_videos_created_at", "videos", [sa.text("created_at DESC")]
    )
    op.create_index(
        "idx_videos_likes", "videos", ["likes"], postgresql_using="gin"
    )

    op.create_table(
        "comments",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "video_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("videos.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "owner_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("content", sa.Text(), nullable=False),
        *_likeable_columns(),
        sa.CheckConstraint("version >= 1", name="comments_version_positive"),
    )
    op.create_index("idx_comments_video_id", "comments", ["video_id"])
    op.create_index("idx_comments_created_at", "comments", ["created_at"])

    op.create_table(
        "tweets",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column(
            "owner_id",
            postgresql.UUID(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("content", sa.String(500), nullable=False),
        *_likeable_columns(),
        sa.CheckConstraint("version >= 1", name="tweets_version_positive"),
    )
    op.create_index("idx_tweets_owner_id", "tweets", ["owner_id"])


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("tweets")
    op.drop_table("comments")
    op.drop_table("videos")
    op.drop_table("users")
