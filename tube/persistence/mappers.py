"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from tube.domain.model import Comment, Tweet, User, Video
from tube.domain.value import (
    CommentId,
    Email,
    TweetId,
    UserId,
    Username,
    VideoId,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _likes(value: Any) -> tuple[UserId, ...]:
    return tuple(UserId(_uuid(v)) for v in (value or ()))


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=Email(row["email"]),
        full_name=row.get("full_name"),
        avatar_url=row.get("avatar_url"),
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return {
        "id": user.id,
        "username": user.username.root,
        "email": user.email.root,
        "full_name": user.full_name,
        "avatar_url": user.avatar_url,
        "created_at": user.created_at,
    }


def row_to_video(row: Dict[str, Any]) -> Video:
    """Convert database row to Video domain model.

    Args:
        row: Database row as dict

    Returns:
        Video domain model
    """
    return Video(
        id=VideoId(_uuid(row["id"])),
        owner_id=UserId(_uuid(row["owner_id"])),
        title=row["title"],
        description=row["description"],
        media_url=row["media_url"],
        thumbnail_url=row["thumbnail_url"],
        duration=row.get("duration"),
        views=row["views"],
        is_published=row["is_published"],
        likes=_likes(row.get("likes")),
        version=row["version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def video_to_dict(video: Video) -> Dict[str, Any]:
    """Convert Video domain model to database dict.

    Args:
        video: Video domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = video.model_dump()
    data["likes"] = list(video.likes)
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model."""
    return Comment(
        id=CommentId(_uuid(row["id"])),
        video_id=VideoId(_uuid(row["video_id"])),
        owner_id=UserId(_uuid(row["owner_id"])),
        content=row["content"],
        likes=_likes(row.get("likes")),
        version=row["version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    data = comment.model_dump()
    data["likes"] = list(comment.likes)
    return data


def row_to_tweet(row: Dict[str, Any]) -> Tweet:
    """Convert database row to Tweet domain model."""
    return Tweet(
        id=TweetId(_uuid(row["id"])),
        owner_id=UserId(_uuid(row["owner_id"])),
        content=row["content"],
        likes=_likes(row.get("likes")),
        version=row["version"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def tweet_to_dict(tweet: Tweet) -> Dict[str, Any]:
    """Convert Tweet domain model to database dict."""
    data = tweet.model_dump()
    data["likes"] = list(tweet.likes)
    return data
