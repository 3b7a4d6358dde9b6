"""Response items shared by use cases.

Items serialize with camelCase aliases; JSON responses use the aliases.
"""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from tube.domain.model import Comment, LikeableModel, Tweet, Video

T = TypeVar("T")


class ApiModel(BaseModel):
    """Base for models rendered as camelCase JSON."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class VideoItem(ApiModel):
    """Video in responses."""

    id: str
    owner_id: str
    title: str
    description: str
    media_url: str
    thumbnail_url: str
    duration: float | None
    views: int
    is_published: bool
    likes: list[str]
    likes_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, video: Video) -> "VideoItem":
        return cls(
            id=str(video.id),
            owner_id=str(video.owner_id),
            title=video.title,
            description=video.description,
            media_url=video.media_url,
            thumbnail_url=video.thumbnail_url,
            duration=video.duration,
            views=video.views,
            is_published=video.is_published,
            likes=[str(u) for u in video.likes],
            likes_count=video.likes_count,
            created_at=video.created_at,
            updated_at=video.updated_at,
        )


class CommentItem(ApiModel):
    """Comment in responses."""

    id: str
    video_id: str
    owner_id: str
    content: str
    likes: list[str]
    likes_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        return cls(
            id=str(comment.id),
            video_id=str(comment.video_id),
            owner_id=str(comment.owner_id),
            content=comment.content,
            likes=[str(u) for u in comment.likes],
            likes_count=comment.likes_count,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class TweetItem(ApiModel):
    """Tweet in responses."""

    id: str
    owner_id: str
    content: str
    likes: list[str]
    likes_count: int
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, tweet: Tweet) -> "TweetItem":
        return cls(
            id=str(tweet.id),
            owner_id=str(tweet.owner_id),
            content=tweet.content,
            likes=[str(u) for u in tweet.likes],
            likes_count=tweet.likes_count,
            created_at=tweet.created_at,
            updated_at=tweet.updated_at,
        )


LikeableItem = VideoItem | CommentItem | TweetItem


def likeable_item(entity: LikeableModel) -> LikeableItem:
    """Build the response item matching the entity's type."""
    if isinstance(entity, Video):
        return VideoItem.from_domain(entity)
    if isinstance(entity, Comment):
        return CommentItem.from_domain(entity)
    if isinstance(entity, Tweet):
        return TweetItem.from_domain(entity)
    raise TypeError(f"Unsupported likeable entity: {type(entity).__name__}")


class Page(ApiModel, Generic[T]):
    """One page of results."""

    items: list[T]
    page: int
    limit: int
    total: int
