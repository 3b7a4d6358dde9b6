"""Video aggregate root.

Media files are uploaded to external storage before a video is created;
the video only keeps the resulting URLs.
"""

from datetime import datetime
from typing import Optional, Self

from pydantic import Field

from tube.domain.model.likeable import LikeableModel
from tube.domain.value import UserId, VideoId


class Video(LikeableModel):
    """Video aggregate root.

    Business rules:
    - New videos start unpublished
    - ``is_published`` only changes through :meth:`toggle_published`
    """

    id: VideoId
    owner_id: UserId
    title: str = Field(min_length=1, max_length=300)
    description: str = Field(min_length=1, max_length=5000)
    media_url: str = Field(min_length=1)
    thumbnail_url: str = Field(min_length=1)
    duration: Optional[float] = Field(default=None, ge=0)  # Seconds
    views: int = Field(default=0, ge=0)
    is_published: bool = False

    def toggle_published(self) -> Self:
        """Return a copy with the publish flag negated."""
        return self.model_copy(
            update={"is_published": not self.is_published, "updated_at": datetime.now()}
        )
