"""Comment entity.

Comments are flat: every comment belongs directly to a video.
"""

from pydantic import Field

from tube.domain.model.likeable import LikeableModel
from tube.domain.value import CommentId, UserId, VideoId


class Comment(LikeableModel):
    """Comment on a video."""

    id: CommentId
    video_id: VideoId
    owner_id: UserId
    content: str = Field(min_length=1, max_length=10000)
