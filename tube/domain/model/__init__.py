"""Domain model entities."""

from tube.domain.model.comment import Comment
from tube.domain.model.likeable import LikeableModel
from tube.domain.model.tweet import Tweet
from tube.domain.model.user import User
from tube.domain.model.video import Video

__all__ = [
    "User",
    "LikeableModel",
    "Video",
    "Comment",
    "Tweet",
]
