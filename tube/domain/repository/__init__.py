"""Repository interfaces.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from tube.domain.repository.comment import CommentRepository
from tube.domain.repository.likeable import LikeableRepository
from tube.domain.repository.tweet import TweetRepository
from tube.domain.repository.user import UserRepository
from tube.domain.repository.video import VideoRepository

__all__ = [
    "LikeableRepository",
    "UserRepository",
    "VideoRepository",
    "CommentRepository",
    "TweetRepository",
]
