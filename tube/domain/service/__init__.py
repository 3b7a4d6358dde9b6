"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .jwt_service import JWTService
from .like_service import LikeService, LikeToggleResult
from .tweet_service import TweetService
from .user_service import UserService
from .video_service import VideoService

__all__ = [
    "CommentService",
    "JWTService",
    "LikeService",
    "LikeToggleResult",
    "Service",
    "TweetService",
    "UserService",
    "VideoService",
]
