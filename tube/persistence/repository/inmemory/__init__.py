"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .likeable import InMemoryLikeableRepository
from .tweet import InMemoryTweetRepository
from .user import InMemoryUserRepository
from .video import InMemoryVideoRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryLikeableRepository",
    "InMemoryTweetRepository",
    "InMemoryUserRepository",
    "InMemoryVideoRepository",
]
