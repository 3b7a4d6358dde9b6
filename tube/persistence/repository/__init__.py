"""PostgreSQL repository implementations."""

from tube.persistence.repository.comment import PostgresCommentRepository
from tube.persistence.repository.tweet import PostgresTweetRepository
from tube.persistence.repository.user import PostgresUserRepository
from tube.persistence.repository.video import PostgresVideoRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresVideoRepository",
    "PostgresCommentRepository",
    "PostgresTweetRepository",
]
