"""Mock persistence providers for testing."""

from dishka import Scope, provide

from tube.domain.repository import (
    CommentRepository,
    TweetRepository,
    UserRepository,
    VideoRepository,
)
from tube.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryTweetRepository,
    InMemoryUserRepository,
    InMemoryVideoRepository,
)
from tube.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses APP scope so every request made against one container sees the same
    store (API tests issue several HTTP requests). Each test builds its own
    container, which keeps tests isolated.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_user_repository(self) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository()

    @provide(scope=Scope.APP)
    def get_video_repository(self, user_repository: UserRepository) -> VideoRepository:
        """Provide in-memory video repository (joins owners via users)."""
        return InMemoryVideoRepository(user_repository)

    @provide(scope=Scope.APP)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.APP)
    def get_tweet_repository(self) -> TweetRepository:
        """Provide in-memory tweet repository."""
        return InMemoryTweetRepository()
