"""Domain layer DI providers."""

from dishka import Scope, provide

from tube.config import AuthSettings, ConcurrencySettings
from tube.domain.repository import (
    CommentRepository,
    LikeableRepository,
    TweetRepository,
    UserRepository,
    VideoRepository,
)
from tube.domain.service import (
    CommentService,
    JWTService,
    LikeService,
    TweetService,
    UserService,
    VideoService,
)
from tube.domain.value import LikeableKind
from tube.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_user_service(self, user_repository: UserRepository) -> UserService:
        """Provide user domain service."""
        return UserService(user_repository=user_repository)

    @provide
    def get_like_service(
        self,
        repositories: dict[LikeableKind, LikeableRepository],
        concurrency: ConcurrencySettings,
    ) -> LikeService:
        """Provide like toggle domain service."""
        return LikeService(repositories=repositories, concurrency=concurrency)

    @provide
    def get_video_service(
        self,
        video_repository: VideoRepository,
        user_service: UserService,
        concurrency: ConcurrencySettings,
    ) -> VideoService:
        """Provide video domain service."""
        return VideoService(
            video_repository=video_repository,
            user_service=user_service,
            concurrency=concurrency,
        )

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        video_service: VideoService,
        concurrency: ConcurrencySettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            video_service=video_service,
            concurrency=concurrency,
        )

    @provide
    def get_tweet_service(
        self,
        tweet_repository: TweetRepository,
        user_service: UserService,
        concurrency: ConcurrencySettings,
    ) -> TweetService:
        """Provide tweet domain service."""
        return TweetService(
            tweet_repository=tweet_repository,
            user_service=user_service,
            concurrency=concurrency,
        )
