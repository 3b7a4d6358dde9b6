"""Likeable repository aggregator provider."""

from dishka import Scope, provide

from tube.domain.repository import (
    CommentRepository,
    LikeableRepository,
    TweetRepository,
    VideoRepository,
)
from tube.domain.value import LikeableKind
from tube.util.di.base import ProviderBase


class LikeableAggregatorProvider(ProviderBase):
    """Provider that aggregates the likeable repositories into a dictionary."""

    scope = Scope.REQUEST

    @provide(scope=Scope.REQUEST)
    def get_likeable_repositories(
        self,
        video_repository: VideoRepository,
        comment_repository: CommentRepository,
        tweet_repository: TweetRepository,
    ) -> dict[LikeableKind, LikeableRepository]:
        """Provide dictionary of repositories by likeable kind.

        This lets the LikeService run one toggle for every kind.

        Returns:
            Dictionary mapping LikeableKind to its repository
        """
        return {
            LikeableKind.VIDEO: video_repository,
            LikeableKind.COMMENT: comment_repository,
            LikeableKind.TWEET: tweet_repository,
        }
