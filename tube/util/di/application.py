"""Application layer DI providers."""

from dishka import Scope, provide

from tube.application.usecase.comment import (
    AddCommentUseCase,
    DeleteCommentUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from tube.application.usecase.like import ListLikedVideosUseCase, ToggleLikeUseCase
from tube.application.usecase.tweet import (
    CreateTweetUseCase,
    DeleteTweetUseCase,
    ListUserTweetsUseCase,
    UpdateTweetUseCase,
)
from tube.application.usecase.video import (
    CreateVideoUseCase,
    DeleteVideoUseCase,
    GetVideoUseCase,
    ListVideosUseCase,
    TogglePublishUseCase,
    UpdateVideoUseCase,
)
from tube.config import ListingSettings
from tube.domain.service import (
    CommentService,
    LikeService,
    TweetService,
    VideoService,
)
from tube.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(self, like_service: LikeService) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(like_service=like_service)

    @provide(scope=Scope.REQUEST)
    def get_list_liked_videos_use_case(
        self, video_service: VideoService
    ) -> ListLikedVideosUseCase:
        """Provide list liked videos use case."""
        return ListLikedVideosUseCase(video_service=video_service)

    # Video use cases
    @provide(scope=Scope.REQUEST)
    def get_list_videos_use_case(
        self, video_service: VideoService, listing_settings: ListingSettings
    ) -> ListVideosUseCase:
        """Provide list videos use case."""
        return ListVideosUseCase(
            video_service=video_service, listing_settings=listing_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_get_video_use_case(self, video_service: VideoService) -> GetVideoUseCase:
        """Provide get video use case."""
        return GetVideoUseCase(video_service=video_service)

    @provide(scope=Scope.REQUEST)
    def get_create_video_use_case(
        self, video_service: VideoService
    ) -> CreateVideoUseCase:
        """Provide create video use case."""
        return CreateVideoUseCase(video_service=video_service)

    @provide(scope=Scope.REQUEST)
    def get_update_video_use_case(
        self, video_service: VideoService
    ) -> UpdateVideoUseCase:
        """Provide update video use case."""
        return UpdateVideoUseCase(video_service=video_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_video_use_case(
        self, video_service: VideoService
    ) -> DeleteVideoUseCase:
        """Provide delete video use case."""
        return DeleteVideoUseCase(video_service=video_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_publish_use_case(
        self, video_service: VideoService
    ) -> TogglePublishUseCase:
        """Provide toggle publish use case."""
        return TogglePublishUseCase(video_service=video_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService, listing_settings: ListingSettings
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service, listing_settings=listing_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self, comment_service: CommentService
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Tweet use cases
    @provide(scope=Scope.REQUEST)
    def get_create_tweet_use_case(
        self, tweet_service: TweetService
    ) -> CreateTweetUseCase:
        """Provide create tweet use case."""
        return CreateTweetUseCase(tweet_service=tweet_service)

    @provide(scope=Scope.REQUEST)
    def get_list_user_tweets_use_case(
        self, tweet_service: TweetService
    ) -> ListUserTweetsUseCase:
        """Provide list user tweets use case."""
        return ListUserTweetsUseCase(tweet_service=tweet_service)

    @provide(scope=Scope.REQUEST)
    def get_update_tweet_use_case(
        self, tweet_service: TweetService
    ) -> UpdateTweetUseCase:
        """Provide update tweet use case."""
        return UpdateTweetUseCase(tweet_service=tweet_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_tweet_use_case(
        self, tweet_service: TweetService
    ) -> DeleteTweetUseCase:
        """Provide delete tweet use case."""
        return DeleteTweetUseCase(tweet_service=tweet_service)
