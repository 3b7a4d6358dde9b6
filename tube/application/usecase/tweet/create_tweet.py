"""Create tweet use case."""

import logfire
from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase, require_actor, require_text
from tube.application.usecase.items import TweetItem
from tube.domain.service import TweetService


class CreateTweetRequest(BaseModel):
    """Create tweet request."""

    user_id: str | None  # Caller ID from the auth token
    content: str | None


class CreateTweetUseCase(BaseUseCase):
    """Use case for posting a tweet."""

    def __init__(self, tweet_service: TweetService) -> None:
        """Initialize create tweet use case.

        Args:
            tweet_service: Tweet domain service
        """
        self.tweet_service = tweet_service

    async def execute(self, request: CreateTweetRequest) -> TweetItem:
        """Execute create tweet flow.

        Raises:
            MissingFieldError: If the content is missing or blank
            MissingActorError: If no caller identity was supplied
            NotFoundError: If the caller's user doesn't exist
        """
        with logfire.span("create_tweet.execute"):
            content = require_text(request.content, "Content")
            owner_id = require_actor(request.user_id)
            tweet = await self.tweet_service.create_tweet(owner_id, content)
            return TweetItem.from_domain(tweet)
