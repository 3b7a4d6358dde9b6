"""Delete tweet use case."""

from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase, require_actor
from tube.domain.service import TweetService
from tube.domain.value import TweetId, validate_identifier


class DeleteTweetRequest(BaseModel):
    """Delete tweet request."""

    tweet_id: str | None
    user_id: str | None  # Caller ID from the auth token


class DeleteTweetUseCase(BaseUseCase):
    """Use case for deleting a tweet. Only the author may delete it."""

    def __init__(self, tweet_service: TweetService) -> None:
        self.tweet_service = tweet_service

    async def execute(self, request: DeleteTweetRequest) -> None:
        tweet_id = TweetId(validate_identifier(request.tweet_id, "Tweet ID"))
        actor_id = require_actor(request.user_id)
        await self.tweet_service.delete_tweet(tweet_id, actor_id)
