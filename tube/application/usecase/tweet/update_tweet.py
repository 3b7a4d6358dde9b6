"""Update tweet use case."""

from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase, require_actor, require_text
from tube.application.usecase.items import TweetItem
from tube.domain.service import TweetService
from tube.domain.value import TweetId, validate_identifier


class UpdateTweetRequest(BaseModel):
    """Update tweet request."""

    tweet_id: str | None
    user_id: str | None  # Caller ID from the auth token
    content: str | None


class UpdateTweetUseCase(BaseUseCase):
    """Use case for editing a tweet. Only the author may edit it."""

    def __init__(self, tweet_service: TweetService) -> None:
        self.tweet_service = tweet_service

    async def execute(self, request: UpdateTweetRequest) -> TweetItem:
        tweet_id = TweetId(validate_identifier(request.tweet_id, "Tweet ID"))
        content = require_text(request.content, "Content")
        actor_id = require_actor(request.user_id)

        tweet = await self.tweet_service.update_tweet(tweet_id, actor_id, content)
        return TweetItem.from_domain(tweet)
