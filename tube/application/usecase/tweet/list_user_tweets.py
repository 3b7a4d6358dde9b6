"""List user tweets use case."""

from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase
from tube.application.usecase.items import TweetItem
from tube.domain.service import TweetService
from tube.domain.value import UserId, validate_identifier


class ListUserTweetsRequest(BaseModel):
    """List user tweets request."""

    user_id: str | None  # Whose tweets, from the path


class ListUserTweetsResponse(BaseModel):
    """List user tweets response."""

    tweets: list[TweetItem]


class ListUserTweetsUseCase(BaseUseCase):
    """Use case for listing a user's tweets, newest first."""

    def __init__(self, tweet_service: TweetService) -> None:
        self.tweet_service = tweet_service

    async def execute(self, request: ListUserTweetsRequest) -> ListUserTweetsResponse:
        user_id = UserId(validate_identifier(request.user_id, "User ID"))
        tweets = await self.tweet_service.list_user_tweets(user_id)
        return ListUserTweetsResponse(
            tweets=[TweetItem.from_domain(t) for t in tweets]
        )
