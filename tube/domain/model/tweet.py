"""Tweet entity."""

from pydantic import Field

from tube.domain.model.likeable import LikeableModel
from tube.domain.value import TweetId, UserId


class Tweet(LikeableModel):
    """Short text post on a user's channel."""

    id: TweetId
    owner_id: UserId
    content: str = Field(min_length=1, max_length=500)
