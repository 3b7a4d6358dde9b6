"""Tweet repository interface."""

from abc import abstractmethod
from typing import List

from tube.domain.model.tweet import Tweet
from tube.domain.repository.likeable import LikeableRepository
from tube.domain.value import UserId


class TweetRepository(LikeableRepository[Tweet]):
    """Repository for Tweet entity."""

    @abstractmethod
    async def find_by_owner(self, owner_id: UserId) -> List[Tweet]:
        """Find a user's tweets, newest first.

        Args:
            owner_id: The author's user ID

        Returns:
            Tweets by the user
        """
        pass
