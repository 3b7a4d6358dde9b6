"""In-memory tweet repository for testing."""

from tube.domain.model.tweet import Tweet
from tube.domain.repository.tweet import TweetRepository
from tube.domain.value import UserId

from .likeable import InMemoryLikeableRepository


class InMemoryTweetRepository(InMemoryLikeableRepository[Tweet], TweetRepository):
    """In-memory implementation of TweetRepository for testing."""

    async def find_by_owner(self, owner_id: UserId) -> list[Tweet]:
        tweets = [t for t in self._entities.values() if t.owner_id == owner_id]
        tweets.sort(key=lambda t: (t.created_at, t.id), reverse=True)
        return tweets
