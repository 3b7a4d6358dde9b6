"""PostgreSQL implementation of Tweet repository."""

from typing import List

from sqlalchemy import desc, select

from tube.domain.model import Tweet
from tube.domain.repository import TweetRepository
from tube.domain.value import UserId
from tube.persistence.database import translate_store_errors
from tube.persistence.mappers import row_to_tweet, tweet_to_dict
from tube.persistence.repository.likeable import PostgresLikeableRepository
from tube.persistence.tables import tweets_table


class PostgresTweetRepository(PostgresLikeableRepository[Tweet], TweetRepository):
    """PostgreSQL implementation of TweetRepository."""

    table = tweets_table
    name = "tweet"
    row_to_entity = staticmethod(row_to_tweet)
    entity_to_dict = staticmethod(tweet_to_dict)

    async def find_by_owner(self, owner_id: UserId) -> List[Tweet]:
        """Find a user's tweets, newest first."""
        stmt = (
            select(tweets_table)
            .where(tweets_table.c.owner_id == owner_id)
            .order_by(desc(tweets_table.c.created_at), desc(tweets_table.c.id))
        )
        with translate_store_errors("tweet.find_by_owner"):
            result = await self.session.execute(stmt)
            return [row_to_tweet(row._asdict()) for row in result.fetchall()]
