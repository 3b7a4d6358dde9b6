"""Tweet domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from tube.config import ConcurrencySettings
from tube.domain.error import NotAuthorizedError, NotFoundError
from tube.domain.model.tweet import Tweet
from tube.domain.repository import TweetRepository
from tube.domain.value import TweetId, UserId

from .base import Service
from .user_service import UserService


class TweetService(Service):
    """Domain service for tweet operations."""

    def __init__(
        self,
        tweet_repository: TweetRepository,
        user_service: UserService,
        concurrency: ConcurrencySettings,
    ) -> None:
        self.tweet_repository = tweet_repository
        self.user_service = user_service
        self.concurrency = concurrency

    async def get_tweet(self, tweet_id: TweetId) -> Tweet:
        """Get a tweet by ID.

        Raises:
            NotFoundError: If tweet not found
        """
        with logfire.span("tweet_service.get_tweet", tweet_id=str(tweet_id)):
            tweet = await self.tweet_repository.find_by_id(tweet_id)
            if not tweet:
                logfire.warn("Tweet not found", tweet_id=str(tweet_id))
                raise NotFoundError("Tweet", str(tweet_id))
            return tweet

    async def create_tweet(self, owner_id: UserId, content: str) -> Tweet:
        """Post a tweet as an existing user.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        with logfire.span("tweet_service.create_tweet", owner_id=str(owner_id)):
            await self.user_service.get_by_id(owner_id)

            now = datetime.now()
            tweet = Tweet(
                id=TweetId(uuid4()),
                owner_id=owner_id,
                content=content,
                created_at=now,
                updated_at=now,
            )
            saved = await self.tweet_repository.save(tweet)
            logfire.info(
                "Tweet created", tweet_id=str(saved.id), owner_id=str(owner_id)
            )
            return saved

    async def list_user_tweets(self, user_id: UserId) -> list[Tweet]:
        """Get a user's tweets, newest first.

        Raises:
            NotFoundError: If the user doesn't exist
        """
        with logfire.span("tweet_service.list_user_tweets", user_id=str(user_id)):
            await self.user_service.get_by_id(user_id)
            tweets = await self.tweet_repository.find_by_owner(user_id)
            logfire.info(
                "Tweets retrieved for user", user_id=str(user_id), count=len(tweets)
            )
            return tweets

    async def update_tweet(
        self, tweet_id: TweetId, actor_id: UserId, content: str
    ) -> Tweet:
        """Edit a tweet. Only the author may do this.

        Raises:
            NotFoundError: If tweet not found
            NotAuthorizedError: If the actor didn't write the tweet
            ConflictError: If concurrent writers kept winning
        """
        with logfire.span(
            "tweet_service.update_tweet",
            tweet_id=str(tweet_id),
            actor_id=str(actor_id),
        ):

            async def attempt() -> Tweet | None:
                tweet = await self.get_tweet(tweet_id)
                self._ensure_owner(tweet, actor_id)
                return await self.tweet_repository.replace(
                    tweet.revise(content=content)
                )

            stored = await self._write_with_retry(
                "Tweet", str(tweet_id), attempt, self.concurrency.max_write_attempts
            )
            logfire.info("Tweet updated", tweet_id=str(tweet_id))
            return stored

    async def delete_tweet(self, tweet_id: TweetId, actor_id: UserId) -> None:
        """Delete a tweet. Only the author may do this."""
        with logfire.span(
            "tweet_service.delete_tweet",
            tweet_id=str(tweet_id),
            actor_id=str(actor_id),
        ):
            tweet = await self.get_tweet(tweet_id)
            self._ensure_owner(tweet, actor_id)
            if not await self.tweet_repository.delete(tweet_id):
                raise NotFoundError("Tweet", str(tweet_id))
            logfire.info("Tweet deleted", tweet_id=str(tweet_id))

    @staticmethod
    def _ensure_owner(tweet: Tweet, actor_id: UserId) -> None:
        if tweet.owner_id != actor_id:
            logfire.warn(
                "Tweet modification denied",
                tweet_id=str(tweet.id),
                actor_id=str(actor_id),
            )
            raise NotAuthorizedError("Tweet", str(tweet.id), str(actor_id))
