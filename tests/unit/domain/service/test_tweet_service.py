"""Unit tests for TweetService."""

from uuid import uuid4

import pytest

from tests.factories import make_tweet, make_user, minutes_ago
from tests.harness import create_env_fixture
from tube.domain.error import NotAuthorizedError, NotFoundError
from tube.domain.repository import TweetRepository, UserRepository
from tube.domain.service import TweetService
from tube.domain.value import UserId

unit_env = create_env_fixture()


class TestTweetService:
    """Unit tests for TweetService."""

    @pytest.mark.asyncio
    async def test_create_tweet(self, unit_env):
        tweet_service = await unit_env.get(TweetService)
        user_repo = await unit_env.get(UserRepository)
        user = await user_repo.save(make_user())

        tweet = await tweet_service.create_tweet(user.id, "Hello channel")

        assert tweet.owner_id == user.id
        assert tweet.content == "Hello channel"
        assert await tweet_service.get_tweet(tweet.id) == tweet

    @pytest.mark.asyncio
    async def test_create_tweet_requires_existing_user(self, unit_env):
        tweet_service = await unit_env.get(TweetService)

        with pytest.raises(NotFoundError):
            await tweet_service.create_tweet(UserId(uuid4()), "Hello")

    @pytest.mark.asyncio
    async def test_list_user_tweets_newest_first(self, unit_env):
        """Only the user's tweets are listed, newest first."""
        tweet_service = await unit_env.get(TweetService)
        user_repo = await unit_env.get(UserRepository)
        tweet_repo = await unit_env.get(TweetRepository)
        user = await user_repo.save(make_user())
        older = await tweet_repo.save(make_tweet(user.id, created_at=minutes_ago(20)))
        newer = await tweet_repo.save(make_tweet(user.id, created_at=minutes_ago(2)))
        await tweet_repo.save(make_tweet(UserId(uuid4())))

        tweets = await tweet_service.list_user_tweets(user.id)

        assert [t.id for t in tweets] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_author_can_update_tweet(self, unit_env):
        tweet_service = await unit_env.get(TweetService)
        tweet_repo = await unit_env.get(TweetRepository)
        author = UserId(uuid4())
        tweet = await tweet_repo.save(make_tweet(author))

        updated = await tweet_service.update_tweet(tweet.id, author, "Edited")

        assert updated.content == "Edited"

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete_tweet(self, unit_env):
        tweet_service = await unit_env.get(TweetService)
        tweet_repo = await unit_env.get(TweetRepository)
        tweet = await tweet_repo.save(make_tweet(UserId(uuid4())))

        with pytest.raises(NotAuthorizedError):
            await tweet_service.delete_tweet(tweet.id, UserId(uuid4()))

        assert await tweet_repo.find_by_id(tweet.id) is not None
