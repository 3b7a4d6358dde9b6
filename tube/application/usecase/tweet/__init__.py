"""Tweet use cases."""

from .create_tweet import CreateTweetRequest, CreateTweetUseCase
from .delete_tweet import DeleteTweetRequest, DeleteTweetUseCase
from .list_user_tweets import (
    ListUserTweetsRequest,
    ListUserTweetsResponse,
    ListUserTweetsUseCase,
)
from .update_tweet import UpdateTweetRequest, UpdateTweetUseCase

__all__ = [
    "CreateTweetRequest",
    "CreateTweetUseCase",
    "DeleteTweetRequest",
    "DeleteTweetUseCase",
    "ListUserTweetsRequest",
    "ListUserTweetsResponse",
    "ListUserTweetsUseCase",
    "UpdateTweetRequest",
    "UpdateTweetUseCase",
]
