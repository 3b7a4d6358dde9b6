"""Tweet routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel

from tube.application.usecase.items import TweetItem
from tube.application.usecase.tweet import (
    CreateTweetRequest,
    CreateTweetUseCase,
    DeleteTweetRequest,
    DeleteTweetUseCase,
    ListUserTweetsRequest,
    ListUserTweetsUseCase,
    UpdateTweetRequest,
    UpdateTweetUseCase,
)
from tube.domain.service import JWTService
from tube.interface.api.envelope import ApiResponse
from tube.interface.api.identity import resolve_actor

router = APIRouter(prefix="/tweets", tags=["tweets"], route_class=DishkaRoute)


class TweetAPIRequest(BaseModel):
    """API request carrying tweet content."""

    content: str | None = None


@router.post(
    "",
    response_model=ApiResponse[TweetItem],
    status_code=status.HTTP_201_CREATED,
)
async def create_tweet(
    request: TweetAPIRequest,
    create_tweet_use_case: FromDishka[CreateTweetUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ApiResponse[TweetItem]:
    """Post a tweet. Requires authentication."""
    tweet = await create_tweet_use_case.execute(
        CreateTweetRequest(
            user_id=resolve_actor(jwt_service, auth_token, authorization),
            content=request.content,
        )
    )
    return ApiResponse[TweetItem](
        status_code=status.HTTP_201_CREATED,
        data=tweet,
        message="Tweet created successfully",
    )


@router.get("/user/{user_id}", response_model=ApiResponse[list[TweetItem]])
async def list_user_tweets(
    user_id: str,
    list_user_tweets_use_case: FromDishka[ListUserTweetsUseCase],
) -> ApiResponse[list[TweetItem]]:
    """List a user's tweets, newest first."""
    response = await list_user_tweets_use_case.execute(
        ListUserTweetsRequest(user_id=user_id)
    )
    return ApiResponse[list[TweetItem]](
        data=response.tweets, message="Tweets fetched successfully"
    )


@router.patch("/{tweet_id}", response_model=ApiResponse[TweetItem])
async def update_tweet(
    tweet_id: str,
    request: TweetAPIRequest,
    update_tweet_use_case: FromDishka[UpdateTweetUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ApiResponse[TweetItem]:
    """Edit a tweet. Only the author may do this."""
    tweet = await update_tweet_use_case.execute(
        UpdateTweetRequest(
            tweet_id=tweet_id,
            user_id=resolve_actor(jwt_service, auth_token, authorization),
            content=request.content,
        )
    )
    return ApiResponse[TweetItem](data=tweet, message="Tweet updated successfully")


@router.delete("/{tweet_id}", response_model=ApiResponse[None])
async def delete_tweet(
    tweet_id: str,
    delete_tweet_use_case: FromDishka[DeleteTweetUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ApiResponse[None]:
    """Delete a tweet. Only the author may do this."""
    await delete_tweet_use_case.execute(
        DeleteTweetRequest(
            tweet_id=tweet_id,
            user_id=resolve_actor(jwt_service, auth_token, authorization),
        )
    )
    return ApiResponse[None](message="Tweet deleted successfully")
