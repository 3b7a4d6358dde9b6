"""Like routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header

from tube.application.usecase.items import CommentItem, TweetItem, VideoItem
from tube.application.usecase.like import (
    ListLikedVideosRequest,
    ListLikedVideosUseCase,
    ToggleLikeRequest,
    ToggleLikeResponse,
    ToggleLikeUseCase,
)
from tube.domain.service import JWTService
from tube.domain.value import LikeableKind
from tube.interface.api.envelope import ApiResponse
from tube.interface.api.identity import resolve_actor

router = APIRouter(prefix="/likes", tags=["likes"], route_class=DishkaRoute)


def _toggle_message(response: ToggleLikeResponse) -> str:
    action = "liked" if response.liked else "unliked"
    return f"{response.kind.label} {action} successfully"


async def _toggle(
    kind: LikeableKind,
    entity_id: str,
    use_case: ToggleLikeUseCase,
    jwt_service: JWTService,
    auth_token: str | None,
    authorization: str | None,
) -> ToggleLikeResponse:
    return await use_case.execute(
        ToggleLikeRequest(
            kind=kind,
            entity_id=entity_id,
            user_id=resolve_actor(jwt_service, auth_token, authorization),
        )
    )


@router.patch("/video/{video_id}", response_model=ApiResponse[VideoItem])
async def toggle_video_like(
    video_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ApiResponse[VideoItem]:
    """Like the video if the caller hasn't, unlike it otherwise.

    Requires authentication.
    """
    response = await _toggle(
        LikeableKind.VIDEO,
        video_id,
        toggle_like_use_case,
        jwt_service,
        auth_token,
        authorization,
    )
    return ApiResponse[VideoItem](data=response.entity, message=_toggle_message(response))


@router.patch("/comment/{comment_id}", response_model=ApiResponse[CommentItem])
async def toggle_comment_like(
    comment_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ApiResponse[CommentItem]:
    """Like or unlike a comment. Requires authentication."""
    response = await _toggle(
        LikeableKind.COMMENT,
        comment_id,
        toggle_like_use_case,
        jwt_service,
        auth_token,
        authorization,
    )
    return ApiResponse[CommentItem](
        data=response.entity, message=_toggle_message(response)
    )


@router.patch("/tweet/{tweet_id}", response_model=ApiResponse[TweetItem])
async def toggle_tweet_like(
    tweet_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ApiResponse[TweetItem]:
    """Like or unlike a tweet. Requires authentication."""
    response = await _toggle(
        LikeableKind.TWEET,
        tweet_id,
        toggle_like_use_case,
        jwt_service,
        auth_token,
        authorization,
    )
    return ApiResponse[TweetItem](data=response.entity, message=_toggle_message(response))


@router.get("/videos", response_model=ApiResponse[list[VideoItem]])
async def list_liked_videos(
    list_liked_videos_use_case: FromDishka[ListLikedVideosUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ApiResponse[list[VideoItem]]:
    """Videos the caller has liked, newest first. Requires authentication."""
    response = await list_liked_videos_use_case.execute(
        ListLikedVideosRequest(
            user_id=resolve_actor(jwt_service, auth_token, authorization)
        )
    )
    return ApiResponse[list[VideoItem]](
        data=response.videos, message="Liked videos fetched successfully"
    )
