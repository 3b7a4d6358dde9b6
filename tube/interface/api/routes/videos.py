"""Video routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, Query, status
from pydantic import Field

from tube.application.usecase.items import ApiModel, Page, VideoItem
from tube.application.usecase.video import (
    CreateVideoRequest,
    CreateVideoUseCase,
    DeleteVideoRequest,
    DeleteVideoUseCase,
    GetVideoRequest,
    GetVideoUseCase,
    ListVideosRequest,
    ListVideosUseCase,
    TogglePublishRequest,
    TogglePublishUseCase,
    UpdateVideoRequest,
    UpdateVideoUseCase,
)
from tube.domain.service import JWTService
from tube.interface.api.envelope import ApiResponse
from tube.interface.api.identity import resolve_actor

router = APIRouter(prefix="/videos", tags=["videos"], route_class=DishkaRoute)


class CreateVideoAPIRequest(ApiModel):
    """API request for creating a video from uploaded media."""

    title: str | None = None
    description: str | None = None
    media_url: str | None = None
    thumbnail_url: str | None = None
    duration: float | None = Field(default=None, ge=0)


class UpdateVideoAPIRequest(ApiModel):
    """API request for updating video details."""

    title: str | None = None
    description: str | None = None
    thumbnail_url: str | None = None


@router.get("/{username}/{email}", response_model=ApiResponse[Page[VideoItem]])
async def list_videos(
    username: str,
    email: str,
    list_videos_use_case: FromDishka[ListVideosUseCase],
    page: str | None = None,
    limit: str | None = None,
    query: str | None = None,
    sort_by: str | None = Query(default=None, alias="sortBy"),
    sort_type: str | None = Query(default=None, alias="sortType"),
    user_id: str | None = Query(default=None, alias="userId"),
) -> ApiResponse[Page[VideoItem]]:
    """List a channel's videos with filtering, sorting and pagination.

    An unknown channel or no matches yield an empty page.
    """
    result = await list_videos_use_case.execute(
        ListVideosRequest(
            username=username,
            email=email,
            page=page,
            limit=limit,
            query=query,
            sort_by=sort_by,
            sort_type=sort_type,
            user_id=user_id,
        )
    )
    return ApiResponse[Page[VideoItem]](
        data=result, message="Videos fetched successfully"
    )


@router.post(
    "",
    response_model=ApiResponse[VideoItem],
    status_code=status.HTTP_201_CREATED,
)
async def create_video(
    request: CreateVideoAPIRequest,
    create_video_use_case: FromDishka[CreateVideoUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ApiResponse[VideoItem]:
    """Create an unpublished video from already uploaded media.

    Requires authentication.
    """
    video = await create_video_use_case.execute(
        CreateVideoRequest(
            user_id=resolve_actor(jwt_service, auth_token, authorization),
            title=request.title,
            description=request.description,
            media_url=request.media_url,
            thumbnail_url=request.thumbnail_url,
            duration=request.duration,
        )
    )
    return ApiResponse[VideoItem](
        status_code=status.HTTP_201_CREATED,
        data=video,
        message="Video uploaded successfully",
    )


@router.get("/{video_id}", response_model=ApiResponse[VideoItem])
async def get_video(
    video_id: str,
    get_video_use_case: FromDishka[GetVideoUseCase],
) -> ApiResponse[VideoItem]:
    """Get a video by ID."""
    video = await get_video_use_case.execute(GetVideoRequest(video_id=video_id))
    return ApiResponse[VideoItem](data=video, message="Video found successfully")


@router.patch("/{video_id}", response_model=ApiResponse[VideoItem])
async def update_video(
    video_id: str,
    request: UpdateVideoAPIRequest,
    update_video_use_case: FromDishka[UpdateVideoUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ApiResponse[VideoItem]:
    """Update title, description or thumbnail. Only the owner may do this."""
    video = await update_video_use_case.execute(
        UpdateVideoRequest(
            video_id=video_id,
            user_id=resolve_actor(jwt_service, auth_token, authorization),
            title=request.title,
            description=request.description,
            thumbnail_url=request.thumbnail_url,
        )
    )
    return ApiResponse[VideoItem](data=video, message="Video updated successfully")


@router.delete("/{video_id}", response_model=ApiResponse[None])
async def delete_video(
    video_id: str,
    delete_video_use_case: FromDishka[DeleteVideoUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ApiResponse[None]:
    """Delete a video. Only the owner may do this."""
    await delete_video_use_case.execute(
        DeleteVideoRequest(
            video_id=video_id,
            user_id=resolve_actor(jwt_service, auth_token, authorization),
        )
    )
    return ApiResponse[None](message="Video deleted successfully")


@router.patch("/{video_id}/toggle-publish", response_model=ApiResponse[VideoItem])
async def toggle_publish(
    video_id: str,
    toggle_publish_use_case: FromDishka[TogglePublishUseCase],
) -> ApiResponse[VideoItem]:
    """Flip the video between published and unpublished."""
    video = await toggle_publish_use_case.execute(
        TogglePublishRequest(video_id=video_id)
    )
    return ApiResponse[VideoItem](
        data=video, message="Video status updated successfully"
    )
