"""Comment routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Header, status
from pydantic import BaseModel

from tube.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from tube.application.usecase.items import CommentItem, Page
from tube.domain.service import JWTService
from tube.interface.api.envelope import ApiResponse
from tube.interface.api.identity import resolve_actor

router = APIRouter(prefix="/comments", tags=["comments"], route_class=DishkaRoute)


class CommentAPIRequest(BaseModel):
    """API request carrying comment content."""

    content: str | None = None


@router.get("/{video_id}", response_model=ApiResponse[Page[CommentItem]])
async def list_comments(
    video_id: str,
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    page: str | None = None,
    limit: str | None = None,
) -> ApiResponse[Page[CommentItem]]:
    """List a video's comments, newest first."""
    result = await list_comments_use_case.execute(
        ListCommentsRequest(video_id=video_id, page=page, limit=limit)
    )
    return ApiResponse[Page[CommentItem]](
        data=result, message="Comments fetched successfully"
    )


@router.post(
    "/{video_id}",
    response_model=ApiResponse[CommentItem],
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    video_id: str,
    request: CommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ApiResponse[CommentItem]:
    """Comment on a video. Requires authentication."""
    comment = await add_comment_use_case.execute(
        AddCommentRequest(
            video_id=video_id,
            user_id=resolve_actor(jwt_service, auth_token, authorization),
            content=request.content,
        )
    )
    return ApiResponse[CommentItem](
        status_code=status.HTTP_201_CREATED,
        data=comment,
        message="Comment added successfully",
    )


@router.patch("/c/{comment_id}", response_model=ApiResponse[CommentItem])
async def update_comment(
    comment_id: str,
    request: CommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ApiResponse[CommentItem]:
    """Edit a comment. Only the author may do this."""
    comment = await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id,
            user_id=resolve_actor(jwt_service, auth_token, authorization),
            content=request.content,
        )
    )
    return ApiResponse[CommentItem](
        data=comment, message="Comment updated successfully"
    )


@router.delete("/c/{comment_id}", response_model=ApiResponse[None])
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
    authorization: str | None = Header(default=None),
) -> ApiResponse[None]:
    """Delete a comment. Only the author may do this."""
    await delete_comment_use_case.execute(
        DeleteCommentRequest(
            comment_id=comment_id,
            user_id=resolve_actor(jwt_service, auth_token, authorization),
        )
    )
    return ApiResponse[None](message="Comment deleted successfully")
