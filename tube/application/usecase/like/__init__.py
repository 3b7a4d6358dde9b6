"""Like use cases."""

from .list_liked_videos import (
    ListLikedVideosRequest,
    ListLikedVideosResponse,
    ListLikedVideosUseCase,
)
from .toggle_like import ToggleLikeRequest, ToggleLikeResponse, ToggleLikeUseCase

__all__ = [
    "ListLikedVideosRequest",
    "ListLikedVideosResponse",
    "ListLikedVideosUseCase",
    "ToggleLikeRequest",
    "ToggleLikeResponse",
    "ToggleLikeUseCase",
]
