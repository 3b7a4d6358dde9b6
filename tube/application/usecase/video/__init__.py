"""Video use cases."""

from .create_video import CreateVideoRequest, CreateVideoUseCase
from .delete_video import DeleteVideoRequest, DeleteVideoUseCase
from .get_video import GetVideoRequest, GetVideoUseCase
from .list_videos import ListVideosRequest, ListVideosUseCase
from .toggle_publish import TogglePublishRequest, TogglePublishUseCase
from .update_video import UpdateVideoRequest, UpdateVideoUseCase

__all__ = [
    "CreateVideoRequest",
    "CreateVideoUseCase",
    "DeleteVideoRequest",
    "DeleteVideoUseCase",
    "GetVideoRequest",
    "GetVideoUseCase",
    "ListVideosRequest",
    "ListVideosUseCase",
    "TogglePublishRequest",
    "TogglePublishUseCase",
    "UpdateVideoRequest",
    "UpdateVideoUseCase",
]
