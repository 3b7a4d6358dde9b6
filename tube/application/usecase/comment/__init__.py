"""Comment use cases."""

from .add_comment import AddCommentRequest, AddCommentUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .list_comments import ListCommentsRequest, ListCommentsUseCase
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "AddCommentRequest",
    "AddCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "ListCommentsRequest",
    "ListCommentsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
