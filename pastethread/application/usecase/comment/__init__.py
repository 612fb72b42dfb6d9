"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .get_comment_count import GetCommentCountRequest, GetCommentCountUseCase
from .get_comments import GetCommentsRequest, GetCommentsUseCase
from .result import (
    CommentActionResult,
    CommentActionSuccess,
    CommentCountResult,
    CommentCountSuccess,
    CommentFailure,
    CommentItem,
    CommentLikeResult,
    CommentLikeSuccess,
    CommentsResult,
    CommentsSuccess,
)
from .toggle_like import ToggleCommentLikeRequest, ToggleCommentLikeUseCase
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentActionResult",
    "CommentActionSuccess",
    "CommentCountResult",
    "CommentCountSuccess",
    "CommentFailure",
    "CommentItem",
    "CommentLikeResult",
    "CommentLikeSuccess",
    "CommentsResult",
    "CommentsSuccess",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "GetCommentCountRequest",
    "GetCommentCountUseCase",
    "GetCommentsRequest",
    "GetCommentsUseCase",
    "ToggleCommentLikeRequest",
    "ToggleCommentLikeUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
