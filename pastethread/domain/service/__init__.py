"""Domain services."""

from .base import Service
from .comment_like_service import CommentLikeService
from .comment_service import CommentService
from .comment_tree import CommentTreeNode, build_comment_tree, count_nodes
from .jwt_service import JWTService
from .paste_service import PasteService
from .user_service import UserService

__all__ = [
    "CommentLikeService",
    "CommentService",
    "CommentTreeNode",
    "JWTService",
    "PasteService",
    "Service",
    "UserService",
    "build_comment_tree",
    "count_nodes",
]
