"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from pastethread.domain.model import Comment, CommentLike, Paste, User
from pastethread.domain.value import (
    CommentId,
    PasteId,
    PasteVisibility,
    UserId,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model."""
    return User(
        id=UserId(row["id"]),
        name=row["name"],
        email=row.get("email"),
        image=row.get("image"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict."""
    return user.model_dump()


def row_to_paste(row: Dict[str, Any]) -> Paste:
    """Convert database row to Paste domain model."""
    return Paste(
        id=PasteId(row["id"]),
        slug=row["slug"],
        title=row.get("title"),
        author_id=UserId(row["author_id"]) if row.get("author_id") else None,
        visibility=PasteVisibility(row["visibility"]),
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def paste_to_dict(paste: Paste) -> Dict[str, Any]:
    """Convert Paste domain model to database dict."""
    data = paste.model_dump()
    data["visibility"] = paste.visibility.value
    return data


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(row["id"]),
        paste_id=PasteId(row["paste_id"]),
        parent_id=CommentId(row["parent_id"]) if row.get("parent_id") else None,
        author_id=UserId(row["author_id"]) if row.get("author_id") else None,
        content=row["content"],
        like_count=row["like_count"],
        is_deleted=row["is_deleted"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict."""
    return comment.model_dump()


def row_to_comment_like(row: Dict[str, Any]) -> CommentLike:
    """Convert database row to CommentLike domain model."""
    return CommentLike(
        comment_id=CommentId(row["comment_id"]),
        user_id=UserId(row["user_id"]),
        created_at=row["created_at"],
    )


def comment_like_to_dict(like: CommentLike) -> Dict[str, Any]:
    """Convert CommentLike domain model to database dict."""
    return like.model_dump()
