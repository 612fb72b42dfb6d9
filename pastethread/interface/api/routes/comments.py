"""Comment routes.

Every endpoint answers with a result envelope. Domain failures are not
raised as HTTP exceptions; the envelope is returned with the status code
matching its error kind.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, Response, status
from pydantic import AliasChoices, BaseModel, Field

from pastethread.application.usecase.comment import (
    CommentActionResult,
    CommentCountResult,
    CommentFailure,
    CommentLikeResult,
    CommentsResult,
    CreateCommentRequest,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentCountRequest,
    GetCommentCountUseCase,
    GetCommentsRequest,
    GetCommentsUseCase,
    ToggleCommentLikeRequest,
    ToggleCommentLikeUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from pastethread.domain.service import JWTService
from pastethread.interface.error import status_for

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    content: str
    parent_id: str | None = Field(
        default=None, validation_alias=AliasChoices("parent_id", "parentId")
    )  # Parent comment ID for replies


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    content: str


@router.get("/pastes/{paste_id}/comments", response_model=CommentsResult)
async def get_comments(
    paste_id: str,
    response: Response,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentsResult:
    """Get the comment forest of a paste.

    Deleted comments stay in the forest as "[deleted]" so their replies
    keep their place. If authenticated, includes the viewer's like state
    for each comment.

    Args:
        paste_id: Paste ID
        response: Outgoing response, for the status code
        get_comments_use_case: Get comments use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie (optional)

    Returns:
        Envelope with root comments and nested replies
    """
    try:
        result = await get_comments_use_case.execute(
            GetCommentsRequest(
                paste_id=paste_id,
                user_id=jwt_service.get_user_id_from_token(auth_token),
            )
        )
    except Exception as e:
        logfire.error("Unexpected error loading comments", paste_id=paste_id, error=str(e))
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return CommentFailure(error="Failed to load comments")

    response.status_code = status_for(result)
    return result


@router.get("/pastes/{paste_id}/comments/count", response_model=CommentCountResult)
async def get_comment_count(
    paste_id: str,
    response: Response,
    get_comment_count_use_case: FromDishka[GetCommentCountUseCase],
) -> CommentCountResult:
    """Count the live comments of a paste.

    Args:
        paste_id: Paste ID
        response: Outgoing response, for the status code
        get_comment_count_use_case: Get comment count use case from DI

    Returns:
        Envelope with the number of non-deleted comments
    """
    try:
        result = await get_comment_count_use_case.execute(
            GetCommentCountRequest(paste_id=paste_id)
        )
    except Exception as e:
        logfire.error("Unexpected error counting comments", paste_id=paste_id, error=str(e))
        response.status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
        return CommentFailure(error="Failed to count comments")

    response.status_code = status_for(result)
    return result


@router.post(
    "/pastes/{paste_id}/comments",
    response_model=CommentActionResult,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    paste_id: str,
    request: CreateCommentAPIRequest,
    response: Response,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentActionResult:
    """Create a comment on a paste or reply to another comment.

    Requires authentication.

    Args:
        paste_id: Paste ID
        request: Comment content and optional parent
        response: Outgoing response, for the status code
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Envelope with the created comment
    """
    result = await create_comment_use_case.execute(
        CreateCommentRequest(
            paste_id=paste_id,
            content=request.content,
            parent_id=request.parent_id,
            user_id=jwt_service.get_user_id_from_token(auth_token),
        )
    )
    response.status_code = status_for(result, status.HTTP_201_CREATED)
    return result


@router.patch(
    "/pastes/{paste_id}/comments/{comment_id}", response_model=CommentActionResult
)
async def update_comment(
    paste_id: str,
    comment_id: str,
    request: UpdateCommentAPIRequest,
    response: Response,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentActionResult:
    """Update a comment's content.

    Only the comment author can edit.

    Args:
        paste_id: Paste ID
        comment_id: Comment ID
        request: New content
        response: Outgoing response, for the status code
        update_comment_use_case: Update comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Envelope with the updated comment
    """
    result = await update_comment_use_case.execute(
        UpdateCommentRequest(
            comment_id=comment_id,
            paste_id=paste_id,
            content=request.content,
            user_id=jwt_service.get_user_id_from_token(auth_token),
        )
    )
    response.status_code = status_for(result)
    return result


@router.delete(
    "/pastes/{paste_id}/comments/{comment_id}", response_model=CommentActionResult
)
async def delete_comment(
    paste_id: str,
    comment_id: str,
    response: Response,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentActionResult:
    """Soft delete a comment.

    Only the comment author can delete. Replies stay in the thread under
    the tombstone.

    Args:
        paste_id: Paste ID
        comment_id: Comment ID
        response: Outgoing response, for the status code
        delete_comment_use_case: Delete comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Envelope with the tombstoned comment
    """
    result = await delete_comment_use_case.execute(
        DeleteCommentRequest(
            comment_id=comment_id,
            paste_id=paste_id,
            user_id=jwt_service.get_user_id_from_token(auth_token),
        )
    )
    response.status_code = status_for(result)
    return result


@router.post("/comments/{comment_id}/like", response_model=CommentLikeResult)
async def toggle_comment_like(
    comment_id: str,
    response: Response,
    toggle_like_use_case: FromDishka[ToggleCommentLikeUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CommentLikeResult:
    """Like a comment, or remove the viewer's like if it exists.

    Requires authentication.

    Args:
        comment_id: Comment ID
        response: Outgoing response, for the status code
        toggle_like_use_case: Toggle like use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Envelope with the resulting like state
    """
    result = await toggle_like_use_case.execute(
        ToggleCommentLikeRequest(
            comment_id=comment_id,
            user_id=jwt_service.get_user_id_from_token(auth_token),
        )
    )
    response.status_code = status_for(result)
    return result
