"""Unit tests for UpdateCommentUseCase and DeleteCommentUseCase."""

import pytest

from pastethread.application.usecase.comment import (
    CommentActionSuccess,
    CommentFailure,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    UpdateCommentRequest,
    UpdateCommentUseCase,
)
from pastethread.domain.error import ErrorKind
from pastethread.domain.repository import (
    CommentLikeRepository,
    CommentRepository,
    UserRepository,
)
from pastethread.domain.model import CommentLike
from pastethread.domain.value import CommentId, UserId
from tests.factories import make_comment, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed(env, **comment_fields) -> None:
    user_repo = await env.get(UserRepository)
    comment_repo = await env.get(CommentRepository)
    await user_repo.save(make_user("author", name="Ada"))
    await comment_repo.save(
        make_comment("c1", author_id="author", content="original", **comment_fields)
    )


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_can_edit(self, unit_env):
        """Updating content by the author succeeds."""
        # Arrange
        await seed(unit_env, like_count=1)
        like_repo = await unit_env.get(CommentLikeRepository)
        await like_repo.save(
            CommentLike(comment_id=CommentId("c1"), user_id=UserId("author"))
        )
        use_case = await unit_env.get(UpdateCommentUseCase)

        # Act
        result = await use_case.execute(
            UpdateCommentRequest(
                comment_id="c1", paste_id="paste-1", content="edited", user_id="author"
            )
        )

        # Assert
        assert isinstance(result, CommentActionSuccess)
        assert result.comment.content == "edited"
        assert result.comment.author.name == "Ada"
        assert result.comment.is_liked_by_user is True
        assert result.comment.like_count == 1

    @pytest.mark.asyncio
    async def test_other_user_forbidden(self, unit_env):
        await seed(unit_env)
        use_case = await unit_env.get(UpdateCommentUseCase)

        result = await use_case.execute(
            UpdateCommentRequest(
                comment_id="c1", paste_id="paste-1", content="hijack", user_id="mallory"
            )
        )

        assert isinstance(result, CommentFailure)
        assert result.kind == ErrorKind.FORBIDDEN
        comment_repo = await unit_env.get(CommentRepository)
        assert (await comment_repo.find_by_id(CommentId("c1"))).content == "original"

    @pytest.mark.asyncio
    async def test_anonymous_rejected(self, unit_env):
        await seed(unit_env)
        use_case = await unit_env.get(UpdateCommentUseCase)

        result = await use_case.execute(
            UpdateCommentRequest(comment_id="c1", paste_id="paste-1", content="x")
        )

        assert isinstance(result, CommentFailure)
        assert result.kind == ErrorKind.UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_wrong_paste_rejected(self, unit_env):
        await seed(unit_env)
        use_case = await unit_env.get(UpdateCommentUseCase)

        result = await use_case.execute(
            UpdateCommentRequest(
                comment_id="c1", paste_id="paste-2", content="x", user_id="author"
            )
        )

        assert isinstance(result, CommentFailure)
        assert result.kind == ErrorKind.VALIDATION

    @pytest.mark.asyncio
    async def test_deleted_comment_not_editable(self, unit_env):
        await seed(unit_env, is_deleted=True)
        use_case = await unit_env.get(UpdateCommentUseCase)

        result = await use_case.execute(
            UpdateCommentRequest(
                comment_id="c1", paste_id="paste-1", content="x", user_id="author"
            )
        )

        assert isinstance(result, CommentFailure)
        assert result.kind == ErrorKind.NOT_FOUND
        assert result.error == "Comment c1 has been deleted"

    @pytest.mark.asyncio
    async def test_missing_comment(self, unit_env):
        await seed(unit_env)
        use_case = await unit_env.get(UpdateCommentUseCase)

        result = await use_case.execute(
            UpdateCommentRequest(
                comment_id="nope", paste_id="paste-1", content="x", user_id="author"
            )
        )

        assert isinstance(result, CommentFailure)
        assert result.error == "Comment not found: nope"

    @pytest.mark.asyncio
    async def test_blank_content_rejected(self, unit_env):
        await seed(unit_env)
        use_case = await unit_env.get(UpdateCommentUseCase)

        result = await use_case.execute(
            UpdateCommentRequest(
                comment_id="c1", paste_id="paste-1", content="", user_id="author"
            )
        )

        assert isinstance(result, CommentFailure)
        assert result.error == "Comment cannot be empty"


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_author_can_delete(self, unit_env):
        await seed(unit_env)
        use_case = await unit_env.get(DeleteCommentUseCase)

        result = await use_case.execute(
            DeleteCommentRequest(comment_id="c1", paste_id="paste-1", user_id="author")
        )

        assert isinstance(result, CommentActionSuccess)
        assert result.comment.is_deleted is True
        assert result.comment.content == "[deleted]"

        comment_repo = await unit_env.get(CommentRepository)
        stored = await comment_repo.find_by_id(CommentId("c1"))
        assert stored.is_deleted is True
        assert stored.content == "original"

    @pytest.mark.asyncio
    async def test_delete_twice_fails(self, unit_env):
        await seed(unit_env)
        use_case = await unit_env.get(DeleteCommentUseCase)
        request = DeleteCommentRequest(
            comment_id="c1", paste_id="paste-1", user_id="author"
        )

        await use_case.execute(request)
        result = await use_case.execute(request)

        assert isinstance(result, CommentFailure)
        assert result.kind == ErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        await seed(unit_env)
        use_case = await unit_env.get(DeleteCommentUseCase)

        result = await use_case.execute(
            DeleteCommentRequest(comment_id="c1", paste_id="paste-1", user_id="mallory")
        )

        assert isinstance(result, CommentFailure)
        assert result.kind == ErrorKind.FORBIDDEN

    @pytest.mark.asyncio
    async def test_anonymous_cannot_delete(self, unit_env):
        await seed(unit_env)
        use_case = await unit_env.get(DeleteCommentUseCase)

        result = await use_case.execute(
            DeleteCommentRequest(comment_id="c1", paste_id="paste-1")
        )

        assert isinstance(result, CommentFailure)
        assert result.error == "Authentication required to delete comments"
