"""Unit tests for CreateCommentUseCase."""

import pytest

from pastethread.application.usecase.comment import (
    CommentActionSuccess,
    CommentFailure,
    CreateCommentRequest,
    CreateCommentUseCase,
)
from pastethread.domain.error import ErrorKind
from pastethread.domain.repository import (
    CommentRepository,
    PasteRepository,
    UserRepository,
)
from tests.factories import make_comment, make_paste, make_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


async def seed(env, *, paste_deleted: bool = False) -> None:
    paste_repo = await env.get(PasteRepository)
    user_repo = await env.get(UserRepository)
    await paste_repo.save(make_paste("paste-1", is_deleted=paste_deleted))
    await user_repo.save(make_user("user-1", name="Ada"))


class TestCreateCommentUseCase:
    """Tests for CreateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_create_root_comment(self, unit_env):
        """A fresh comment comes back with its author and no replies."""
        # Arrange
        await seed(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)

        # Act
        result = await use_case.execute(
            CreateCommentRequest(
                paste_id="paste-1", content="Nice paste", user_id="user-1"
            )
        )

        # Assert
        assert isinstance(result, CommentActionSuccess)
        assert result.success is True
        assert result.comment.content == "Nice paste"
        assert result.comment.parent_id is None
        assert result.comment.author.name == "Ada"
        assert result.comment.is_liked_by_user is False
        assert result.comment.replies == []

        comment_repo = await unit_env.get(CommentRepository)
        assert await comment_repo.count_by_paste("paste-1") == 1

    @pytest.mark.asyncio
    async def test_create_reply(self, unit_env):
        await seed(unit_env)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment("parent", author_id="someone"))
        use_case = await unit_env.get(CreateCommentUseCase)

        result = await use_case.execute(
            CreateCommentRequest(
                paste_id="paste-1",
                content="Agreed",
                user_id="user-1",
                parent_id="parent",
            )
        )

        assert isinstance(result, CommentActionSuccess)
        assert result.comment.parent_id == "parent"

    @pytest.mark.asyncio
    async def test_anonymous_viewer_rejected(self, unit_env):
        await seed(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)

        result = await use_case.execute(
            CreateCommentRequest(paste_id="paste-1", content="Hi")
        )

        assert isinstance(result, CommentFailure)
        assert result.kind == ErrorKind.UNAUTHORIZED
        assert result.error == "Authentication required to create comments"

    @pytest.mark.asyncio
    async def test_empty_content_rejected(self, unit_env):
        await seed(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)

        result = await use_case.execute(
            CreateCommentRequest(paste_id="paste-1", content="  ", user_id="user-1")
        )

        assert isinstance(result, CommentFailure)
        assert result.kind == ErrorKind.VALIDATION
        assert result.error == "Comment cannot be empty"

    @pytest.mark.asyncio
    async def test_too_long_content_rejected(self, unit_env):
        await seed(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)

        result = await use_case.execute(
            CreateCommentRequest(
                paste_id="paste-1", content="x" * 1001, user_id="user-1"
            )
        )

        assert isinstance(result, CommentFailure)
        assert "too long" in result.error

    @pytest.mark.asyncio
    async def test_missing_paste(self, unit_env):
        await seed(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)

        result = await use_case.execute(
            CreateCommentRequest(paste_id="nope", content="Hi", user_id="user-1")
        )

        assert isinstance(result, CommentFailure)
        assert result.kind == ErrorKind.NOT_FOUND

    @pytest.mark.asyncio
    async def test_deleted_paste(self, unit_env):
        await seed(unit_env, paste_deleted=True)
        use_case = await unit_env.get(CreateCommentUseCase)

        result = await use_case.execute(
            CreateCommentRequest(paste_id="paste-1", content="Hi", user_id="user-1")
        )

        assert isinstance(result, CommentFailure)
        assert result.error == "Paste paste-1 has been deleted"

    @pytest.mark.asyncio
    async def test_unknown_user(self, unit_env):
        await seed(unit_env)
        use_case = await unit_env.get(CreateCommentUseCase)

        result = await use_case.execute(
            CreateCommentRequest(paste_id="paste-1", content="Hi", user_id="ghost")
        )

        assert isinstance(result, CommentFailure)
        assert result.error == "User not found: ghost"

    @pytest.mark.asyncio
    async def test_reply_to_deleted_comment_rejected(self, unit_env):
        await seed(unit_env)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment("gone", is_deleted=True))
        use_case = await unit_env.get(CreateCommentUseCase)

        result = await use_case.execute(
            CreateCommentRequest(
                paste_id="paste-1", content="Hi", user_id="user-1", parent_id="gone"
            )
        )

        assert isinstance(result, CommentFailure)
        assert result.kind == ErrorKind.VALIDATION
        assert await comment_repo.count_by_paste("paste-1") == 0
