"""Unit tests for CommentLikeService."""

import pytest
from sqlalchemy.exc import IntegrityError

from pastethread.domain.error import ContentDeletedError, NotFoundError
from pastethread.domain.model import CommentLike
from pastethread.domain.repository import CommentLikeRepository, CommentRepository
from pastethread.domain.service import CommentLikeService, CommentService
from pastethread.domain.value import CommentId, UserId
from pastethread.persistence.repository.inmemory import InMemoryCommentLikeRepository
from tests.factories import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

COMMENT_ID = CommentId("c1")
VIEWER = UserId("viewer")


class RejectingLikeRepository(InMemoryCommentLikeRepository):
    """Like repository whose inserts fail like a foreign key violation."""

    async def save(self, like: CommentLike) -> CommentLike:
        raise IntegrityError("comment_likes_user_id_fkey", None, Exception())


class RacingLikeRepository(InMemoryCommentLikeRepository):
    """Like repository where another request inserts the like first."""

    async def delete_by_user_and_comment(
        self, user_id: UserId, comment_id: CommentId
    ) -> bool:
        # The concurrent like lands right after this lookup found nothing
        self._likes.append(CommentLike(comment_id=comment_id, user_id=user_id))
        return False


class TestToggleLike:
    """Tests for toggle_like."""

    @pytest.mark.asyncio
    async def test_first_toggle_likes(self, unit_env):
        # Arrange
        like_service = await unit_env.get(CommentLikeService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment("c1"))

        # Act
        liked = await like_service.toggle_like(COMMENT_ID, VIEWER)

        # Assert
        assert liked is True
        comment = await comment_repo.find_by_id(COMMENT_ID)
        assert comment.like_count == 1

    @pytest.mark.asyncio
    async def test_second_toggle_unlikes(self, unit_env):
        like_service = await unit_env.get(CommentLikeService)
        comment_repo = await unit_env.get(CommentRepository)
        like_repo = await unit_env.get(CommentLikeRepository)
        await comment_repo.save(make_comment("c1"))

        await like_service.toggle_like(COMMENT_ID, VIEWER)
        liked = await like_service.toggle_like(COMMENT_ID, VIEWER)

        assert liked is False
        comment = await comment_repo.find_by_id(COMMENT_ID)
        assert comment.like_count == 0
        assert await like_repo.find_by_user_and_comment(VIEWER, COMMENT_ID) is None

    @pytest.mark.asyncio
    async def test_like_count_tracks_likes_of_many_users(self, unit_env):
        like_service = await unit_env.get(CommentLikeService)
        comment_repo = await unit_env.get(CommentRepository)
        like_repo = await unit_env.get(CommentLikeRepository)
        await comment_repo.save(make_comment("c1"))
        users = [UserId(f"u{i}") for i in range(5)]

        # Everyone likes, then two users take it back, one likes again
        for user in users:
            await like_service.toggle_like(COMMENT_ID, user)
        await like_service.toggle_like(COMMENT_ID, users[0])
        await like_service.toggle_like(COMMENT_ID, users[1])
        await like_service.toggle_like(COMMENT_ID, users[0])

        comment = await comment_repo.find_by_id(COMMENT_ID)
        likers = [
            user
            for user in users
            if await like_repo.find_by_user_and_comment(user, COMMENT_ID)
        ]
        assert comment.like_count == len(likers) == 4

    @pytest.mark.asyncio
    async def test_like_count_never_negative(self, unit_env):
        """A stale zero count stays at zero when a like is removed."""
        like_service = await unit_env.get(CommentLikeService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment("c1"))
        await like_service.toggle_like(COMMENT_ID, VIEWER)
        # Simulate drift between the relation and the counter
        await comment_repo.save(make_comment("c1", like_count=0))

        liked = await like_service.toggle_like(COMMENT_ID, VIEWER)

        assert liked is False
        comment = await comment_repo.find_by_id(COMMENT_ID)
        assert comment.like_count == 0

    @pytest.mark.asyncio
    async def test_missing_comment_raises(self, unit_env):
        like_service = await unit_env.get(CommentLikeService)

        with pytest.raises(NotFoundError):
            await like_service.toggle_like(CommentId("nope"), VIEWER)

    @pytest.mark.asyncio
    async def test_deleted_comment_raises(self, unit_env):
        like_service = await unit_env.get(CommentLikeService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment("c1", is_deleted=True))

        with pytest.raises(ContentDeletedError):
            await like_service.toggle_like(COMMENT_ID, VIEWER)

    @pytest.mark.asyncio
    async def test_rejected_insert_is_not_reported_as_liked(self, unit_env):
        """An insert refused for a reason other than a duplicate propagates."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment("c1"))
        like_repo = RejectingLikeRepository()
        like_service = CommentLikeService(like_repo, comment_service)

        # Act / Assert
        for _ in range(2):
            with pytest.raises(IntegrityError):
                await like_service.toggle_like(COMMENT_ID, UserId("ghost"))

        assert await like_repo.find_by_user_and_comment(UserId("ghost"), COMMENT_ID) is None
        comment = await comment_repo.find_by_id(COMMENT_ID)
        assert comment.like_count == 0

    @pytest.mark.asyncio
    async def test_concurrent_duplicate_reports_liked(self, unit_env):
        """A like stored between the lookup and the insert counts as liked."""
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        await comment_repo.save(make_comment("c1", like_count=1))
        like_repo = RacingLikeRepository()
        like_service = CommentLikeService(like_repo, comment_service)

        liked = await like_service.toggle_like(COMMENT_ID, VIEWER)

        assert liked is True
        assert await like_repo.find_by_user_and_comment(VIEWER, COMMENT_ID) is not None
        comment = await comment_repo.find_by_id(COMMENT_ID)
        assert comment.like_count == 1


class TestGetLikedCommentIds:
    """Tests for get_liked_comment_ids."""

    @pytest.mark.asyncio
    async def test_returns_only_liked_subset(self, unit_env):
        like_service = await unit_env.get(CommentLikeService)
        comment_repo = await unit_env.get(CommentRepository)
        for cid in ("a", "b", "c"):
            await comment_repo.save(make_comment(cid))
        await like_service.toggle_like(CommentId("b"), VIEWER)
        await like_service.toggle_like(CommentId("c"), UserId("someone-else"))

        liked = await like_service.get_liked_comment_ids(
            VIEWER, [CommentId("a"), CommentId("b"), CommentId("c")]
        )

        assert liked == {"b"}

    @pytest.mark.asyncio
    async def test_empty_input(self, unit_env):
        like_service = await unit_env.get(CommentLikeService)

        assert await like_service.get_liked_comment_ids(VIEWER, []) == set()
