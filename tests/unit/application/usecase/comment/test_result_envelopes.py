"""Tests for the comment result envelopes."""

import pydantic
import pytest
from pydantic import TypeAdapter

from pastethread.application.usecase.comment import (
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
from pastethread.domain.error import ErrorKind, MalformedTreeError, NotFoundError
from pastethread.domain.service import build_comment_tree
from pastethread.domain.value import AuthorSnapshot, UserId
from tests.factories import make_comment

DATA_FIELDS = {"comment", "liked", "comments", "count"}


def item() -> CommentItem:
    return CommentItem.from_domain(build_comment_tree([make_comment("1")])[0])


SUCCESSES = [
    CommentActionSuccess(comment=item()),
    CommentLikeSuccess(liked=True),
    CommentsSuccess(comments=[item()]),
    CommentCountSuccess(count=3),
]


class TestEnvelopeDiscriminant:
    """success is true exactly when the data field is present."""

    @pytest.mark.parametrize("envelope", SUCCESSES, ids=lambda e: type(e).__name__)
    def test_success_has_data_and_no_error(self, envelope):
        dumped = envelope.model_dump()

        assert dumped["success"] is True
        assert "error" not in dumped
        assert len(DATA_FIELDS & dumped.keys()) == 1

    def test_failure_has_error_and_no_data(self):
        failure = CommentFailure.from_error(NotFoundError("Comment", "c1"))

        dumped = failure.model_dump()

        assert dumped == {"success": False, "error": "Comment not found: c1"}
        assert failure.kind == ErrorKind.NOT_FOUND

    def test_failure_requires_message(self):
        with pytest.raises(pydantic.ValidationError):
            CommentFailure(error="")

    def test_failure_rejects_data_fields(self):
        with pytest.raises(pydantic.ValidationError):
            CommentFailure(error="boom", count=1)

    def test_success_requires_data(self):
        with pytest.raises(pydantic.ValidationError):
            CommentCountSuccess()

    def test_success_flag_cannot_be_flipped(self):
        with pytest.raises(pydantic.ValidationError):
            CommentLikeSuccess(success=False, liked=True)

    def test_negative_count_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            CommentCountSuccess(count=-1)

    @pytest.mark.parametrize(
        "result_type,payload,expected",
        [
            (CommentLikeResult, {"success": True, "liked": False}, CommentLikeSuccess),
            (CommentCountResult, {"success": True, "count": 0}, CommentCountSuccess),
            (CommentsResult, {"success": True, "comments": []}, CommentsSuccess),
            (CommentActionResult, {"success": False, "error": "x"}, CommentFailure),
        ],
    )
    def test_union_parses_to_the_matching_branch(self, result_type, payload, expected):
        parsed = TypeAdapter(result_type).validate_python(payload)

        assert isinstance(parsed, expected)

    def test_union_rejects_mixed_payload(self):
        with pytest.raises(pydantic.ValidationError):
            TypeAdapter(CommentLikeResult).validate_python(
                {"success": True, "liked": True, "error": "both"}
            )

    def test_message_from_tree_error(self):
        failure = CommentFailure.from_error(MalformedTreeError("cycle"))

        assert failure.error == "cycle"
        assert failure.kind == ErrorKind.MALFORMED_TREE


class TestCommentItem:
    """Conversion of domain nodes to response items."""

    def test_camel_case_on_the_wire(self):
        ada = AuthorSnapshot(id=UserId("user-1"), name="Ada", image=None)
        forest = build_comment_tree(
            [make_comment("1"), make_comment("2", "1")],
            authors={UserId("user-1"): ada},
            liked_ids=set(),
        )

        dumped = CommentItem.from_domain(forest[0]).model_dump(by_alias=True)

        assert dumped["pasteId"] == "paste-1"
        assert dumped["parentId"] is None
        assert dumped["likeCount"] == 0
        assert dumped["isDeleted"] is False
        assert dumped["isLikedByUser"] is False
        assert dumped["author"] == {"id": "user-1", "name": "Ada", "image": None}
        assert dumped["replies"][0]["parentId"] == "1"

    def test_tombstone_content_replaced(self):
        forest = build_comment_tree(
            [make_comment("1", content="secret", is_deleted=True), make_comment("2", "1")]
        )

        converted = CommentItem.from_domain(forest[0])

        assert converted.content == "[deleted]"
        assert converted.replies[0].content == "comment 2"

    def test_deep_chain_converts(self):
        depth = 3000
        comments = [make_comment("d0", minutes=0)]
        comments += [make_comment(f"d{i}", f"d{i - 1}", minutes=i) for i in range(1, depth)]
        root = build_comment_tree(comments)[0]

        converted = CommentItem.from_domain(root)

        node, levels = converted, 1
        while node.replies:
            node, levels = node.replies[0], levels + 1
        assert levels == depth
