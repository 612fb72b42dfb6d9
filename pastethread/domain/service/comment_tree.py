"""Comment tree builder.

Turns the flat comment snapshot of one paste into a forest of reply trees.
The builder is a pure function: it performs no I/O, keeps no state between
calls and never mutates its inputs, so concurrent requests can share it.
"""

from collections.abc import Callable, Collection, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

import logfire

from pastethread.domain.error import MalformedTreeError
from pastethread.domain.model.comment import Comment
from pastethread.domain.value import (
    AuthorSnapshot,
    CommentId,
    OrphanPolicy,
    SiblingOrder,
    UserId,
)

# Cap on how many offending ids end up in an error message
_MAX_REPORTED_IDS = 10


@dataclass
class CommentTreeNode:
    """Node in a paste's comment forest.

    Wraps a comment with the data resolved at read time and its replies.
    ``author`` is None when the authoring account no longer resolves.
    ``is_liked_by_user`` is None when there is no viewer.
    """

    comment: Comment
    author: AuthorSnapshot | None = None
    is_liked_by_user: bool | None = None
    replies: list["CommentTreeNode"] = field(default_factory=list)

    @property
    def id(self) -> CommentId:
        return self.comment.id

    @property
    def parent_id(self) -> CommentId | None:
        return self.comment.parent_id

    def walk(self) -> Iterator["CommentTreeNode"]:
        """Yield this node and its descendants depth-first, parents first."""
        stack = [self]
        while stack:
            node = stack.pop()
            yield node
            stack.extend(reversed(node.replies))


def count_nodes(forest: Sequence[CommentTreeNode]) -> int:
    """Count every node in a forest, roots included."""
    return sum(1 for root in forest for _ in root.walk())


def _sort_key(order: SiblingOrder) -> Callable[[Comment], Any] | None:
    if order == SiblingOrder.CREATED_AT:
        return lambda c: c.created_at
    if order == SiblingOrder.LIKE_COUNT:
        return lambda c: (-c.like_count, c.created_at)
    return None


def _format_ids(ids: Sequence[CommentId]) -> str:
    shown = ", ".join(str(i) for i in ids[:_MAX_REPORTED_IDS])
    if len(ids) > _MAX_REPORTED_IDS:
        shown += f" (+{len(ids) - _MAX_REPORTED_IDS} more)"
    return shown


def build_comment_tree(
    comments: Sequence[Comment],
    *,
    authors: Mapping[UserId, AuthorSnapshot] | None = None,
    liked_ids: Collection[CommentId] | None = None,
    order: SiblingOrder = SiblingOrder.CREATED_AT,
    orphans: OrphanPolicy = OrphanPolicy.PROMOTE,
) -> list[CommentTreeNode]:
    """Assemble a flat comment snapshot into a forest of reply trees.

    Two passes over the input (index by id, then bucket under parents)
    followed by an iterative traversal from the roots. Sorting is stable,
    so ties keep their input order.

    Args:
        comments: Flat snapshot of one paste's comments
        authors: Author snapshots keyed by user ID; missing keys yield
            nodes without an author
        liked_ids: Comment IDs the viewer liked, None for anonymous viewers
        order: Ordering applied to the roots and every reply list
        orphans: Handling of comments whose parent is not in the snapshot

    Returns:
        Root nodes with replies populated recursively

    Raises:
        MalformedTreeError: On mixed pastes, duplicate IDs, parent cycles,
            or a missing parent under OrphanPolicy.FAIL
    """
    if not comments:
        return []

    paste_id = comments[0].paste_id
    by_id: dict[CommentId, Comment] = {}
    for comment in comments:
        if comment.paste_id != paste_id:
            raise MalformedTreeError(
                f"Comment {comment.id} belongs to paste {comment.paste_id}, "
                f"expected {paste_id}"
            )
        if comment.id in by_id:
            raise MalformedTreeError(f"Duplicate comment id: {comment.id}")
        by_id[comment.id] = comment

    roots: list[Comment] = []
    dropped: list[Comment] = []
    children: dict[CommentId, list[Comment]] = {}
    for comment in comments:
        parent_id = comment.parent_id
        if parent_id is None:
            roots.append(comment)
        elif parent_id in by_id:
            children.setdefault(parent_id, []).append(comment)
        elif orphans == OrphanPolicy.PROMOTE:
            roots.append(comment)
        elif orphans == OrphanPolicy.DROP:
            dropped.append(comment)
        else:
            raise MalformedTreeError(
                f"Comment {comment.id} references missing parent {parent_id}"
            )

    key = _sort_key(order)

    def ordered(siblings: list[Comment]) -> list[Comment]:
        return sorted(siblings, key=key) if key else siblings

    def make_node(comment: Comment) -> CommentTreeNode:
        author = None
        if authors is not None and comment.author_id is not None:
            author = authors.get(comment.author_id)
        return CommentTreeNode(
            comment=comment,
            author=author,
            is_liked_by_user=None if liked_ids is None else comment.id in liked_ids,
        )

    forest = [make_node(comment) for comment in ordered(roots)]
    reached: set[CommentId] = set()
    stack = list(forest)
    while stack:
        node = stack.pop()
        reached.add(node.id)
        for child in ordered(children.get(node.id, [])):
            child_node = make_node(child)
            node.replies.append(child_node)
            stack.append(child_node)

    # Subtrees under dropped orphans are omitted on purpose, not cycles
    pending = [comment.id for comment in dropped]
    while pending:
        comment_id = pending.pop()
        reached.add(comment_id)
        pending.extend(child.id for child in children.get(comment_id, []))
    if dropped:
        logfire.warn(
            "Dropped orphaned comments",
            paste_id=str(paste_id),
            orphan_ids=[str(comment.id) for comment in dropped],
        )

    # Anything not reached from a root sits on (or hangs off) a parent cycle
    if len(reached) != len(by_id):
        unreached = [comment.id for comment in comments if comment.id not in reached]
        raise MalformedTreeError(
            f"Comment thread contains a parent cycle involving: {_format_ids(unreached)}"
        )

    return forest
