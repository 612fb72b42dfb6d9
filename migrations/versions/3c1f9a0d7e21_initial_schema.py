"""initial_schema

Create the schema for paste comment threads:
- Users (mirrored from the auth provider)
- Pastes (the artifacts comments attach to)
- Comments (threaded via parent_id, soft deleted as tombstones)
- Comment likes (one per user and comment)

Revision ID: 3c1f9a0d7e21
Revises:
Create Date: 2026-10-19 10:12:44.518230

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = "3c1f9a0d7e21"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
    ]


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=True),
        sa.Column("image", sa.Text(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # PASTES table
    # ========================================================================
    op.create_table(
        "pastes",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("slug", sa.String(255), nullable=False),
        sa.Column("title", sa.Text(), nullable=True),
        sa.Column("author_id", sa.Text(), nullable=True),  # None for anonymous
        sa.Column(
            "visibility", sa.String(20), nullable=False, server_default="public"
        ),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("slug"),
        sa.CheckConstraint(
            "visibility IN ('public', 'unlisted', 'private')",
            name="paste_visibility_valid",
        ),
    )
    op.create_index("idx_pastes_author_id", "pastes", ["author_id"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.Text(), nullable=False),
        sa.Column("paste_id", sa.Text(), nullable=False),
        sa.Column("parent_id", sa.Text(), nullable=True),
        sa.Column("author_id", sa.Text(), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("like_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("is_deleted", sa.Boolean(), nullable=False, server_default="false"),
        *_timestamps(),
        sa.ForeignKeyConstraint(["paste_id"], ["pastes.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"]),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="SET NULL"),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("like_count >= 0", name="like_count_non_negative"),
    )
    op.create_index(
        "idx_comments_paste_created", "comments", ["paste_id", "created_at"]
    )
    op.create_index("idx_comments_parent_id", "comments", ["parent_id"])
    op.create_index("idx_comments_author_id", "comments", ["author_id"])

    # ========================================================================
    # COMMENT_LIKES table
    # ========================================================================
    op.create_table(
        "comment_likes",
        sa.Column("comment_id", sa.Text(), nullable=False),
        sa.Column("user_id", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(["comment_id"], ["comments.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.UniqueConstraint("comment_id", "user_id", name="uq_comment_like"),
    )
    op.create_index("idx_comment_likes_user_id", "comment_likes", ["user_id"])

    # ========================================================================
    # TRIGGERS
    # ========================================================================

    # Removing an account cascades its likes away; release them from
    # like_count first so the counter keeps matching comment_likes
    op.execute("""
        CREATE OR REPLACE FUNCTION release_user_comment_likes()
        RETURNS TRIGGER AS $$
        BEGIN
            UPDATE comments
            SET like_count = GREATEST(like_count - 1, 0)
            WHERE id IN (
                SELECT comment_id FROM comment_likes WHERE user_id = OLD.id
            );
            RETURN OLD;
        END;
        $$ LANGUAGE plpgsql
    """)

    op.execute("""
        CREATE TRIGGER release_likes_before_user_delete
        BEFORE DELETE ON users
        FOR EACH ROW EXECUTE FUNCTION release_user_comment_likes()
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute("DROP TRIGGER IF EXISTS release_likes_before_user_delete ON users")
    op.execute("DROP FUNCTION IF EXISTS release_user_comment_likes()")

    # Drop tables (in reverse order of dependencies)
    op.drop_table("comment_likes")
    op.drop_table("comments")
    op.drop_table("pastes")
    op.drop_table("users")
