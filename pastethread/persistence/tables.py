"""SQLAlchemy table definitions for pastethread.

Identifiers are opaque text keys issued by the paste application. The
tables match the schema defined in the Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (mirrors the auth provider's accounts)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Text, primary_key=True),
    Column("name", String(255), nullable=False),
    Column("email", String(255), nullable=True),
    Column("image", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# PASTES TABLE
# ============================================================================
pastes_table = Table(
    "pastes",
    metadata,
    Column("id", Text, primary_key=True),
    Column("slug", String(255), nullable=False, unique=True),
    Column("title", Text, nullable=True),
    Column(
        "author_id", Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=True
    ),  # None for anonymous pastes
    Column("visibility", String(20), nullable=False, server_default="public"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint(
        "visibility IN ('public', 'unlisted', 'private')", name="paste_visibility_valid"
    ),
)

Index("idx_pastes_author_id", pastes_table.c.author_id)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Text, primary_key=True),
    Column(
        "paste_id", Text, ForeignKey("pastes.id", ondelete="CASCADE"), nullable=False
    ),
    # Soft deletes keep parents in place, so no cascade on parent_id
    Column("parent_id", Text, ForeignKey("comments.id"), nullable=True),
    Column(
        "author_id", Text, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column("content", Text, nullable=False),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column("is_deleted", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("like_count >= 0", name="like_count_non_negative"),
)

Index("idx_comments_paste_created", comments_table.c.paste_id, comments_table.c.created_at)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_id", comments_table.c.author_id)

# ============================================================================
# COMMENT LIKES TABLE
# ============================================================================
comment_likes_table = Table(
    "comment_likes",
    metadata,
    Column(
        "comment_id",
        Text,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    # Account removal cascades here; a trigger on users releases like_count first
    Column("user_id", Text, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("comment_id", "user_id", name="uq_comment_like"),
)

Index("idx_comment_likes_user_id", comment_likes_table.c.user_id)
