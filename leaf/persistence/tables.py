"""SQLAlchemy table definitions for the blog.

Tables are declared with SQLAlchemy Core and mapped to the frozen pydantic
domain models by hand (see mappers.py).
"""

from sqlalchemy import (
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
    text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# COMMENTS TABLE (article comments and guestbook messages)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column(
        "id", UUID, primary_key=True, server_default=text("gen_random_uuid()")
    ),
    Column("article_id", UUID, nullable=True),  # NULL means guestbook
    Column(
        "parent_id", UUID, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("author_id", UUID, nullable=False),
    Column("author_handle", String(100), nullable=False),  # Denormalized from the token
    Column("reply_to_user_id", UUID, nullable=True),
    Column("content", Text, nullable=False),
    Column("like_count", Integer, nullable=False, server_default="0"),
    Column("status", String(20), nullable=False, server_default="pending"),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    Column(
        "updated_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    CheckConstraint("like_count >= 0", name="like_count_non_negative"),
    CheckConstraint(
        "status IN ('pending', 'approved', 'rejected')", name="comment_status_valid"
    ),
)

Index("idx_comments_article_id", comments_table.c.article_id)
Index("idx_comments_parent_id", comments_table.c.parent_id)
Index("idx_comments_author_id", comments_table.c.author_id)
Index("idx_comments_created_at", comments_table.c.created_at)
Index("idx_comments_status", comments_table.c.status)

# ============================================================================
# COMMENT LIKES TABLE
# ============================================================================
comment_likes_table = Table(
    "comment_likes",
    metadata,
    Column(
        "id", UUID, primary_key=True, server_default=text("gen_random_uuid()")
    ),
    Column(
        "comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, nullable=False),
    Column(
        "created_at",
        TIMESTAMP(timezone=True),
        nullable=False,
        server_default=text("NOW()"),
    ),
    UniqueConstraint("comment_id", "user_id", name="unique_comment_like"),
)

Index("idx_comment_likes_user_id", comment_likes_table.c.user_id)
