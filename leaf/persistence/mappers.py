"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict, Optional
from uuid import UUID

from leaf.domain.model import Comment, CommentLike
from leaf.domain.value import (
    ArticleId,
    CommentId,
    CommentStatus,
    UserId,
)
from leaf.domain.value.types import Handle


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> Optional[UUID]:
    return _uuid(value) if value else None


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    article_id = _optional_uuid(row.get("article_id"))
    parent_id = _optional_uuid(row.get("parent_id"))
    reply_to_user_id = _optional_uuid(row.get("reply_to_user_id"))

    return Comment(
        id=CommentId(_uuid(row["id"])),
        article_id=ArticleId(article_id) if article_id else None,
        author_id=UserId(_uuid(row["author_id"])),
        author_handle=Handle(row["author_handle"]),
        parent_id=CommentId(parent_id) if parent_id else None,
        reply_to_user_id=UserId(reply_to_user_id) if reply_to_user_id else None,
        content=row["content"],
        like_count=row["like_count"],
        status=CommentStatus(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    data = comment.model_dump()
    data["status"] = comment.status.value
    return data


def comment_like_to_dict(like: CommentLike) -> Dict[str, Any]:
    """Convert CommentLike domain model to database dict."""
    return like.model_dump()
