"""Domain value objects for the blog."""

from leaf.domain.value.identifiers import (
    ArticleId,
    CommentId,
    CommentLikeId,
    UserId,
)
from leaf.domain.value.types import CommentStatus, Handle, UserRole

__all__ = [
    # Identifiers
    "UserId",
    "ArticleId",
    "CommentId",
    "CommentLikeId",
    # Types
    "CommentStatus",
    "Handle",
    "UserRole",
]
