"""PostgreSQL repository implementations."""

from leaf.persistence.repository.comment import PostgresCommentRepository
from leaf.persistence.repository.comment_like import PostgresCommentLikeRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresCommentLikeRepository",
]
