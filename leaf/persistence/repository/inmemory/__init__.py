"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .comment_like import InMemoryCommentLikeRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryCommentLikeRepository",
]
