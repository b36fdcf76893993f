"""Repository interfaces for the blog domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from leaf.domain.repository.comment import CommentRepository
from leaf.domain.repository.comment_like import CommentLikeRepository

__all__ = [
    "CommentRepository",
    "CommentLikeRepository",
]
