"""Domain model entities for the blog."""

from leaf.domain.model.comment import Comment
from leaf.domain.model.comment_like import CommentLike

__all__ = [
    "Comment",
    "CommentLike",
]
