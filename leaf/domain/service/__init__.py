"""Domain services."""

from .base import Service
from .comment_like_service import CommentLikeService
from .comment_service import CommentService
from .comment_tree import CommentTree, CommentTreeBuilder, CommentView
from .jwt_service import JWTError, JWTService, TokenPayload

__all__ = [
    "CommentLikeService",
    "CommentService",
    "CommentTree",
    "CommentTreeBuilder",
    "CommentView",
    "JWTError",
    "JWTService",
    "Service",
    "TokenPayload",
]
