"""Comment like use cases."""

from .like_comment import LikeCommentRequest, LikeCommentResponse, LikeCommentUseCase
from .unlike_comment import (
    UnlikeCommentRequest,
    UnlikeCommentResponse,
    UnlikeCommentUseCase,
)

__all__ = [
    "LikeCommentRequest",
    "LikeCommentResponse",
    "LikeCommentUseCase",
    "UnlikeCommentRequest",
    "UnlikeCommentResponse",
    "UnlikeCommentUseCase",
]
