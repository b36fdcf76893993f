"""Comment use cases."""

from .create_comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
)
from .delete_comment import (
    AdminDeleteCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from .get_comment_tree import (
    CommentItem,
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
)
from .moderate_comments import (
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    ModeratedComment,
    UpdateCommentStatusRequest,
    UpdateCommentStatusUseCase,
)

__all__ = [
    "AdminDeleteCommentUseCase",
    "CommentItem",
    "CreateCommentRequest",
    "CreateCommentResponse",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "GetCommentTreeRequest",
    "GetCommentTreeResponse",
    "GetCommentTreeUseCase",
    "ListCommentsRequest",
    "ListCommentsResponse",
    "ListCommentsUseCase",
    "ModeratedComment",
    "UpdateCommentStatusRequest",
    "UpdateCommentStatusUseCase",
]
