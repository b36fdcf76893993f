"""Like comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from leaf.domain.service import CommentLikeService
from leaf.domain.value import CommentId, UserId


class LikeCommentRequest(BaseModel):
    """Like comment request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class LikeCommentResponse(BaseModel):
    """Like comment response."""

    like_id: str
    comment_id: str
    created_at: datetime


class LikeCommentUseCase:
    """Use case for liking a comment."""

    def __init__(self, comment_like_service: CommentLikeService) -> None:
        """Initialize like comment use case.

        Args:
            comment_like_service: Comment like domain service
        """
        self.comment_like_service = comment_like_service

    async def execute(self, request: LikeCommentRequest) -> LikeCommentResponse:
        """Execute like flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            ValueError: If already liked
        """
        like = await self.comment_like_service.like_comment(
            CommentId(UUID(request.comment_id)), UserId(UUID(request.user_id))
        )

        return LikeCommentResponse(
            like_id=str(like.id),
            comment_id=str(like.comment_id),
            created_at=like.created_at,
        )
