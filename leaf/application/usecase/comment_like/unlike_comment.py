"""Unlike comment use case."""

from uuid import UUID

from pydantic import BaseModel

from leaf.domain.service import CommentLikeService
from leaf.domain.value import CommentId, UserId


class UnlikeCommentRequest(BaseModel):
    """Unlike comment request."""

    comment_id: str  # UUID string
    user_id: str  # User ID from authenticated user


class UnlikeCommentResponse(BaseModel):
    """Unlike comment response."""

    removed: bool


class UnlikeCommentUseCase:
    """Use case for removing a like from a comment."""

    def __init__(self, comment_like_service: CommentLikeService) -> None:
        self.comment_like_service = comment_like_service

    async def execute(self, request: UnlikeCommentRequest) -> UnlikeCommentResponse:
        """Execute unlike flow. Unliking a comment that isn't liked is a no-op."""
        removed = await self.comment_like_service.unlike_comment(
            CommentId(UUID(request.comment_id)), UserId(UUID(request.user_id))
        )
        return UnlikeCommentResponse(removed=removed)
