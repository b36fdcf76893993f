"""Create comment use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, Field

from leaf.domain.service import CommentService
from leaf.domain.value import ArticleId, CommentId, CommentStatus, UserId
from leaf.domain.value.types import Handle


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    article_id: str | None = None  # UUID string, None for a guestbook message
    author_id: str  # User ID from authenticated user
    author_handle: str  # Display name from the token
    content: str = Field(min_length=1, max_length=1000)
    parent_id: str | None = None  # Parent comment ID for replies
    reply_to_user_id: str | None = None


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    article_id: str | None
    author_id: str
    author_handle: str
    parent_id: str | None
    reply_to_user_id: str | None
    content: str
    like_count: int
    status: CommentStatus
    created_at: datetime


class CreateCommentUseCase:
    """Use case for commenting on an article or posting to the guestbook."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute comment creation flow.

        Args:
            request: Create comment request

        Returns:
            Created comment

        Raises:
            NotFoundError: If the parent comment doesn't exist
            ValueError: If the parent belongs to a different article
        """
        comment = await self.comment_service.create_comment(
            article_id=ArticleId(UUID(request.article_id))
            if request.article_id
            else None,
            author_id=UserId(UUID(request.author_id)),
            author_handle=Handle(request.author_handle),
            content=request.content,
            parent_id=CommentId(UUID(request.parent_id)) if request.parent_id else None,
            reply_to_user_id=UserId(UUID(request.reply_to_user_id))
            if request.reply_to_user_id
            else None,
        )

        return CreateCommentResponse(
            comment_id=str(comment.id),
            article_id=str(comment.article_id) if comment.article_id else None,
            author_id=str(comment.author_id),
            author_handle=comment.author_handle.root,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            reply_to_user_id=(
                str(comment.reply_to_user_id) if comment.reply_to_user_id else None
            ),
            content=comment.content,
            like_count=comment.like_count,
            status=comment.status,
            created_at=comment.created_at,
        )
