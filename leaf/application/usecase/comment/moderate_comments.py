"""Comment moderation use cases."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from leaf.config import CommentSettings
from leaf.domain.model import Comment
from leaf.domain.service import CommentService
from leaf.domain.value import ArticleId, CommentId, CommentStatus


class ModeratedComment(BaseModel):
    """Comment as listed in the admin panel."""

    comment_id: str
    article_id: str | None
    author_id: str
    author_handle: str
    parent_id: str | None
    content: str
    like_count: int
    status: CommentStatus
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "ModeratedComment":
        """Convert a domain Comment."""
        return cls(
            comment_id=str(comment.id),
            article_id=str(comment.article_id) if comment.article_id else None,
            author_id=str(comment.author_id),
            author_handle=comment.author_handle.root,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            content=comment.content,
            like_count=comment.like_count,
            status=comment.status,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class ListCommentsRequest(BaseModel):
    """List comments request."""

    page: int = 1
    limit: int = 10
    article_id: str | None = None
    status: CommentStatus | None = None


class ListCommentsResponse(BaseModel):
    """List comments response."""

    comments: list[ModeratedComment]
    total: int
    page: int
    limit: int


class ListCommentsUseCase:
    """Use case for listing comments in the admin panel."""

    def __init__(
        self, comment_service: CommentService, comment_settings: CommentSettings
    ) -> None:
        """Initialize list comments use case.

        Args:
            comment_service: Comment domain service
            comment_settings: Page size limits
        """
        self.comment_service = comment_service
        self.comment_settings = comment_settings

    async def execute(self, request: ListCommentsRequest) -> ListCommentsResponse:
        """Execute list flow, newest comments first."""
        limit = min(request.limit, self.comment_settings.max_page_size)

        comments, total = await self.comment_service.list_comments(
            page=request.page,
            limit=limit,
            article_id=ArticleId(UUID(request.article_id))
            if request.article_id
            else None,
            status=request.status,
        )

        return ListCommentsResponse(
            comments=[ModeratedComment.from_domain(c) for c in comments],
            total=total,
            page=request.page,
            limit=limit,
        )


class UpdateCommentStatusRequest(BaseModel):
    """Update comment status request."""

    comment_id: str
    status: CommentStatus


class UpdateCommentStatusUseCase:
    """Use case for approving or rejecting a comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentStatusRequest) -> ModeratedComment:
        """Execute moderation flow.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        comment = await self.comment_service.update_status(
            CommentId(UUID(request.comment_id)), request.status
        )
        return ModeratedComment.from_domain(comment)
