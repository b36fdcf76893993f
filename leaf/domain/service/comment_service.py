"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from leaf.domain.error import NotAuthorizedError, NotFoundError
from leaf.domain.model.comment import Comment
from leaf.domain.repository import CommentRepository
from leaf.domain.value import ArticleId, CommentId, CommentStatus, UserId
from leaf.domain.value.types import Handle

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(
        self, comment_repository: CommentRepository, auto_approve: bool = True
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            auto_approve: Whether new comments start out approved
        """
        self.comment_repository = comment_repository
        self.auto_approve = auto_approve

    async def create_comment(
        self,
        article_id: ArticleId | None,
        author_id: UserId,
        author_handle: Handle,
        content: str,
        parent_id: CommentId | None = None,
        reply_to_user_id: UserId | None = None,
    ) -> Comment:
        """Create a comment on an article or the guestbook.

        Args:
            article_id: Article ID (None for a guestbook message)
            author_id: Author user ID
            author_handle: Author display name
            content: Comment text
            parent_id: Parent comment ID for replies (None for top-level)
            reply_to_user_id: User being replied to, if any

        Returns:
            Created comment

        Raises:
            NotFoundError: If the parent comment doesn't exist
            ValueError: If the parent belongs to another article
        """
        with logfire.span(
            "comment_service.create_comment",
            article_id=str(article_id) if article_id else None,
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent:
                    logfire.warn("Parent comment not found", parent_id=str(parent_id))
                    raise NotFoundError("Comment", str(parent_id))
                if parent.article_id != article_id:
                    logfire.warn(
                        "Parent comment belongs to another subject",
                        parent_id=str(parent_id),
                        parent_article_id=str(parent.article_id),
                        target_article_id=str(article_id),
                    )
                    raise ValueError("Parent comment does not belong to this article")

            now = datetime.now()
            comment = Comment(
                id=CommentId(uuid4()),
                article_id=article_id,
                author_id=author_id,
                author_handle=author_handle,
                parent_id=parent_id,
                reply_to_user_id=reply_to_user_id,
                content=content,
                like_count=0,
                status=(
                    CommentStatus.APPROVED
                    if self.auto_approve
                    else CommentStatus.PENDING
                ),
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                article_id=str(article_id) if article_id else None,
                status=saved.status.value,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def get_comment(self, comment_id: CommentId) -> Comment:
        """Get a comment by ID.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        comment = await self.get_comment_by_id(comment_id)
        if not comment:
            raise NotFoundError("Comment", str(comment_id))
        return comment

    async def delete_comment_as_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> None:
        """Delete a comment on behalf of a blog user.

        The comment's author may delete it, and so may the author of the
        comment it replies to.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user may not delete it
        """
        with logfire.span(
            "comment_service.delete_comment_as_user",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment:
                raise NotFoundError("Comment", str(comment_id))

            can_delete = comment.author_id == user_id
            if not can_delete and comment.parent_id:
                parent = await self.comment_repository.find_by_id(comment.parent_id)
                can_delete = parent is not None and parent.author_id == user_id

            if not can_delete:
                logfire.warn(
                    "Unauthorized comment deletion attempt",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise NotAuthorizedError(
                    "delete", "comment", str(comment_id), str(user_id)
                )

            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=str(comment_id))

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment without ownership checks (moderation).

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            if not await self.comment_repository.find_by_id(comment_id):
                raise NotFoundError("Comment", str(comment_id))
            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted by moderator", comment_id=str(comment_id))

    async def list_comments(
        self,
        page: int,
        limit: int,
        article_id: ArticleId | None = None,
        status: CommentStatus | None = None,
    ) -> tuple[list[Comment], int]:
        """List comments for moderation, newest first.

        Returns:
            Tuple of (comments on the page, total matches)
        """
        with logfire.span(
            "comment_service.list_comments",
            page=page,
            limit=limit,
            article_id=str(article_id) if article_id else None,
            status=status.value if status else None,
        ):
            comments, total = await self.comment_repository.list_comments(
                page=page, limit=limit, article_id=article_id, status=status
            )
            logfire.info("Comments listed", count=len(comments), total=total)
            return comments, total

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Comment:
        """Change the moderation state of a comment.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        with logfire.span(
            "comment_service.update_status",
            comment_id=str(comment_id),
            status=status.value,
        ):
            updated = await self.comment_repository.update_status(comment_id, status)
            if not updated:
                logfire.warn(
                    "Comment not found for status update", comment_id=str(comment_id)
                )
                raise NotFoundError("Comment", str(comment_id))
            logfire.info(
                "Comment status updated",
                comment_id=str(comment_id),
                status=status.value,
            )
            return updated

    async def increment_like_count(self, comment_id: CommentId) -> None:
        """Atomically increment comment like count."""
        with logfire.span(
            "comment_service.increment_like_count", comment_id=str(comment_id)
        ):
            await self.comment_repository.increment_like_count(comment_id)

    async def decrement_like_count(self, comment_id: CommentId) -> None:
        """Atomically decrement comment like count (minimum 0)."""
        with logfire.span(
            "comment_service.decrement_like_count", comment_id=str(comment_id)
        ):
            await self.comment_repository.decrement_like_count(comment_id)
