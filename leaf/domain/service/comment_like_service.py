"""Comment like domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from leaf.domain.model.comment_like import CommentLike
from leaf.domain.repository import CommentLikeRepository
from leaf.domain.value import CommentId, CommentLikeId, UserId

from .base import Service
from .comment_service import CommentService


class CommentLikeService(Service):
    """Domain service for liking and unliking comments."""

    def __init__(
        self,
        comment_like_repository: CommentLikeRepository,
        comment_service: CommentService,
    ) -> None:
        """Initialize comment like service.

        Args:
            comment_like_repository: Comment like repository
            comment_service: Comment domain service
        """
        self.comment_like_repository = comment_like_repository
        self.comment_service = comment_service

    async def like_comment(self, comment_id: CommentId, user_id: UserId) -> CommentLike:
        """Like a comment.

        Creates the like record and atomically increments the comment's
        like count, both inside the request transaction.

        Args:
            comment_id: Comment ID
            user_id: User ID

        Returns:
            Created like

        Raises:
            NotFoundError: If the comment doesn't exist
            ValueError: If the user already liked the comment
        """
        with logfire.span(
            "comment_like_service.like_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            await self.comment_service.get_comment(comment_id)

            if await self.has_liked(comment_id, user_id):
                raise ValueError("Already liked this comment")

            like = CommentLike(
                id=CommentLikeId(uuid4()),
                comment_id=comment_id,
                user_id=user_id,
                created_at=datetime.now(),
            )

            # A concurrent like can still slip past the check above
            try:
                saved = await self.comment_like_repository.save(like)
            except IntegrityError:
                logfire.warn(
                    "Duplicate like attempt",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )
                raise ValueError("Already liked this comment")

            await self.comment_service.increment_like_count(comment_id)
            logfire.info(
                "Comment liked", comment_id=str(comment_id), user_id=str(user_id)
            )
            return saved

    async def unlike_comment(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Remove a user's like from a comment.

        Args:
            comment_id: Comment ID
            user_id: User ID

        Returns:
            True if a like was removed, False if none existed
        """
        with logfire.span(
            "comment_like_service.unlike_comment",
            comment_id=str(comment_id),
            user_id=str(user_id),
        ):
            deleted = await self.comment_like_repository.delete_by_comment_and_user(
                comment_id, user_id
            )

            if deleted:
                await self.comment_service.decrement_like_count(comment_id)
                logfire.info(
                    "Comment unliked", comment_id=str(comment_id), user_id=str(user_id)
                )
            else:
                logfire.info(
                    "No like to remove",
                    comment_id=str(comment_id),
                    user_id=str(user_id),
                )

            return deleted

    async def has_liked(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Check whether a user liked a comment."""
        return await self.comment_like_repository.exists(comment_id, user_id)
