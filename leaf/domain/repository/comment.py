"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from leaf.domain.model.comment import Comment
from leaf.domain.value import ArticleId, CommentId, CommentStatus


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_approved_by_subject(
        self, article_id: Optional[ArticleId]
    ) -> List[Comment]:
        """Find every approved comment attached to a subject.

        ``article_id=None`` selects guestbook comments; any other value must
        match exactly. No pagination is applied here.

        Args:
            article_id: Article ID, or None for the guestbook

        Returns:
            Approved comments ordered by created_at descending
        """
        pass

    @abstractmethod
    async def list_comments(
        self,
        page: int,
        limit: int,
        article_id: Optional[ArticleId] = None,
        status: Optional[CommentStatus] = None,
    ) -> Tuple[List[Comment], int]:
        """List comments for moderation.

        Args:
            page: 1-based page number
            limit: Page size
            article_id: Restrict to one article (None means no filter)
            status: Restrict to one moderation state (None means no filter)

        Returns:
            Tuple of (comments ordered by created_at descending, total matches)
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment together with its replies and likes.

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Set the moderation state of a comment.

        Returns:
            Updated comment, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def increment_like_count(self, comment_id: CommentId) -> None:
        """Atomically increment like_count by 1."""
        pass

    @abstractmethod
    async def decrement_like_count(self, comment_id: CommentId) -> None:
        """Atomically decrement like_count by 1 (never below 0)."""
        pass
