"""Comment like repository interface."""

from abc import ABC, abstractmethod

from leaf.domain.model.comment_like import CommentLike
from leaf.domain.value import CommentId, UserId


class CommentLikeRepository(ABC):
    """Repository for CommentLike entity."""

    @abstractmethod
    async def exists(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Check whether a user has liked a comment.

        Returns False, never raises, when no like exists.
        """
        pass

    @abstractmethod
    async def save(self, like: CommentLike) -> CommentLike:
        """Save a like.

        Raises:
            IntegrityError: If the user already liked the comment
        """
        pass

    @abstractmethod
    async def delete_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> bool:
        """Delete a user's like on a comment.

        Returns:
            True if a like was deleted, False if none existed
        """
        pass
