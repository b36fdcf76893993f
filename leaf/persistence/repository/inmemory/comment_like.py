"""In-memory comment like repository for testing."""

from sqlalchemy.exc import IntegrityError

from leaf.domain.model.comment_like import CommentLike
from leaf.domain.repository.comment_like import CommentLikeRepository
from leaf.domain.value import CommentId, UserId


class InMemoryCommentLikeRepository(CommentLikeRepository):
    """In-memory implementation of CommentLikeRepository for testing."""

    def __init__(self) -> None:
        self._likes: list[CommentLike] = []

    async def exists(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Check whether a user has liked a comment."""
        return any(
            like.comment_id == comment_id and like.user_id == user_id
            for like in self._likes
        )

    async def save(self, like: CommentLike) -> CommentLike:
        """Save a like.

        Raises:
            IntegrityError: If the user already liked the comment
        """
        if await self.exists(like.comment_id, like.user_id):
            raise IntegrityError("Duplicate comment like", None, Exception())

        self._likes.append(like)
        return like

    async def delete_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> bool:
        """Delete a user's like on a comment."""
        for i, like in enumerate(self._likes):
            if like.comment_id == comment_id and like.user_id == user_id:
                self._likes.pop(i)
                return True
        return False
