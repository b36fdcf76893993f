"""PostgreSQL implementation of CommentLike repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from leaf.domain.model import CommentLike
from leaf.domain.repository import CommentLikeRepository
from leaf.domain.value import CommentId, UserId
from leaf.persistence.mappers import comment_like_to_dict
from leaf.persistence.tables import comment_likes_table


class PostgresCommentLikeRepository(CommentLikeRepository):
    """PostgreSQL implementation of CommentLikeRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def exists(self, comment_id: CommentId, user_id: UserId) -> bool:
        """Check whether a user has liked a comment."""
        stmt = (
            select(comment_likes_table.c.id)
            .where(comment_likes_table.c.comment_id == comment_id)
            .where(comment_likes_table.c.user_id == user_id)
            .limit(1)
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def save(self, like: CommentLike) -> CommentLike:
        """Save a like.

        Raises:
            IntegrityError: If the user already liked the comment
        """
        stmt = comment_likes_table.insert().values(**comment_like_to_dict(like))
        await self.session.execute(stmt)
        await self.session.flush()
        return like

    async def delete_by_comment_and_user(
        self, comment_id: CommentId, user_id: UserId
    ) -> bool:
        """Delete a user's like on a comment."""
        stmt = (
            comment_likes_table.delete()
            .where(comment_likes_table.c.comment_id == comment_id)
            .where(comment_likes_table.c.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0
