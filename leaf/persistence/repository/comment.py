"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional, Tuple

from sqlalchemy import desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from leaf.domain.model import Comment
from leaf.domain.repository import CommentRepository
from leaf.domain.value import ArticleId, CommentId, CommentStatus
from leaf.persistence.mappers import comment_to_dict, row_to_comment
from leaf.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_approved_by_subject(
        self, article_id: Optional[ArticleId]
    ) -> List[Comment]:
        """Find every approved comment of an article or the guestbook."""
        stmt = select(comments_table).where(
            comments_table.c.status == CommentStatus.APPROVED.value
        )

        if article_id is None:
            stmt = stmt.where(comments_table.c.article_id.is_(None))
        else:
            stmt = stmt.where(comments_table.c.article_id == article_id)

        stmt = stmt.order_by(desc(comments_table.c.created_at))

        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def list_comments(
        self,
        page: int,
        limit: int,
        article_id: Optional[ArticleId] = None,
        status: Optional[CommentStatus] = None,
    ) -> Tuple[List[Comment], int]:
        """List comments for moderation, newest first."""
        conditions = []
        if article_id is not None:
            conditions.append(comments_table.c.article_id == article_id)
        if status is not None:
            conditions.append(comments_table.c.status == status.value)

        count_stmt = select(func.count()).select_from(comments_table).where(*conditions)
        total = (await self.session.execute(count_stmt)).scalar() or 0

        stmt = (
            select(comments_table)
            .where(*conditions)
            .order_by(desc(comments_table.c.created_at))
            .limit(limit)
            .offset(max(page - 1, 0) * limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()], total

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        comment_dict = comment_to_dict(comment)
        existing = await self.find_by_id(comment.id)

        if existing:
            stmt = (
                comments_table.update()
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment; replies and likes go with it (ON DELETE CASCADE)."""
        stmt = comments_table.delete().where(comments_table.c.id == comment_id)
        await self.session.execute(stmt)
        await self.session.flush()

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Set the moderation state of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(status=status.value, updated_at=datetime.now())
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def increment_like_count(self, comment_id: CommentId) -> None:
        """Atomically increment like_count by 1."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .values(like_count=comments_table.c.like_count + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_like_count(self, comment_id: CommentId) -> None:
        """Atomically decrement like_count by 1 (minimum 0)."""
        stmt = (
            comments_table.update()
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.like_count > 0)
            .values(like_count=comments_table.c.like_count - 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
