"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from leaf.domain.model.comment import Comment
from leaf.domain.repository.comment import CommentRepository
from leaf.domain.value import ArticleId, CommentId, CommentStatus


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_approved_by_subject(
        self, article_id: Optional[ArticleId]
    ) -> list[Comment]:
        """Find every approved comment of an article or the guestbook."""
        comments = [
            c
            for c in self._comments.values()
            if c.article_id == article_id and c.status == CommentStatus.APPROVED
        ]

        # Newest first; ties keep insertion order
        comments.sort(key=lambda c: c.created_at, reverse=True)

        return comments

    async def list_comments(
        self,
        page: int,
        limit: int,
        article_id: Optional[ArticleId] = None,
        status: Optional[CommentStatus] = None,
    ) -> tuple[list[Comment], int]:
        """List comments for moderation, newest first."""
        comments = list(self._comments.values())

        if article_id is not None:
            comments = [c for c in comments if c.article_id == article_id]
        if status is not None:
            comments = [c for c in comments if c.status == status]

        comments.sort(key=lambda c: c.created_at, reverse=True)

        offset = max(page - 1, 0) * limit
        return comments[offset : offset + limit], len(comments)

    async def save(self, comment: Comment) -> Comment:
        """Save or update a comment."""
        self._comments[comment.id] = comment
        return comment

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and, like the database cascade, its replies."""
        pending = [comment_id]
        while pending:
            current = pending.pop()
            self._comments.pop(current, None)
            pending.extend(
                c.id for c in self._comments.values() if c.parent_id == current
            )

    async def update_status(
        self, comment_id: CommentId, status: CommentStatus
    ) -> Optional[Comment]:
        """Set the moderation state of a comment."""
        comment = self._comments.get(comment_id)
        if not comment:
            return None

        updated = comment.model_copy(
            update={"status": status, "updated_at": datetime.now()}
        )
        self._comments[comment_id] = updated
        return updated

    async def increment_like_count(self, comment_id: CommentId) -> None:
        """Increment like_count by 1."""
        comment = self._comments.get(comment_id)
        if comment:
            self._comments[comment_id] = comment.model_copy(
                update={"like_count": comment.like_count + 1}
            )

    async def decrement_like_count(self, comment_id: CommentId) -> None:
        """Decrement like_count by 1 (minimum 0)."""
        comment = self._comments.get(comment_id)
        if comment and comment.like_count > 0:
            self._comments[comment_id] = comment.model_copy(
                update={"like_count": comment.like_count - 1}
            )
