"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from leaf.domain.model import Comment
from leaf.domain.value import ArticleId, CommentId, CommentStatus, UserId
from leaf.domain.value.types import Handle

# Spans and logs stay local during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_comment(
    article_id: ArticleId | None = None,
    parent_id: CommentId | None = None,
    minutes: int = 0,
    status: CommentStatus = CommentStatus.APPROVED,
    author_id: UserId | None = None,
    content: str = "Test comment",
    like_count: int = 0,
    comment_id: CommentId | None = None,
) -> Comment:
    """Helper function to build test comments.

    Args:
        article_id: Article the comment belongs to (None for guestbook)
        parent_id: Parent comment for replies
        minutes: Offset from BASE_TIME, later comments sort first
        status: Moderation state
        author_id: Author (random if omitted)
        content: Comment text
        like_count: Stored like counter
        comment_id: Fixed ID (random if omitted)

    Returns:
        Comment domain model
    """
    created_at = BASE_TIME + timedelta(minutes=minutes)
    return Comment(
        id=comment_id or CommentId(uuid4()),
        article_id=article_id,
        author_id=author_id or UserId(uuid4()),
        author_handle=Handle(root="reader"),
        parent_id=parent_id,
        reply_to_user_id=None,
        content=content,
        like_count=like_count,
        status=status,
        created_at=created_at,
        updated_at=created_at,
    )
