"""Comment like entity."""

from datetime import datetime

from pydantic import Field

from leaf.domain.model.common import DomainModel
from leaf.domain.value import CommentId, CommentLikeId, UserId


class CommentLike(DomainModel):
    """A user's like on a comment. At most one per (comment, user)."""

    id: CommentLikeId
    comment_id: CommentId
    user_id: UserId
    created_at: datetime = Field(default_factory=datetime.now)
