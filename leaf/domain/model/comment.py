"""Comment entity.

Comments belong either to an article or, when ``article_id`` is None, to the
guestbook. Replies point at their immediate parent through ``parent_id``;
storage places no limit on reply depth.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from leaf.domain.model.common import DomainModel
from leaf.domain.value import ArticleId, CommentId, CommentStatus, UserId
from leaf.domain.value.types import Handle


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - parent_id: Direct parent comment (None for top-level)
    - reply_to_user_id: User addressed by an @-reply (display only)
    """

    id: CommentId
    article_id: Optional[ArticleId] = None  # None means guestbook
    author_id: UserId
    author_handle: Handle
    parent_id: Optional[CommentId] = None
    reply_to_user_id: Optional[UserId] = None
    content: str = Field(min_length=1, max_length=1000)
    like_count: int = Field(default=0, ge=0)
    status: CommentStatus = CommentStatus.PENDING
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def is_top_level(self) -> bool:
        """Whether this comment starts a thread."""
        return self.parent_id is None
