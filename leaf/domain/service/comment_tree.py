"""Comment tree assembly.

Turns the flat approved-comment list of an article (or the guestbook) into
threads paginated by top-level comment.
"""

from dataclasses import dataclass, field
from datetime import datetime

import logfire

from leaf.domain.model import Comment
from leaf.domain.repository import CommentLikeRepository, CommentRepository
from leaf.domain.value import ArticleId, CommentId, CommentStatus, UserId
from leaf.domain.value.types import Handle

from .base import Service


@dataclass
class CommentView:
    """A comment as shown to one viewer, with its replies attached."""

    id: CommentId
    article_id: ArticleId | None
    author_id: UserId
    author_handle: Handle
    parent_id: CommentId | None
    reply_to_user_id: UserId | None
    content: str
    like_count: int
    status: CommentStatus
    created_at: datetime
    is_liked: bool = False
    replies: list["CommentView"] = field(default_factory=list)


@dataclass
class CommentTree:
    """One page of threads plus the number of top-level comments overall."""

    items: list[CommentView]
    total: int


class CommentTreeBuilder(Service):
    """Builds paginated reply trees for a subject.

    The whole approved set for the subject is loaded and paginated in memory,
    which keeps replies attached no matter which page their parent lands on.
    This assumes a subject holds at most a few thousand comments.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        comment_like_repository: CommentLikeRepository,
    ) -> None:
        """Initialize tree builder.

        Args:
            comment_repository: Source of approved comments
            comment_like_repository: Answers whether a viewer liked a comment
        """
        self.comment_repository = comment_repository
        self.comment_like_repository = comment_like_repository

    async def build_tree(
        self,
        article_id: ArticleId | None,
        viewer_id: UserId | None,
        page: int,
        page_size: int,
    ) -> CommentTree:
        """Build one page of comment threads.

        Algorithm:
        1. Fetch all approved comments for the subject (store order)
        2. Allocate a view per comment and index it by comment ID
        3. Resolve the viewer's like status per comment
        4. Attach each reply to its immediate parent, drop orphans
        5. Slice the top-level list for the requested page

        Args:
            article_id: Article ID, or None for the guestbook
            viewer_id: Requesting user, None for anonymous viewers
            page: 1-based page number
            page_size: Top-level comments per page

        Returns:
            Page of top-level views with full reply subtrees, and the
            top-level total
        """
        with logfire.span(
            "comment_tree.build_tree",
            article_id=str(article_id) if article_id else None,
            viewer_id=str(viewer_id) if viewer_id else None,
            page=page,
            page_size=page_size,
        ):
            # Store failures propagate to the caller
            comments = await self.comment_repository.find_approved_by_subject(
                article_id
            )

            views: list[CommentView] = []
            index_by_id: dict[CommentId, int] = {}
            for comment in comments:
                index_by_id[comment.id] = len(views)
                views.append(
                    _to_view(comment, await self._has_liked(comment, viewer_id))
                )

            reply_indices: list[list[int]] = [[] for _ in views]
            top_level: list[int] = []
            for index, comment in enumerate(comments):
                if comment.is_top_level:
                    top_level.append(index)
                    continue

                parent_index = index_by_id.get(comment.parent_id)
                if parent_index is None:
                    logfire.debug(
                        "Dropping reply with unknown parent",
                        comment_id=str(comment.id),
                        parent_id=str(comment.parent_id),
                    )
                    continue
                reply_indices[parent_index].append(index)

            # Out-of-range windows collapse to an empty page
            total = len(top_level)
            offset = (page - 1) * page_size
            start = min(max(offset, 0), total)
            end = min(max(offset + page_size, 0), total)

            page_indices = top_level[start:end]

            # Reply depth is unbounded, so subtrees are filled from an explicit stack
            pending = list(page_indices)
            while pending:
                index = pending.pop()
                children = reply_indices[index]
                views[index].replies = [views[child] for child in children]
                pending.extend(children)

            items = [views[index] for index in page_indices]

            logfire.info(
                "Comment tree built",
                fetched=len(comments),
                total=total,
                returned=len(items),
            )
            return CommentTree(items=items, total=total)

    async def _has_liked(self, comment: Comment, viewer_id: UserId | None) -> bool:
        """Like status for one comment, failing open to False."""
        if viewer_id is None:
            return False

        try:
            return await self.comment_like_repository.exists(comment.id, viewer_id)
        except Exception as e:
            logfire.warn(
                "Like lookup failed, treating as not liked",
                comment_id=str(comment.id),
                viewer_id=str(viewer_id),
                error=str(e),
            )
            return False


def _to_view(comment: Comment, is_liked: bool) -> CommentView:
    return CommentView(
        id=comment.id,
        article_id=comment.article_id,
        author_id=comment.author_id,
        author_handle=comment.author_handle,
        parent_id=comment.parent_id,
        reply_to_user_id=comment.reply_to_user_id,
        content=comment.content,
        like_count=comment.like_count,
        status=comment.status,
        created_at=comment.created_at,
        is_liked=is_liked,
    )
