"""Get comment tree use case."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel

from leaf.config import CommentSettings
from leaf.domain.service import CommentTreeBuilder, CommentView, JWTService
from leaf.domain.value import ArticleId, CommentStatus, UserId


class CommentItem(BaseModel):
    """Comment in a thread, with its replies nested below it."""

    id: str
    article_id: str | None
    author_id: str
    author_handle: str
    parent_id: str | None
    reply_to_user_id: str | None
    content: str
    like_count: int
    is_liked: bool
    status: CommentStatus
    created_at: datetime
    replies: list["CommentItem"]

    @classmethod
    def from_domain(cls, view: CommentView) -> "CommentItem":
        """Convert a domain CommentView, replies included.

        Threads may nest arbitrarily deep, so the subtree is walked with an
        explicit stack.
        """
        root = cls._from_view(view)
        pending = [(view, root)]
        while pending:
            current, item = pending.pop()
            item.replies = [cls._from_view(reply) for reply in current.replies]
            pending.extend(zip(current.replies, item.replies))
        return root

    @classmethod
    def _from_view(cls, view: CommentView) -> "CommentItem":
        return cls(
            id=str(view.id),
            article_id=str(view.article_id) if view.article_id else None,
            author_id=str(view.author_id),
            author_handle=view.author_handle.root,
            parent_id=str(view.parent_id) if view.parent_id else None,
            reply_to_user_id=(
                str(view.reply_to_user_id) if view.reply_to_user_id else None
            ),
            content=view.content,
            like_count=view.like_count,
            is_liked=view.is_liked,
            status=view.status,
            created_at=view.created_at,
            replies=[],
        )


class GetCommentTreeRequest(BaseModel):
    """Get comment tree request."""

    article_id: str | None = None  # UUID string, None for the guestbook
    auth_token: str | None = None  # JWT token (optional)
    page: int = 1
    limit: int | None = None  # Falls back to the configured page size


class GetCommentTreeResponse(BaseModel):
    """One page of comment threads."""

    article_id: str | None
    comments: list[CommentItem]
    total: int  # Top-level comments only
    page: int
    limit: int


class GetCommentTreeUseCase:
    """Use case for reading an article's comments or the guestbook as threads."""

    def __init__(
        self,
        comment_tree_builder: CommentTreeBuilder,
        jwt_service: JWTService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize get comment tree use case.

        Args:
            comment_tree_builder: Builds the paginated threads
            jwt_service: JWT service for identifying the viewer
            comment_settings: Page size defaults and limits
        """
        self.comment_tree_builder = comment_tree_builder
        self.jwt_service = jwt_service
        self.comment_settings = comment_settings

    async def execute(self, request: GetCommentTreeRequest) -> GetCommentTreeResponse:
        """Execute get comment tree flow.

        Anonymous viewers, and viewers with an invalid token, see every
        comment as not liked.

        Args:
            request: Subject, optional auth token and page

        Returns:
            Threads for the page with the viewer's like state
        """
        article_id = ArticleId(UUID(request.article_id)) if request.article_id else None

        default_limit = (
            self.comment_settings.article_page_size
            if article_id
            else self.comment_settings.guestbook_page_size
        )
        limit = min(request.limit or default_limit, self.comment_settings.max_page_size)

        viewer_id = self._resolve_viewer(request.auth_token)

        tree = await self.comment_tree_builder.build_tree(
            article_id=article_id,
            viewer_id=viewer_id,
            page=request.page,
            page_size=limit,
        )

        return GetCommentTreeResponse(
            article_id=request.article_id,
            comments=[CommentItem.from_domain(view) for view in tree.items],
            total=tree.total,
            page=request.page,
            limit=limit,
        )

    def _resolve_viewer(self, auth_token: str | None) -> UserId | None:
        """Viewer ID from the token, None when anonymous or unreadable."""
        user_id = self.jwt_service.get_user_id_from_token(auth_token)
        if not user_id:
            return None
        try:
            return UserId(UUID(user_id))
        except ValueError:
            return None
