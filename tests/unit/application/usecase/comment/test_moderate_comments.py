"""Unit tests for the comment moderation use cases."""

from uuid import uuid4

import pytest

from leaf.application.usecase.comment import (
    AdminDeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
    UpdateCommentStatusRequest,
    UpdateCommentStatusUseCase,
)
from leaf.domain.error import NotFoundError
from leaf.domain.repository import CommentRepository
from leaf.domain.value import ArticleId, CommentStatus
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListComments:
    """Tests for the admin listing."""

    @pytest.mark.asyncio
    async def test_lists_every_status(self, unit_env):
        """The admin list includes pending and rejected comments."""
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        for minutes, status in enumerate(CommentStatus):
            await comment_repo.save(make_comment(minutes=minutes, status=status))

        # Act
        response = await use_case.execute(ListCommentsRequest())

        # Assert
        assert response.total == 3
        assert {c.status for c in response.comments} == set(CommentStatus)

    @pytest.mark.asyncio
    async def test_filters_by_article_and_status(self, unit_env):
        """Both filters apply together."""
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        article_id = ArticleId(uuid4())
        target = make_comment(article_id=article_id, status=CommentStatus.PENDING)
        await comment_repo.save(target)
        await comment_repo.save(make_comment(article_id=article_id))
        await comment_repo.save(make_comment(status=CommentStatus.PENDING))

        # Act
        response = await use_case.execute(
            ListCommentsRequest(
                article_id=str(article_id), status=CommentStatus.PENDING
            )
        )

        # Assert
        assert response.total == 1
        assert response.comments[0].comment_id == str(target.id)

    @pytest.mark.asyncio
    async def test_limit_is_capped(self, unit_env):
        """Admin page size honours the configured maximum."""
        use_case = await unit_env.get(ListCommentsUseCase)

        response = await use_case.execute(ListCommentsRequest(limit=500))

        assert response.limit == 100


class TestUpdateCommentStatus:
    """Tests for approve/reject."""

    @pytest.mark.asyncio
    async def test_approve_pending(self, unit_env):
        """Approving a pending comment makes it approved."""
        use_case = await unit_env.get(UpdateCommentStatusUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment(status=CommentStatus.PENDING)
        await comment_repo.save(comment)

        result = await use_case.execute(
            UpdateCommentStatusRequest(
                comment_id=str(comment.id), status=CommentStatus.APPROVED
            )
        )

        assert result.status == CommentStatus.APPROVED

    @pytest.mark.asyncio
    async def test_unknown_comment(self, unit_env):
        """Unknown comments raise NotFoundError."""
        use_case = await unit_env.get(UpdateCommentStatusUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateCommentStatusRequest(
                    comment_id=str(uuid4()), status=CommentStatus.REJECTED
                )
            )


class TestAdminDeleteComment:
    """Tests for moderator deletion."""

    @pytest.mark.asyncio
    async def test_deletes_thread(self, unit_env):
        """Deleting a comment removes its replies as well."""
        use_case = await unit_env.get(AdminDeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        root = make_comment()
        reply = make_comment(parent_id=root.id)
        await comment_repo.save(root)
        await comment_repo.save(reply)

        await use_case.execute(str(root.id))

        assert await comment_repo.find_by_id(root.id) is None
        assert await comment_repo.find_by_id(reply.id) is None
