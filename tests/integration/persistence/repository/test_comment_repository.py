"""Integration tests for the PostgreSQL comment repositories.

Require a reachable database at DATABASE__URL. Run with ``pytest -m integration``.
"""

from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine

from leaf.domain.model import CommentLike
from leaf.domain.repository import CommentLikeRepository, CommentRepository
from leaf.domain.value import ArticleId, CommentLikeId, CommentStatus, UserId
from leaf.persistence.database import create_tables
from tests.conftest import make_comment
from tests.harness import create_env_fixture

pytestmark = pytest.mark.integration

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


@pytest_asyncio.fixture(autouse=True)
async def tables(integration_env):
    """Make sure the schema exists."""
    engine = await integration_env.get(AsyncEngine)
    await create_tables(engine)


class TestCommentRepositoryIntegration:
    """Integration tests for PostgresCommentRepository."""

    @pytest.mark.asyncio
    async def test_approved_fetch_is_scoped_and_ordered(self, integration_env):
        """Only approved comments of the subject come back, newest first."""
        # Arrange
        repo = await integration_env.get(CommentRepository)
        article_id = ArticleId(uuid4())
        older = make_comment(article_id=article_id, minutes=0)
        newer = make_comment(article_id=article_id, minutes=1)
        pending = make_comment(
            article_id=article_id, minutes=2, status=CommentStatus.PENDING
        )
        for comment in (older, newer, pending):
            await repo.save(comment)
        await repo.save(make_comment(article_id=ArticleId(uuid4())))

        # Act
        result = await repo.find_approved_by_subject(article_id)

        # Assert
        assert [c.id for c in result] == [newer.id, older.id]

    @pytest.mark.asyncio
    async def test_guestbook_matches_null_article(self, integration_env):
        """None selects rows whose article_id IS NULL."""
        repo = await integration_env.get(CommentRepository)
        message = make_comment(article_id=None, content=f"guest {uuid4()}")
        await repo.save(message)

        result = await repo.find_approved_by_subject(None)

        assert message.id in {c.id for c in result}
        assert all(c.article_id is None for c in result)

    @pytest.mark.asyncio
    async def test_delete_cascades_to_replies(self, integration_env):
        """Deleting a parent removes its replies."""
        repo = await integration_env.get(CommentRepository)
        root = make_comment(article_id=ArticleId(uuid4()))
        reply = make_comment(article_id=root.article_id, parent_id=root.id)
        await repo.save(root)
        await repo.save(reply)

        await repo.delete(root.id)

        assert await repo.find_by_id(reply.id) is None

    @pytest.mark.asyncio
    async def test_like_counter_floor(self, integration_env):
        """The counter never drops below zero."""
        repo = await integration_env.get(CommentRepository)
        comment = make_comment(article_id=ArticleId(uuid4()))
        await repo.save(comment)

        await repo.increment_like_count(comment.id)
        await repo.decrement_like_count(comment.id)
        await repo.decrement_like_count(comment.id)

        stored = await repo.find_by_id(comment.id)
        assert stored.like_count == 0


class TestCommentLikeRepositoryIntegration:
    """Integration tests for PostgresCommentLikeRepository."""

    @pytest.mark.asyncio
    async def test_like_lookup_and_removal(self, integration_env):
        """Likes are found and removed per user."""
        # Arrange
        comment_repo = await integration_env.get(CommentRepository)
        like_repo = await integration_env.get(CommentLikeRepository)
        comment = make_comment(article_id=ArticleId(uuid4()))
        await comment_repo.save(comment)
        user_id = UserId(uuid4())
        await like_repo.save(
            CommentLike(id=CommentLikeId(uuid4()), comment_id=comment.id, user_id=user_id)
        )

        # Act & Assert
        assert await like_repo.exists(comment.id, user_id) is True
        assert await like_repo.exists(comment.id, UserId(uuid4())) is False
        assert await like_repo.delete_by_comment_and_user(comment.id, user_id) is True
        assert await like_repo.delete_by_comment_and_user(comment.id, user_id) is False
