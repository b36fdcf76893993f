"""Unit tests for CommentLikeService."""

from uuid import uuid4

import pytest

from leaf.domain.error import NotFoundError
from leaf.domain.model.comment_like import CommentLike
from leaf.domain.repository import CommentRepository
from leaf.domain.service import CommentLikeService, CommentService
from leaf.domain.value import CommentId, UserId
from leaf.persistence.repository.inmemory import (
    InMemoryCommentLikeRepository,
    InMemoryCommentRepository,
)
from tests.conftest import make_comment
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class UnconstrainedCommentLikeRepository(InMemoryCommentLikeRepository):
    """Stores duplicate likes instead of raising IntegrityError."""

    async def save(self, like: CommentLike) -> CommentLike:
        self._likes.append(like)
        return like


class TestLikeComment:
    """Tests for like_comment method."""

    @pytest.mark.asyncio
    async def test_like_increments_count(self, unit_env):
        """Liking records the like and bumps the counter."""
        # Arrange
        like_service = await unit_env.get(CommentLikeService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment()
        await comment_repo.save(comment)
        user_id = UserId(uuid4())

        # Act
        like = await like_service.like_comment(comment.id, user_id)

        # Assert
        assert like.comment_id == comment.id
        assert like.user_id == user_id
        assert await like_service.has_liked(comment.id, user_id) is True
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.like_count == 1

    @pytest.mark.asyncio
    async def test_like_twice_raises(self, unit_env):
        """A user likes a comment at most once."""
        # Arrange
        like_service = await unit_env.get(CommentLikeService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment()
        await comment_repo.save(comment)
        user_id = UserId(uuid4())
        await like_service.like_comment(comment.id, user_id)

        # Act & Assert
        with pytest.raises(ValueError, match="Already liked"):
            await like_service.like_comment(comment.id, user_id)

        stored = await comment_repo.find_by_id(comment.id)
        assert stored.like_count == 1

    @pytest.mark.asyncio
    async def test_existing_like_is_rejected_before_saving(self):
        """A repeated like is refused even without a uniqueness constraint."""
        # Arrange
        comment_repo = InMemoryCommentRepository()
        like_repo = UnconstrainedCommentLikeRepository()
        like_service = CommentLikeService(
            comment_like_repository=like_repo,
            comment_service=CommentService(comment_repository=comment_repo),
        )
        comment = make_comment()
        await comment_repo.save(comment)
        user_id = UserId(uuid4())
        await like_service.like_comment(comment.id, user_id)

        # Act & Assert
        with pytest.raises(ValueError, match="Already liked"):
            await like_service.like_comment(comment.id, user_id)

        assert len(like_repo._likes) == 1
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.like_count == 1

    @pytest.mark.asyncio
    async def test_like_missing_comment(self, unit_env):
        """Liking an unknown comment raises NotFoundError."""
        like_service = await unit_env.get(CommentLikeService)

        with pytest.raises(NotFoundError):
            await like_service.like_comment(CommentId(uuid4()), UserId(uuid4()))


class TestUnlikeComment:
    """Tests for unlike_comment method."""

    @pytest.mark.asyncio
    async def test_unlike_removes_like(self, unit_env):
        """Unliking deletes the like and lowers the counter."""
        # Arrange
        like_service = await unit_env.get(CommentLikeService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment()
        await comment_repo.save(comment)
        user_id = UserId(uuid4())
        await like_service.like_comment(comment.id, user_id)

        # Act
        removed = await like_service.unlike_comment(comment.id, user_id)

        # Assert
        assert removed is True
        assert await like_service.has_liked(comment.id, user_id) is False
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.like_count == 0

    @pytest.mark.asyncio
    async def test_unlike_without_like_keeps_count(self, unit_env):
        """Unliking something never liked leaves other users' likes counted."""
        # Arrange
        like_service = await unit_env.get(CommentLikeService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = make_comment()
        await comment_repo.save(comment)
        await like_service.like_comment(comment.id, UserId(uuid4()))

        # Act
        removed = await like_service.unlike_comment(comment.id, UserId(uuid4()))

        # Assert
        assert removed is False
        stored = await comment_repo.find_by_id(comment.id)
        assert stored.like_count == 1
