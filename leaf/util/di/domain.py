"""Domain layer DI providers."""

from dishka import Scope, provide

from leaf.config import AuthSettings, CommentSettings
from leaf.domain.repository import CommentLikeRepository, CommentRepository
from leaf.domain.service import (
    CommentLikeService,
    CommentService,
    CommentTreeBuilder,
    JWTService,
)
from leaf.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            auto_approve=comment_settings.auto_approve,
        )

    @provide
    def get_comment_like_service(
        self,
        comment_like_repository: CommentLikeRepository,
        comment_service: CommentService,
    ) -> CommentLikeService:
        """Provide comment like domain service."""
        return CommentLikeService(
            comment_like_repository=comment_like_repository,
            comment_service=comment_service,
        )

    @provide
    def get_comment_tree_builder(
        self,
        comment_repository: CommentRepository,
        comment_like_repository: CommentLikeRepository,
    ) -> CommentTreeBuilder:
        """Provide comment tree builder."""
        return CommentTreeBuilder(
            comment_repository=comment_repository,
            comment_like_repository=comment_like_repository,
        )
