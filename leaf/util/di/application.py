"""Application layer DI providers."""

from dishka import Scope, provide

from leaf.application.usecase.comment import (
    AdminDeleteCommentUseCase,
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentTreeUseCase,
    ListCommentsUseCase,
    UpdateCommentStatusUseCase,
)
from leaf.application.usecase.comment_like import (
    LikeCommentUseCase,
    UnlikeCommentUseCase,
)
from leaf.config import CommentSettings
from leaf.domain.service import (
    CommentLikeService,
    CommentService,
    CommentTreeBuilder,
    JWTService,
)
from leaf.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Public comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_comment_tree_use_case(
        self,
        comment_tree_builder: CommentTreeBuilder,
        jwt_service: JWTService,
        comment_settings: CommentSettings,
    ) -> GetCommentTreeUseCase:
        """Provide get comment tree use case."""
        return GetCommentTreeUseCase(
            comment_tree_builder=comment_tree_builder,
            jwt_service=jwt_service,
            comment_settings=comment_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Like use cases
    @provide(scope=Scope.REQUEST)
    def get_like_comment_use_case(
        self, comment_like_service: CommentLikeService
    ) -> LikeCommentUseCase:
        """Provide like comment use case."""
        return LikeCommentUseCase(comment_like_service=comment_like_service)

    @provide(scope=Scope.REQUEST)
    def get_unlike_comment_use_case(
        self, comment_like_service: CommentLikeService
    ) -> UnlikeCommentUseCase:
        """Provide unlike comment use case."""
        return UnlikeCommentUseCase(comment_like_service=comment_like_service)

    # Moderation use cases
    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self, comment_service: CommentService, comment_settings: CommentSettings
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            comment_service=comment_service, comment_settings=comment_settings
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_status_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentStatusUseCase:
        """Provide update comment status use case."""
        return UpdateCommentStatusUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_admin_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> AdminDeleteCommentUseCase:
        """Provide moderator delete comment use case."""
        return AdminDeleteCommentUseCase(comment_service=comment_service)
