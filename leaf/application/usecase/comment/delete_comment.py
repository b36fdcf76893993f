"""Delete comment use cases."""

from uuid import UUID

from pydantic import BaseModel

from leaf.domain.service import CommentService
from leaf.domain.value import CommentId, UserId


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str
    user_id: str  # User ID from authenticated user


class DeleteCommentUseCase:
    """Use case for a blog user deleting a comment.

    Allowed for the comment's author and for the author of the comment it
    replies to.
    """

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete flow.

        Raises:
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the user may not delete the comment
        """
        await self.comment_service.delete_comment_as_user(
            comment_id=CommentId(UUID(request.comment_id)),
            user_id=UserId(UUID(request.user_id)),
        )


class AdminDeleteCommentUseCase:
    """Use case for a moderator deleting any comment."""

    def __init__(self, comment_service: CommentService) -> None:
        self.comment_service = comment_service

    async def execute(self, comment_id: str) -> None:
        """Execute moderator delete flow.

        Raises:
            NotFoundError: If the comment doesn't exist
        """
        await self.comment_service.delete_comment(CommentId(UUID(comment_id)))
