"""Comment moderation routes for the admin panel."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel

from leaf.application.usecase.comment import (
    AdminDeleteCommentUseCase,
    ListCommentsRequest,
    ListCommentsResponse,
    ListCommentsUseCase,
    ModeratedComment,
    UpdateCommentStatusRequest,
    UpdateCommentStatusUseCase,
)
from leaf.domain.error import NotFoundError
from leaf.domain.service import JWTService, TokenPayload
from leaf.domain.value import CommentStatus

router = APIRouter(prefix="/comments", tags=["admin"], route_class=DishkaRoute)


class UpdateStatusAPIRequest(BaseModel):
    """API request for moderating a comment."""

    status: CommentStatus


def _require_admin(jwt_service: JWTService, auth_token: str | None) -> TokenPayload:
    payload = jwt_service.get_payload_from_token(auth_token)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    if not payload.is_admin:
        logfire.warn("Non-admin access to moderation", user_id=payload.user_id)
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin role required",
        )
    return payload


@router.get("", response_model=ListCommentsResponse)
async def list_comments(
    list_comments_use_case: FromDishka[ListCommentsUseCase],
    jwt_service: FromDishka[JWTService],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1),
    article_id: str | None = None,
    comment_status: CommentStatus | None = Query(default=None, alias="status"),
    auth_token: str | None = Cookie(default=None),
) -> ListCommentsResponse:
    """List comments of every status, newest first.

    Args:
        list_comments_use_case: List comments use case from DI
        jwt_service: JWT service for token verification (injected)
        page: 1-based page number
        limit: Comments per page
        article_id: Only comments of this article
        comment_status: Only comments in this moderation state
        auth_token: JWT token from cookie

    Returns:
        Page of comments and the number of matches
    """
    _require_admin(jwt_service, auth_token)

    try:
        request = ListCommentsRequest(
            page=page, limit=limit, article_id=article_id, status=comment_status
        )
        return await list_comments_use_case.execute(request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.patch("/{comment_id}/status", response_model=ModeratedComment)
async def update_comment_status(
    comment_id: str,
    request: UpdateStatusAPIRequest,
    update_comment_status_use_case: FromDishka[UpdateCommentStatusUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> ModeratedComment:
    """Approve, reject or reset a comment to pending."""
    admin = _require_admin(jwt_service, auth_token)

    try:
        result = await update_comment_status_use_case.execute(
            UpdateCommentStatusRequest(comment_id=comment_id, status=request.status)
        )
        logfire.info(
            "Comment moderated",
            comment_id=comment_id,
            status=request.status.value,
            admin_id=admin.user_id,
        )
        return result
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    admin_delete_comment_use_case: FromDishka[AdminDeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete any comment together with its replies."""
    _require_admin(jwt_service, auth_token)

    try:
        await admin_delete_comment_use_case.execute(comment_id)
    except NotFoundError as e:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
