"""Guestbook routes.

Guestbook messages are comments without an article.
"""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel, Field

from leaf.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
)
from leaf.domain.error import NotFoundError
from leaf.domain.service import JWTService

router = APIRouter(prefix="/blog/guestbook", tags=["guestbook"], route_class=DishkaRoute)


class CreateMessageAPIRequest(BaseModel):
    """API request for leaving a guestbook message."""

    content: str = Field(min_length=1, max_length=1000)
    parent_id: str | None = None
    reply_to_user_id: str | None = None


@router.get("", response_model=GetCommentTreeResponse)
async def get_guestbook(
    get_comment_tree_use_case: FromDishka[GetCommentTreeUseCase],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    auth_token: str | None = Cookie(default=None),
) -> GetCommentTreeResponse:
    """Get approved guestbook messages as threads."""
    request = GetCommentTreeRequest(
        article_id=None, auth_token=auth_token, page=page, limit=limit
    )
    return await get_comment_tree_use_case.execute(request)


@router.post(
    "",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_message(
    request: CreateMessageAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Leave a guestbook message or reply to one.

    Requires authentication.
    """
    payload = jwt_service.get_payload_from_token(auth_token)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to sign the guestbook",
        )

    try:
        use_case_request = CreateCommentRequest(
            article_id=None,
            author_id=payload.user_id,
            author_handle=payload.handle,
            content=request.content,
            parent_id=request.parent_id,
            reply_to_user_id=request.reply_to_user_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Guestbook reply failed - parent not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
