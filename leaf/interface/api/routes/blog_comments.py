"""Article comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, Query, status
from pydantic import BaseModel, Field

from leaf.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentTreeRequest,
    GetCommentTreeResponse,
    GetCommentTreeUseCase,
)
from leaf.application.usecase.comment_like import (
    LikeCommentRequest,
    LikeCommentResponse,
    LikeCommentUseCase,
    UnlikeCommentRequest,
    UnlikeCommentResponse,
    UnlikeCommentUseCase,
)
from leaf.domain.error import NotAuthorizedError, NotFoundError
from leaf.domain.service import JWTService

router = APIRouter(prefix="/blog", tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    article_id: str
    content: str = Field(min_length=1, max_length=1000)
    parent_id: str | None = None  # Parent comment ID for replies
    reply_to_user_id: str | None = None


@router.get("/articles/{article_id}/comments", response_model=GetCommentTreeResponse)
async def get_article_comments(
    article_id: str,
    get_comment_tree_use_case: FromDishka[GetCommentTreeUseCase],
    page: int = Query(default=1, ge=1),
    limit: int | None = Query(default=None, ge=1),
    auth_token: str | None = Cookie(default=None),
) -> GetCommentTreeResponse:
    """Get approved comments of an article as threads.

    Pagination counts top-level comments; every reply is nested under its
    parent. Authentication is optional and only affects ``is_liked``.

    Args:
        article_id: Article UUID
        get_comment_tree_use_case: Get comment tree use case from DI
        page: 1-based page number
        limit: Top-level comments per page (defaults from config)
        auth_token: Optional JWT token from cookie

    Returns:
        One page of threads and the top-level total
    """
    try:
        request = GetCommentTreeRequest(
            article_id=article_id, auth_token=auth_token, page=page, limit=limit
        )
        return await get_comment_tree_use_case.execute(request)
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.post(
    "/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> CreateCommentResponse:
    """Comment on an article or reply to another comment.

    Requires authentication.

    Args:
        request: Comment creation data
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Created comment details

    Raises:
        HTTPException: If not authenticated, parent not found, or validation fails
    """
    payload = jwt_service.get_payload_from_token(auth_token)
    if not payload:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to comment",
        )

    try:
        use_case_request = CreateCommentRequest(
            article_id=request.article_id,
            author_id=payload.user_id,
            author_handle=payload.handle,
            content=request.content,
            parent_id=request.parent_id,
            reply_to_user_id=request.reply_to_user_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except NotFoundError as e:
        logfire.warn("Comment creation failed - parent not found", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=str(e),
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> None:
    """Delete a comment together with its replies.

    Allowed for the comment's author and the author of its parent comment.

    Args:
        comment_id: Comment UUID
        delete_comment_use_case: Delete comment use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Raises:
        HTTPException: If not authenticated, not authorized, or comment not found
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to delete comments",
        )

    try:
        await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, user_id=user_id)
        )
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this comment",
        )
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


@router.post("/comments/{comment_id}/like", response_model=LikeCommentResponse)
async def like_comment(
    comment_id: str,
    like_comment_use_case: FromDishka[LikeCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> LikeCommentResponse:
    """Like a comment.

    Requires authentication.

    Raises:
        HTTPException: If not authenticated, already liked, or comment not found
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to like comments",
        )

    try:
        return await like_comment_use_case.execute(
            LikeCommentRequest(comment_id=comment_id, user_id=user_id)
        )
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


@router.delete("/comments/{comment_id}/like", response_model=UnlikeCommentResponse)
async def unlike_comment(
    comment_id: str,
    unlike_comment_use_case: FromDishka[UnlikeCommentUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> UnlikeCommentResponse:
    """Remove the caller's like from a comment.

    Requires authentication.
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required to unlike comments",
        )

    try:
        return await unlike_comment_use_case.execute(
            UnlikeCommentRequest(comment_id=comment_id, user_id=user_id)
        )
    except ValueError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=str(e),
        )
