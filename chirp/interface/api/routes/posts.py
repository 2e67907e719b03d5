"""Post routes."""

import logging

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query, status
from pydantic import BaseModel

from chirp.application.usecase.comment import AddCommentRequest, AddCommentUseCase
from chirp.application.usecase.like import ToggleLikeRequest, ToggleLikeUseCase
from chirp.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    DeletePostRequest,
    DeletePostResponse,
    DeletePostUseCase,
    GetPostRequest,
    GetPostUseCase,
    ListPostsRequest,
    ListPostsUseCase,
    PostListResponse,
    PostView,
    UpdatePostRequest,
    UpdatePostUseCase,
)
from chirp.domain.value import Caller
from chirp.interface.api.auth_gate import require_caller

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post."""

    content: str
    is_public: bool = True


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post. Omitted fields are left unchanged."""

    content: str | None = None
    is_public: bool | None = None


class AddCommentAPIRequest(BaseModel):
    """API request for commenting on a post."""

    text: str


@router.post("", response_model=PostView, status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
    caller: Caller = Depends(require_caller),
) -> PostView:
    """Create a new post owned by the caller."""
    result = await create_post_use_case.execute(
        CreatePostRequest(
            caller=caller, content=request.content, is_public=request.is_public
        )
    )
    logger.info(f"User {caller.user_id} created post {result.id}")
    return result


@router.get("", response_model=PostListResponse)
async def list_posts(
    list_posts_use_case: FromDishka[ListPostsUseCase],
    caller: Caller = Depends(require_caller),
    limit: int | None = Query(default=None, description="Page size, clamped to 1-100"),
    offset: int | None = Query(default=None, description="Posts to skip"),
) -> PostListResponse:
    """List public posts, newest first."""
    return await list_posts_use_case.execute(
        ListPostsRequest(caller=caller, limit=limit, offset=offset)
    )


@router.get("/{post_id}", response_model=PostView)
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
    caller: Caller = Depends(require_caller),
) -> PostView:
    """Get a single post the caller can see."""
    return await get_post_use_case.execute(
        GetPostRequest(caller=caller, post_id=post_id)
    )


@router.patch("/{post_id}", response_model=PostView)
async def update_post(
    post_id: str,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
    caller: Caller = Depends(require_caller),
) -> PostView:
    """Update a post's content and/or visibility. Author only."""
    result = await update_post_use_case.execute(
        UpdatePostRequest(
            caller=caller,
            post_id=post_id,
            content=request.content,
            is_public=request.is_public,
        )
    )
    logger.info(f"User {caller.user_id} updated post {post_id}")
    return result


@router.delete("/{post_id}", response_model=DeletePostResponse)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    caller: Caller = Depends(require_caller),
) -> DeletePostResponse:
    """Delete a post with its likes and comments. Author only."""
    result = await delete_post_use_case.execute(
        DeletePostRequest(caller=caller, post_id=post_id)
    )
    logger.info(f"User {caller.user_id} deleted post {post_id}")
    return result


@router.post("/{post_id}/like", response_model=PostView)
async def toggle_like(
    post_id: str,
    toggle_like_use_case: FromDishka[ToggleLikeUseCase],
    caller: Caller = Depends(require_caller),
) -> PostView:
    """Like the post, or remove the caller's like if already present."""
    return await toggle_like_use_case.execute(
        ToggleLikeRequest(caller=caller, post_id=post_id)
    )


@router.post(
    "/{post_id}/comments",
    response_model=PostView,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    post_id: str,
    request: AddCommentAPIRequest,
    add_comment_use_case: FromDishka[AddCommentUseCase],
    caller: Caller = Depends(require_caller),
) -> PostView:
    """Append a comment to a post the caller can see."""
    return await add_comment_use_case.execute(
        AddCommentRequest(caller=caller, post_id=post_id, text=request.text)
    )
