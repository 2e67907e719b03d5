"""User routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, Query

from chirp.application.usecase.post import (
    ListUserPostsRequest,
    ListUserPostsUseCase,
    PostListResponse,
)
from chirp.application.usecase.user import (
    GetUserProfileRequest,
    GetUserProfileResponse,
    GetUserProfileUseCase,
)
from chirp.domain.value import Caller
from chirp.interface.api.auth_gate import require_caller

router = APIRouter(prefix="/users", tags=["users"], route_class=DishkaRoute)


@router.get("/{user_id}", response_model=GetUserProfileResponse)
async def get_user_profile(
    user_id: str,
    get_user_profile_use_case: FromDishka[GetUserProfileUseCase],
    caller: Caller = Depends(require_caller),
) -> GetUserProfileResponse:
    """Get a user's public profile.

    Example:
        GET /users/123e4567-e89b-12d3-a456-426614174000

        Response:
        {
            "id": "123e4567-e89b-12d3-a456-426614174000",
            "username": "ada",
            "created_at": "2025-01-01T00:00:00Z"
        }
    """
    return await get_user_profile_use_case.execute(
        GetUserProfileRequest(caller=caller, user_id=user_id)
    )


@router.get("/{user_id}/posts", response_model=PostListResponse)
async def list_user_posts(
    user_id: str,
    list_user_posts_use_case: FromDishka[ListUserPostsUseCase],
    caller: Caller = Depends(require_caller),
    limit: int | None = Query(default=None, description="Page size, clamped to 1-100"),
    offset: int | None = Query(default=None, description="Posts to skip"),
) -> PostListResponse:
    """List a user's posts, newest first.

    The caller sees all of their own posts but only other users' public posts.
    """
    return await list_user_posts_use_case.execute(
        ListUserPostsRequest(caller=caller, user_id=user_id, limit=limit, offset=offset)
    )
