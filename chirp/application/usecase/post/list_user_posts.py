"""List a user's posts use case."""

import logfire
from pydantic import BaseModel

from chirp.domain.service import PostService
from chirp.domain.service.post_service import normalize_pagination
from chirp.domain.value import Caller, UserId, parse_id

from .views import PostListResponse, PostView


class ListUserPostsRequest(BaseModel):
    """List user posts request."""

    caller: Caller
    user_id: str
    limit: int | None = None
    offset: int | None = None


class ListUserPostsUseCase:
    """Use case for a user's feed.

    Callers see all of their own posts and only the public posts of others.
    """

    def __init__(self, post_service: PostService) -> None:
        """Initialize list user posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListUserPostsRequest) -> PostListResponse:
        """List the target user's posts, newest first.

        An unknown user simply has no posts.

        Raises:
            ValidationError: If the user id is malformed or offset is negative
        """
        author_id = parse_id(UserId, request.user_id, "user id")
        limit, offset = normalize_pagination(request.limit, request.offset)

        include_private = author_id == request.caller.user_id
        logfire.debug(
            "Listing user posts",
            author_id=str(author_id),
            include_private=include_private,
        )

        posts, total = await self.post_service.list_by_author(
            author_id, include_private=include_private, limit=limit, offset=offset
        )

        return PostListResponse(
            posts=[PostView.from_post(p, request.caller.user_id) for p in posts],
            total=total,
            limit=limit,
            offset=offset,
        )
