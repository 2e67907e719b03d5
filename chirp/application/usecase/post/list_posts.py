"""List public posts use case."""

from pydantic import BaseModel

from chirp.domain.service import PostService
from chirp.domain.service.post_service import normalize_pagination
from chirp.domain.value import Caller

from .views import PostListResponse, PostView


class ListPostsRequest(BaseModel):
    """List posts request."""

    caller: Caller
    limit: int | None = None
    offset: int | None = None


class ListPostsUseCase:
    """Use case for the public feed."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize list posts use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ListPostsRequest) -> PostListResponse:
        """List public posts, newest first.

        Args:
            request: Pagination and caller

        Returns:
            One page of posts with the total count

        Raises:
            ValidationError: If offset is negative
        """
        limit, offset = normalize_pagination(request.limit, request.offset)
        posts, total = await self.post_service.list_public(limit, offset)

        return PostListResponse(
            posts=[PostView.from_post(p, request.caller.user_id) for p in posts],
            total=total,
            limit=limit,
            offset=offset,
        )
