"""Toggle like use case."""

import logfire
from pydantic import BaseModel

from chirp.domain.service import PostService
from chirp.domain.value import Caller, PostId, parse_id

from chirp.application.usecase.post.views import PostView


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    caller: Caller
    post_id: str


class ToggleLikeUseCase:
    """Use case for liking or unliking a post."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize toggle like use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: ToggleLikeRequest) -> PostView:
        """Execute toggle like flow.

        Steps:
        1. Check the caller can see the post
        2. Add the caller's like, or remove it if already present (atomic)
        3. Return the post as it is now

        Args:
            request: Toggle like request

        Returns:
            The post after the toggle

        Raises:
            ValidationError: If the post id is malformed
            NotFoundError: If the post doesn't exist or is hidden from the caller
        """
        post_id = parse_id(PostId, request.post_id, "post id")
        user_id = request.caller.user_id

        with logfire.span(
            "toggle_like.execute", post_id=str(post_id), user_id=str(user_id)
        ):
            await self.post_service.get_visible_post(post_id, user_id)
            await self.post_service.toggle_like(post_id, user_id)

            post = await self.post_service.get_visible_post(post_id, user_id)
            return PostView.from_post(post, user_id)
